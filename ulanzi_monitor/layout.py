"""
Pixel layout planning for the commit chart.

Two strategies place day cells on the matrix:

- "policy": square size and spacing picked from a small table keyed by the
  number of days, cells wrapped row by row and centred vertically.
- "grid": a fixed days_across x days_down grid filled column by column.

Also plans the one-line progress bar used by the daily goal app.
"""

import math
from dataclasses import dataclass
from typing import Protocol

from ulanzi_monitor.primitives import Line


@dataclass(frozen=True)
class CanvasSpec:
    """Pixel matrix size. The Ulanzi TC001 is 32x8."""

    width: int = 32
    height: int = 8


@dataclass(frozen=True)
class Cell:
    """Top-left pixel origin and side length of one day square."""

    x: int
    y: int
    size: int


@dataclass(frozen=True)
class LayoutPolicy:
    """One row of the policy table. max_days of None means unbounded."""

    max_days: int | None
    size: int
    spacing: int
    start_x: int


DEFAULT_POLICIES = (
    LayoutPolicy(max_days=10, size=3, spacing=1, start_x=1),
    LayoutPolicy(max_days=16, size=2, spacing=0, start_x=0),
    LayoutPolicy(max_days=None, size=1, spacing=0, start_x=0),
)


class LayoutStrategy(Protocol):
    def plan(self, series_length: int, canvas: CanvasSpec) -> list[Cell]: ...


def _check_length(series_length: int) -> None:
    if series_length < 0:
        raise ValueError(f"series_length must not be negative, got {series_length}")


class PolicyTableLayout:
    """Pick square size and spacing from a table keyed by series length."""

    def __init__(self, policies: tuple[LayoutPolicy, ...] = DEFAULT_POLICIES):
        if not policies:
            raise ValueError("At least one layout policy is required")
        self.policies = policies

    def policy_for(self, series_length: int) -> LayoutPolicy:
        for policy in self.policies:
            if policy.max_days is None or series_length <= policy.max_days:
                return policy
        raise ValueError(f"No layout policy covers {series_length} days")

    @staticmethod
    def _grid(policy: LayoutPolicy, canvas: CanvasSpec) -> tuple[int, int]:
        """Columns and rows of policy-sized squares the canvas holds."""
        pitch = policy.size + policy.spacing
        columns = (canvas.width - policy.start_x + policy.spacing) // pitch
        rows = (canvas.height + policy.spacing) // pitch
        return max(columns, 0), max(rows, 0)

    def fits(self, series_length: int, canvas: CanvasSpec) -> bool:
        """Whether plan() can place series_length cells on the canvas."""
        if series_length < 0:
            return False
        try:
            policy = self.policy_for(series_length)
        except ValueError:
            return False
        columns, rows = self._grid(policy, canvas)
        return series_length <= columns * rows

    def plan(self, series_length: int, canvas: CanvasSpec) -> list[Cell]:
        """
        Place series_length cells on the canvas.

        Raises:
            ValueError: If the chosen policy cannot fit that many cells
        """
        _check_length(series_length)
        policy = self.policy_for(series_length)
        if series_length == 0:
            return []

        pitch = policy.size + policy.spacing
        columns, rows = self._grid(policy, canvas)
        if series_length > columns * rows:
            raise ValueError(
                f"{series_length} days do not fit a {canvas.width}x{canvas.height} "
                f"canvas with {policy.size}px squares"
            )

        rows_used = math.ceil(series_length / columns)
        block_height = rows_used * pitch - policy.spacing
        top = (canvas.height - block_height) // 2

        return [
            Cell(
                x=policy.start_x + (i % columns) * pitch,
                y=top + (i // columns) * pitch,
                size=policy.size,
            )
            for i in range(series_length)
        ]


class FixedGridLayout:
    """Fixed grid filled column-major; days past the grid are dropped."""

    def __init__(self, days_across: int = 16, days_down: int = 4, cell_size: int = 2):
        if days_across <= 0 or days_down <= 0 or cell_size <= 0:
            raise ValueError("Grid dimensions and cell size must be positive")
        self.days_across = days_across
        self.days_down = days_down
        self.cell_size = cell_size

    @property
    def capacity(self) -> int:
        return self.days_across * self.days_down

    def plan(self, series_length: int, canvas: CanvasSpec) -> list[Cell]:
        _check_length(series_length)
        if (
            self.days_across * self.cell_size > canvas.width
            or self.days_down * self.cell_size > canvas.height
        ):
            raise ValueError(
                f"A {self.days_across}x{self.days_down} grid of {self.cell_size}px "
                f"cells does not fit a {canvas.width}x{canvas.height} canvas"
            )

        return [
            Cell(
                x=(i // self.days_down) * self.cell_size,
                y=(i % self.days_down) * self.cell_size,
                size=self.cell_size,
            )
            for i in range(min(series_length, self.capacity))
        ]


LAYOUTS = {
    "policy": PolicyTableLayout,
    "grid": FixedGridLayout,
}


def get_layout(name: str) -> LayoutStrategy:
    """Build the layout strategy registered under name."""
    try:
        return LAYOUTS[name]()
    except KeyError:
        raise ValueError(f"Unknown layout strategy: {name!r}")


def plan_layout(
    series_length: int,
    canvas: CanvasSpec | None = None,
    strategy: str = "policy",
) -> list[Cell]:
    """Plan cell positions with the named strategy on the given canvas."""
    return get_layout(strategy).plan(series_length, canvas or CanvasSpec())


def plan_progress_bar(
    progress: float,
    width: int,
    offset: int = 0,
    y: int = 7,
    progress_color: str = "#39D353",
    background_color: str = "#161B22",
) -> list[Line]:
    """
    Plan a one-pixel-high progress bar.

    The first floor(progress * width) pixels get progress_color and the rest
    background_color, each span drawn as a single line. An empty span is
    left out, so a bar at 0 or 1 is one line.

    Args:
        progress: Fraction complete, in [0, 1]
        width: Bar length in pixels
        offset: x of the first bar pixel
        y: Row the bar is drawn on

    Raises:
        ValueError: If progress is outside [0, 1] or width is not positive
    """
    if not 0 <= progress <= 1:
        raise ValueError(f"progress must be within [0, 1], got {progress}")
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")

    filled = math.floor(progress * width)
    lines = []

    if filled > 0:
        lines.append(Line(offset, y, offset + filled - 1, y, progress_color))
    if filled < width:
        lines.append(Line(offset + filled, y, offset + width - 1, y, background_color))

    return lines
