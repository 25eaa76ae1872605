"""
Turn pull request counts and commit series into AWTRIX payloads.
"""

from ulanzi_monitor.colors import EMPTY_COLOR, QUANTILE_COLORS, ColorMapper
from ulanzi_monitor.history_calculator import DayBucketSeries
from ulanzi_monitor.layout import CanvasSpec, LayoutStrategy, plan_progress_bar
from ulanzi_monitor.primitives import FilledRect, Line, to_commands
from ulanzi_monitor.schemas import TextFragment, UlanziPayload

GITHUB_ICON = "55529"
PR_COUNT_COLOR = "#8783D7"
PR_LABEL_COLOR = "#FFFFFF"

# Leaves room for an 8x8 icon on the left of the goal app.
ICON_WIDTH = 8


def build_pr_payload(pr_count: int) -> UlanziPayload:
    """Payload showing the number of open pull requests."""
    if pr_count == 0:
        return UlanziPayload(text="No PRs", icon=GITHUB_ICON)

    label = "PR" if pr_count == 1 else "PRs"
    return UlanziPayload(
        text=[
            TextFragment(t=f"{pr_count} ", c=PR_COUNT_COLOR),
            TextFragment(t=label, c=PR_LABEL_COLOR),
        ],
        icon=GITHUB_ICON,
    )


def render_commit_chart(
    series: DayBucketSeries,
    layout: LayoutStrategy,
    mapper: ColorMapper,
    canvas: CanvasSpec | None = None,
) -> list[FilledRect]:
    """
    Draw one filled square per day that the layout places.

    Args:
        series: Commit counts, oldest day first
        layout: Strategy assigning each day index a cell
        mapper: Strategy coloring a count relative to the busiest day

    Returns:
        One FilledRect per placed day, in day order
    """
    cells = layout.plan(series.window_days, canvas or CanvasSpec())
    max_count = series.max_count

    return [
        FilledRect(
            x=cell.x,
            y=cell.y,
            width=cell.size,
            height=cell.size,
            color=mapper.color_for(count, max_count),
        )
        for cell, count in zip(cells, series.counts)
    ]


def render_progress(
    series: DayBucketSeries,
    goal: int,
    canvas: CanvasSpec | None = None,
) -> list[Line]:
    """
    Draw today's commits against the daily goal along the bottom row.

    Raises:
        ValueError: If goal is not positive
    """
    if goal <= 0:
        raise ValueError(f"goal must be positive, got {goal}")

    canvas = canvas or CanvasSpec()
    progress = min(series.today / goal, 1)

    return plan_progress_bar(
        progress,
        width=canvas.width - ICON_WIDTH,
        offset=ICON_WIDTH,
        y=canvas.height - 1,
        progress_color=QUANTILE_COLORS[-1],
        background_color=EMPTY_COLOR,
    )


def build_commit_payload(primitives: list) -> UlanziPayload:
    """Payload that draws the commit chart with no text."""
    return UlanziPayload(text="", draw=to_commands(primitives))


def build_goal_payload(
    series: DayBucketSeries, goal: int, primitives: list
) -> UlanziPayload:
    """Payload showing today's commits out of the goal above a progress bar."""
    return UlanziPayload(
        text=f"{series.today}/{goal}",
        icon=GITHUB_ICON,
        draw=to_commands(primitives),
    )
