"""
Map daily commit counts to display colors.

Two policies are available:

- "quantile": four fixed greens chosen by which quarter of the range the
  count falls in, GitHub contribution graph style.
- "lightness": one hue whose lightness grows with the count.
"""

import math
from typing import Protocol

EMPTY_COLOR = "#161B22"
QUANTILE_COLORS = ("#0E4429", "#006D32", "#26A641", "#39D353")
DARK_COLOR = "#0A0A0A"


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[int, int, int]:
    """
    Convert HSL to 8-bit RGB.

    Args:
        hue: Degrees
        saturation: Percent, 0-100
        lightness: Percent, 0-100

    Returns:
        (red, green, blue), each 0-255, rounded half up
    """
    sat = saturation / 100
    light = lightness / 100
    a = sat * min(light, 1 - light)

    def channel(n: int) -> int:
        k = (n + hue / 30) % 12
        value = light - a * max(min(k - 3, 9 - k, 1), -1)
        return math.floor(value * 255 + 0.5)

    return channel(0), channel(8), channel(4)


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02X}{:02X}{:02X}".format(*rgb)


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    return rgb_to_hex(hsl_to_rgb(hue, saturation, lightness))


def _check_counts(count: int, max_count: int) -> None:
    if count < 0 or max_count < 0:
        raise ValueError(
            f"Commit counts must not be negative, got {count} of {max_count}"
        )


class ColorMapper(Protocol):
    def color_for(self, count: int, max_count: int) -> str: ...


class QuantileColorMapper:
    """Four discrete levels, scaled against at least `floor` commits."""

    def __init__(
        self,
        floor: int = 4,
        colors: tuple[str, str, str, str] = QUANTILE_COLORS,
        empty_color: str = EMPTY_COLOR,
    ):
        if floor <= 0:
            raise ValueError(f"floor must be positive, got {floor}")
        self.floor = floor
        self.colors = colors
        self.empty_color = empty_color

    def level_for(self, count: int, max_count: int) -> int:
        """Intensity level 0 (no commits) to 4."""
        _check_counts(count, max_count)
        if count == 0:
            return 0

        intensity = min(count / max(max_count, self.floor), 1)
        if intensity <= 0.25:
            return 1
        elif intensity <= 0.5:
            return 2
        elif intensity <= 0.75:
            return 3
        else:
            return 4

    def color_for(self, count: int, max_count: int) -> str:
        level = self.level_for(count, max_count)
        if level == 0:
            return self.empty_color
        return self.colors[level - 1]


class LightnessColorMapper:
    """Constant hue and saturation, lightness proportional to the count."""

    def __init__(
        self,
        hue: float = 120,
        saturation: float = 70,
        min_lightness: float = 15,
        max_lightness: float = 80,
        dark_color: str = DARK_COLOR,
    ):
        if not 0 <= min_lightness <= max_lightness <= 100:
            raise ValueError("Lightness range must satisfy 0 <= min <= max <= 100")
        self.hue = hue
        self.saturation = saturation
        self.min_lightness = min_lightness
        self.max_lightness = max_lightness
        self.dark_color = dark_color

    def lightness_for(self, count: int, max_count: int) -> float:
        _check_counts(count, max_count)
        intensity = min(count / max(max_count, 1), 1)
        return self.min_lightness + intensity * (self.max_lightness - self.min_lightness)

    def color_for(self, count: int, max_count: int) -> str:
        _check_counts(count, max_count)
        if count == 0:
            return self.dark_color
        lightness = self.lightness_for(count, max_count)
        return hsl_to_hex(self.hue, self.saturation, lightness)


COLOR_MAPPERS = {
    "quantile": QuantileColorMapper,
    "lightness": LightnessColorMapper,
}


def get_color_mapper(name: str) -> ColorMapper:
    """Build the color mapper registered under name."""
    try:
        return COLOR_MAPPERS[name]()
    except KeyError:
        raise ValueError(f"Unknown color policy: {name!r}")


def color_for(count: int, max_count: int, policy: str = "lightness") -> str:
    """Color for one day's count relative to the busiest day."""
    return get_color_mapper(policy).color_for(count, max_count)
