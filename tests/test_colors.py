"""
Tests for commit count to color mapping.
"""

import pytest

from ulanzi_monitor.colors import (
    DARK_COLOR,
    EMPTY_COLOR,
    QUANTILE_COLORS,
    LightnessColorMapper,
    QuantileColorMapper,
    color_for,
    get_color_mapper,
    hsl_to_hex,
    hsl_to_rgb,
)


class TestHslToRgb:
    """Tests for the HSL to RGB conversion."""

    @pytest.mark.parametrize(
        "hsl, rgb",
        [
            ((0, 100, 50), (255, 0, 0)),
            ((120, 100, 50), (0, 255, 0)),
            ((240, 100, 50), (0, 0, 255)),
            ((60, 100, 50), (255, 255, 0)),
            ((0, 0, 0), (0, 0, 0)),
            ((0, 0, 100), (255, 255, 255)),
        ],
    )
    def test_primary_colors(self, hsl, rgb):
        assert hsl_to_rgb(*hsl) == rgb

    def test_grey_rounds_half_up(self):
        """127.5 rounds up to 128."""
        assert hsl_to_rgb(0, 0, 50) == (128, 128, 128)

    def test_hex_format(self):
        assert hsl_to_hex(120, 70, 80) == "#A8F0A8"
        assert hsl_to_hex(120, 70, 15) == "#0B410B"

    def test_hue_wraps(self):
        assert hsl_to_rgb(360, 100, 50) == hsl_to_rgb(0, 100, 50)


class TestQuantileColorMapper:
    """Tests for the four-level quantile policy."""

    def test_zero_is_empty_color(self):
        mapper = QuantileColorMapper()

        for max_count in (0, 1, 4, 100):
            assert mapper.color_for(0, max_count) == EMPTY_COLOR

    @pytest.mark.parametrize(
        "count, max_count, level",
        [
            (1, 4, 1),
            (2, 4, 2),
            (3, 4, 3),
            (4, 4, 4),
            (6, 10, 3),
            (10, 10, 4),
            (2, 10, 1),
            (5, 10, 2),
        ],
    )
    def test_levels(self, count, max_count, level):
        assert QuantileColorMapper().level_for(count, max_count) == level

    def test_floor_damps_quiet_weeks(self):
        """With max_count 1, a single commit only reaches the lowest band."""
        mapper = QuantileColorMapper()

        assert mapper.color_for(1, 1) == QUANTILE_COLORS[0]

    def test_busiest_day_gets_top_color(self):
        assert QuantileColorMapper().color_for(12, 12) == QUANTILE_COLORS[3]

    def test_count_above_max_is_capped(self):
        assert QuantileColorMapper().level_for(20, 8) == 4

    def test_custom_floor(self):
        mapper = QuantileColorMapper(floor=1)

        assert mapper.color_for(1, 1) == QUANTILE_COLORS[3]

    def test_invalid_floor(self):
        with pytest.raises(ValueError):
            QuantileColorMapper(floor=0)

    def test_negative_count(self):
        with pytest.raises(ValueError):
            QuantileColorMapper().color_for(-1, 4)


class TestLightnessColorMapper:
    """Tests for the continuous lightness policy."""

    def test_zero_is_dark_color(self):
        mapper = LightnessColorMapper()

        for max_count in (0, 1, 7, 1000):
            assert mapper.color_for(0, max_count) == DARK_COLOR

    def test_busiest_day_gets_max_lightness(self):
        """count == max_count maps exactly to the top of the lightness range."""
        mapper = LightnessColorMapper()

        assert mapper.lightness_for(9, 9) == 80
        assert mapper.color_for(9, 9) == hsl_to_hex(120, 70, 80)
        assert mapper.color_for(1, 1) == "#A8F0A8"

    def test_lightness_is_linear(self):
        mapper = LightnessColorMapper()

        assert mapper.lightness_for(5, 10) == 47.5

    def test_max_count_zero_treated_as_one(self):
        assert LightnessColorMapper().lightness_for(1, 0) == 80

    def test_brighter_with_more_commits(self):
        mapper = LightnessColorMapper()
        lightness = [mapper.lightness_for(c, 8) for c in range(1, 9)]

        assert lightness == sorted(lightness)

    def test_custom_hue(self):
        mapper = LightnessColorMapper(hue=0, saturation=100, min_lightness=0, max_lightness=50)

        assert mapper.color_for(3, 3) == "#FF0000"

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            LightnessColorMapper(min_lightness=90, max_lightness=10)

    def test_deterministic(self):
        colors = {LightnessColorMapper().color_for(3, 7) for _ in range(10)}

        assert len(colors) == 1


class TestColorFor:
    def test_default_policy_is_lightness(self):
        assert color_for(0, 5) == DARK_COLOR
        assert color_for(5, 5) == "#A8F0A8"

    def test_quantile_policy(self):
        assert color_for(0, 5, policy="quantile") == EMPTY_COLOR
        assert color_for(5, 5, policy="quantile") == QUANTILE_COLORS[3]

    def test_unknown_policy(self):
        with pytest.raises(ValueError, match="Unknown color policy"):
            get_color_mapper("rainbow")
