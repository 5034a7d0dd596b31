"""End-to-end tests for generate_palette."""

import pytest

from palette_tokens import generate_palette
from palette_tokens.colour_convert import parse_hex
from palette_tokens.constants import SHADE_KEYS
from palette_tokens.core_types import PaletteOptions
from palette_tokens.scales import neutral_seed, secondary_seed


def test_single_light_indigo():
    result = generate_palette("#6366f1", {"scheme": "single", "dark": False})
    assert result.secondary_scale is None
    assert result.tokens["secondary"] == result.color_scale["200"]
    assert result.tokens["primary"] == result.color_scale["500"]
    assert "primary-text" not in result.tokens
    assert len(result.wcag) == 6
    assert result.wcag["text/bg"].passed is True
    assert result.wcag["text/surface"].passed is True


def test_single_dark_indigo():
    result = generate_palette("#6366f1", {"scheme": "single", "dark": True})
    assert "primary-text" in result.tokens
    assert result.tokens["primary-text"] == result.color_scale["400"]
    assert result.tokens["secondary"] == result.color_scale["800"]
    assert len(result.wcag) == 8
    assert "primary-text/bg" in result.wcag
    assert "primary-text/surface" in result.wcag
    assert result.wcag["text/bg"].passed is True


def test_defaults_match_single_light():
    assert generate_palette("#6366f1") == generate_palette(
        "#6366f1", {"scheme": "single", "dark": False}
    )


def test_unknown_option_keys_are_ignored():
    result = generate_palette("#6366f1", {"dark": True, "contrast": "AAA", "foo": 1})
    assert "primary-text" in result.tokens


def test_options_object_accepted():
    result = generate_palette("#6366f1", PaletteOptions(scheme="analogous"))
    assert result.secondary_scale is not None


def test_complementary_red():
    result = generate_palette("#ff0000", {"scheme": "complementary"})
    assert list(result.secondary_scale) == list(SHADE_KEYS)
    seed = parse_hex(secondary_seed("#ff0000", "complementary"))
    target = (parse_hex("#ff0000").h + 180.0) % 360.0
    assert abs((seed.h - target + 180.0) % 360.0 - 180.0) < 2.0
    assert secondary_seed("#ff0000", "complementary") in result.secondary_scale.values()
    assert result.tokens["secondary"] == result.secondary_scale["200"]


def test_analogous_wiring_with_fake(recording_adapter):
    result = generate_palette("#6366f1", {"scheme": "analogous", "dark": True}, recording_adapter)
    assert recording_adapter.seeds == [
        "#6366f1",
        neutral_seed("#6366f1"),
        secondary_seed("#6366f1", "analogous"),
    ]
    # every shade of a fake scale is its seed
    assert result.tokens["bg"] == neutral_seed("#6366f1")
    assert result.tokens["primary"] == "#6366f1"
    assert result.tokens["secondary"] == secondary_seed("#6366f1", "analogous")


def test_scales_have_fixed_shades(sample_hex):
    result = generate_palette(sample_hex, {"scheme": "analogous"})
    for scale in (result.color_scale, result.neutral_scale, result.secondary_scale):
        assert list(scale) == list(SHADE_KEYS)


def test_result_is_read_only():
    result = generate_palette("#6366f1")
    with pytest.raises(TypeError):
        result.tokens["bg"] = "#000000"  # type: ignore[index]
    with pytest.raises(AttributeError):
        result.tokens = {}  # type: ignore[misc]


def test_calls_are_independent():
    first = generate_palette("#6366f1", {"dark": True})
    generate_palette("#ff0000", {"scheme": "complementary"})
    assert generate_palette("#6366f1", {"dark": True}) == first


def test_to_dict_shape():
    data = generate_palette("#6366f1").to_dict()
    assert set(data) == {"tokens", "colorScale", "neutralScale", "secondaryScale", "wcag"}
    assert data["secondaryScale"] is None
    assert data["wcag"]["text/bg"]["pass"] is True
    assert isinstance(data["wcag"]["text/bg"]["ratio"], float)


def test_invalid_colour_propagates():
    with pytest.raises(ValueError):
        generate_palette("indigo")


def test_unknown_scheme_rejected():
    with pytest.raises(ValueError, match="unknown scheme"):
        generate_palette("#6366f1", {"scheme": "triadic"})
