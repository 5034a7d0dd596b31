"""Tests for the colour / neutral / secondary scale generators."""

import re

import pytest

from palette_tokens.colour_convert import parse_hex
from palette_tokens.constants import SHADE_KEYS
from palette_tokens.scales import (
    generate_color_scale,
    generate_neutral_scale,
    generate_secondary_scale,
    neutral_seed,
    secondary_seed,
)
from palette_tokens.scheme import hue_shift, resolve_scheme

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


def hue_delta(a: float, b: float) -> float:
    return abs((a - b + 180.0) % 360.0 - 180.0)


def test_color_and_neutral_scales_have_all_shades(sample_hex):
    for scale in (generate_color_scale(sample_hex), generate_neutral_scale(sample_hex)):
        assert list(scale) == list(SHADE_KEYS)
        assert all(HEX_RE.match(v) for v in scale.values())


def test_color_scale_seeds_with_primary(recording_adapter):
    generate_color_scale("#6366f1", recording_adapter)
    assert recording_adapter.seeds == ["#6366f1"]


def test_neutral_seed_caps_chroma(recording_adapter):
    primary = parse_hex("#6366f1")
    assert primary.c * 0.12 > 0.02
    neutral_seed("#6366f1", recording_adapter)
    (seed,) = recording_adapter.formatted
    assert seed.l == primary.l
    assert seed.c == pytest.approx(0.02, abs=1e-12)
    assert seed.h == primary.h


def test_neutral_seed_scales_low_chroma(recording_adapter):
    # 0.12 x a small chroma stays under the 0.02 ceiling
    primary = parse_hex("#8a8f99")
    assert 0.0 < primary.c * 0.12 < 0.02
    neutral_seed("#8a8f99", recording_adapter)
    (seed,) = recording_adapter.formatted
    assert seed.l == primary.l
    assert seed.c == pytest.approx(primary.c * 0.12, abs=1e-12)
    assert seed.h == primary.h


def test_neutral_seed_real_adapter_stays_near_primary():
    primary = parse_hex("#6366f1")
    seed = parse_hex(neutral_seed("#6366f1"))
    assert seed.l == pytest.approx(primary.l, abs=0.01)
    assert seed.c <= 0.02 + 5e-3
    assert hue_delta(seed.h, primary.h) < 15.0


def test_secondary_single_is_none(recording_adapter):
    assert generate_secondary_scale("#6366f1", "single", recording_adapter) is None
    assert secondary_seed("#6366f1", "single") is None
    assert recording_adapter.seeds == []


@pytest.mark.parametrize("scheme,shift", [("analogous", 40.0), ("complementary", 180.0)])
def test_secondary_seed_hue_shift(scheme, shift):
    for primary_hex in ("#6366f1", "#ff0000", "#22c55e"):
        primary = parse_hex(primary_hex)
        seed = parse_hex(secondary_seed(primary_hex, scheme))
        assert hue_delta(seed.h, (primary.h + shift) % 360.0) < 2.0
        assert seed.l == pytest.approx(primary.l, abs=0.01)


@pytest.mark.parametrize("scheme,shift", [("analogous", 40.0), ("complementary", 180.0)])
@pytest.mark.parametrize("primary_hex", ["#6366f1", "#ff0000", "#22c55e", "#8a8f99"])
def test_secondary_seed_values(recording_adapter, primary_hex, scheme, shift):
    primary = parse_hex(primary_hex)
    secondary_seed(primary_hex, scheme, recording_adapter)
    (seed,) = recording_adapter.formatted
    assert seed.l == primary.l
    assert seed.c == pytest.approx(primary.c * 0.85, abs=1e-12)
    assert seed.h == pytest.approx((primary.h + shift) % 360.0, abs=1e-9)


@pytest.mark.parametrize("scheme,shift", [("analogous", 40.0), ("complementary", 180.0)])
def test_secondary_seed_achromatic_primary_uses_shift_as_hue(recording_adapter, scheme, shift):
    primary = parse_hex("#808080")
    assert primary.h is None
    secondary_seed("#808080", scheme, recording_adapter)
    (seed,) = recording_adapter.formatted
    assert seed.l == primary.l
    assert seed.c == pytest.approx(primary.c * 0.85, abs=1e-12)
    assert seed.h == shift


def test_secondary_scale_500_tracks_hue_with_fake(recording_adapter):
    primary = parse_hex("#6366f1")
    scale = generate_secondary_scale("#6366f1", "analogous", recording_adapter)
    assert set(scale) == set(SHADE_KEYS)
    assert hue_delta(parse_hex(scale["500"]).h, (primary.h + 40.0) % 360.0) < 2.0


def test_secondary_scale_real_adapter():
    scale = generate_secondary_scale("#ff0000", "complementary")
    assert list(scale) == list(SHADE_KEYS)
    seed = secondary_seed("#ff0000", "complementary")
    assert seed in scale.values()


def test_achromatic_primary_hue_shift_does_not_crash():
    seed = parse_hex(secondary_seed("#808080", "complementary"))
    # grey in, grey out: chroma 0.85 x 0
    assert seed.c < 1e-3
    assert generate_secondary_scale("#808080", "analogous") is not None


def test_unknown_scheme_fails_fast():
    with pytest.raises(ValueError, match="unknown scheme"):
        generate_secondary_scale("#6366f1", "triadic")
    with pytest.raises(ValueError):
        resolve_scheme(None)


def test_hue_shift_table():
    assert hue_shift("single") is None
    assert hue_shift("analogous") == 40.0
    assert hue_shift("complementary") == 180.0
    with pytest.raises(ValueError, match="unknown scheme"):
        hue_shift("triadic")


def test_bad_adapter_scale_is_rejected():
    class ShortAdapter:
        def parse(self, hex_str):
            return parse_hex(hex_str)

        def format(self, colour):
            raise AssertionError("not used")

        def synthesize_scale(self, seed_hex):
            return {"50": seed_hex, "500": seed_hex}

    with pytest.raises(ValueError, match="wrong shades"):
        generate_color_scale("#6366f1", ShortAdapter())


def test_invalid_primary_propagates():
    with pytest.raises(ValueError):
        generate_neutral_scale("#xyzxyz")
