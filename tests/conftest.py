"""Shared pytest fixtures for palette_tokens tests."""

from __future__ import annotations

from typing import List

import pytest

from palette_tokens.colour_convert import format_hex, parse_hex
from palette_tokens.constants import SHADE_KEYS
from palette_tokens.core_types import HexStr, Oklch, Scale


class RecordingAdapter:
    """
    Deterministic adapter: real OKLCh parse/format, but every synthesised
    scale is the seed repeated for all 11 shades. Seeds are recorded, and so
    is every Oklch handed to format() before it is rounded to hex.
    """

    def __init__(self) -> None:
        self.seeds: List[HexStr] = []
        self.formatted: List[Oklch] = []

    def parse(self, hex_str: str) -> Oklch:
        return parse_hex(hex_str)

    def format(self, colour: Oklch) -> HexStr:
        self.formatted.append(colour)
        return format_hex(colour.l, colour.c, colour.h)

    def synthesize_scale(self, seed_hex: HexStr) -> Scale:
        self.seeds.append(seed_hex)
        return {shade: seed_hex for shade in SHADE_KEYS}


def make_scale(prefix: str) -> Scale:
    """Distinct, valid hex per shade: '#<prefix><shade index>'. prefix is 4 hex digits."""
    return {shade: f"#{prefix}{i:02x}" for i, shade in enumerate(SHADE_KEYS)}


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def recording_adapter() -> RecordingAdapter:
    return RecordingAdapter()


@pytest.fixture
def fake_scales():
    """(color, neutral, secondary) scales with recognisable values."""
    return make_scale("c0c0"), make_scale("a0a0"), make_scale("5ec0")


@pytest.fixture(params=["#6366f1", "#ff0000", "#0ea5e9", "#22c55e", "#f59e0b", "#808080"])
def sample_hex(request) -> str:
    return request.param
