# palette_tokens/scales.py
from __future__ import annotations

"""
Scale generation from a primary colour.

Exports:
  neutral_seed(primary_hex, adapter=None) -> HexStr
  secondary_seed(primary_hex, scheme, adapter=None) -> Optional[HexStr]
  generate_color_scale(primary_hex, adapter=None) -> Scale
  generate_neutral_scale(primary_hex, adapter=None) -> Scale
  generate_secondary_scale(primary_hex, scheme, adapter=None) -> Optional[Scale]
"""

from typing import Optional

from .constants import (
    NEUTRAL_CHROMA_FACTOR,
    NEUTRAL_CHROMA_MAX,
    SECONDARY_CHROMA_FACTOR,
    SHADE_KEYS,
)
from .core_types import HexStr, Oklch, Scale
from .scheme import hue_shift
from .tonal import DEFAULT_ADAPTER, ColourAdapter


def _checked_scale(scale: Scale, seed_hex: HexStr) -> Scale:
    """Reorder to SHADE_KEYS and reject scales with missing or extra shades."""
    if set(scale) != set(SHADE_KEYS):
        missing = sorted(set(SHADE_KEYS) - set(scale), key=int)
        extra = sorted(set(scale) - set(SHADE_KEYS))
        raise ValueError(
            f"scale for {seed_hex} has wrong shades (missing={missing}, extra={extra})"
        )
    return {shade: scale[shade] for shade in SHADE_KEYS}


def neutral_seed(primary_hex: HexStr, adapter: Optional[ColourAdapter] = None) -> HexStr:
    """Primary's lightness and hue with chroma capped near grey."""
    adapter = adapter or DEFAULT_ADAPTER
    p = adapter.parse(primary_hex)
    chroma = min(p.c * NEUTRAL_CHROMA_FACTOR, NEUTRAL_CHROMA_MAX)
    return adapter.format(Oklch(p.l, chroma, p.h))


def secondary_seed(
    primary_hex: HexStr, scheme: str, adapter: Optional[ColourAdapter] = None
) -> Optional[HexStr]:
    """
    Seed for the accent scale, or None for the "single" scheme.
    Hue is shifted per scheme (missing hue counts as 0), chroma scaled down.
    """
    shift = hue_shift(scheme)
    if shift is None:
        return None
    adapter = adapter or DEFAULT_ADAPTER
    p = adapter.parse(primary_hex)
    new_hue = ((p.h or 0.0) + shift) % 360.0
    return adapter.format(Oklch(p.l, p.c * SECONDARY_CHROMA_FACTOR, new_hue))


def generate_color_scale(
    primary_hex: HexStr, adapter: Optional[ColourAdapter] = None
) -> Scale:
    adapter = adapter or DEFAULT_ADAPTER
    return _checked_scale(adapter.synthesize_scale(primary_hex), primary_hex)


def generate_neutral_scale(
    primary_hex: HexStr, adapter: Optional[ColourAdapter] = None
) -> Scale:
    adapter = adapter or DEFAULT_ADAPTER
    seed = neutral_seed(primary_hex, adapter)
    return _checked_scale(adapter.synthesize_scale(seed), seed)


def generate_secondary_scale(
    primary_hex: HexStr, scheme: str, adapter: Optional[ColourAdapter] = None
) -> Optional[Scale]:
    """None (not an empty scale) for "single"; ValueError for unknown schemes."""
    adapter = adapter or DEFAULT_ADAPTER
    seed = secondary_seed(primary_hex, scheme, adapter)
    if seed is None:
        return None
    return _checked_scale(adapter.synthesize_scale(seed), seed)


__all__ = [
    "neutral_seed",
    "secondary_seed",
    "generate_color_scale",
    "generate_neutral_scale",
    "generate_secondary_scale",
]
