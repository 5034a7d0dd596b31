# palette_tokens/tonal.py
from __future__ import annotations

"""
Tonal-scale synthesis and the colour adapter seam.

A seed colour is matched to the nearest shade of the nearest reference ramp
(OKLab distance). The ramp is then moved onto the seed:
  - lightness shifted by the seed/anchor delta, tapered to 0 at both ends
  - chroma scaled by the seed/anchor ratio (additive for near-grey anchors)
  - hue rotated by the seed/anchor delta
The anchor shade reproduces the seed.

Exports:
  nearest_ramp_shade(seed_lab, ramp_lab) -> (ramp_idx, shade_idx)
  transfer_ramp(ref_lch, anchor_idx, seed) -> OklchRows [11, 3]
  synthesize_scale(seed_hex, ramps=None) -> Scale
  ColourAdapter : protocol (parse / format / synthesize_scale)
  OklchAdapter  : default adapter backed by the functions above
  DEFAULT_ADAPTER
"""

from typing import List, Optional, Protocol, Tuple

import numpy as np

from .colour_convert import format_hex, format_hex_rows, oklch_to_oklab, parse_hex
from .constants import ACHROMATIC_EPS, CHROMA_RATIO_MIN, SHADE_KEYS
from .core_types import HexStr, Oklch, OklabRows, OklchRows, Scale
from .ramp_data import default_ramps

Ramps = Tuple[List[str], OklchRows, OklabRows]


def nearest_ramp_shade(seed_lab: np.ndarray, ramp_lab: OklabRows) -> Tuple[int, int]:
    """(ramp, shade) indices of the reference entry closest to seed_lab."""
    diff = ramp_lab - np.asarray(seed_lab, dtype=np.float64)[None, None, :]
    dist2 = np.sum(diff * diff, axis=-1)
    ramp_idx, shade_idx = np.unravel_index(int(np.argmin(dist2)), dist2.shape)
    return int(ramp_idx), int(shade_idx)


def _signed_hue_delta(target: float, source: float) -> float:
    """Shortest signed rotation from source to target, in (-180, 180]."""
    d = (target - source) % 360.0
    return d - 360.0 if d > 180.0 else d


def transfer_ramp(ref_lch: OklchRows, anchor_idx: int, seed: Oklch) -> OklchRows:
    """
    Move one reference ramp [11, 3] so that shade anchor_idx becomes seed.
    Lightness stays ordered because the shift is tapered towards L=1 on the
    light side and towards L=0 on the dark side.
    """
    ref = np.asarray(ref_lch, dtype=np.float64)
    anchor_l, anchor_c, anchor_h = (float(v) for v in ref[anchor_idx])
    ref_l = ref[:, 0]
    ref_c = ref[:, 1]
    ref_h = ref[:, 2]

    # lightness
    idx = np.arange(ref.shape[0])
    light_w = (1.0 - ref_l) / (1.0 - anchor_l) if anchor_l < 1.0 else np.zeros_like(ref_l)
    dark_w = ref_l / anchor_l if anchor_l > 0.0 else np.zeros_like(ref_l)
    weights = np.where(idx <= anchor_idx, light_w, dark_w)
    out_l = np.clip(ref_l + (seed.l - anchor_l) * weights, 0.0, 1.0)

    # chroma / hue
    if seed.h is None:
        out_c = np.zeros_like(ref_c)
        out_h = np.zeros_like(ref_h)
    else:
        if anchor_c >= CHROMA_RATIO_MIN:
            out_c = ref_c * (seed.c / anchor_c)
        else:
            out_c = np.maximum(ref_c + (seed.c - anchor_c), 0.0)
        if anchor_c < ACHROMATIC_EPS:
            out_h = np.full_like(ref_h, seed.h)
        else:
            out_h = (ref_h + _signed_hue_delta(seed.h, anchor_h)) % 360.0

    out = np.stack([out_l, out_c, out_h], axis=-1)
    # exact seed at the anchor
    out[anchor_idx] = (seed.l, seed.c, 0.0 if seed.h is None else seed.h)
    return out


def synthesize_scale(seed_hex: HexStr, ramps: Optional[Ramps] = None) -> Scale:
    """Build the 11-shade scale for seed_hex. Raises ValueError on bad hex."""
    seed = parse_hex(seed_hex)
    _names, ramp_lch, ramp_lab = ramps if ramps is not None else default_ramps()
    seed_lab = oklch_to_oklab(
        np.array([seed.l, seed.c, 0.0 if seed.h is None else seed.h], dtype=np.float64)
    )
    ramp_idx, shade_idx = nearest_ramp_shade(seed_lab, ramp_lab)
    lch = transfer_ramp(ramp_lch[ramp_idx], shade_idx, seed)
    return dict(zip(SHADE_KEYS, format_hex_rows(lch)))


# Adapter seam


class ColourAdapter(Protocol):
    """What the palette pipeline needs from a colour-science backend."""

    def parse(self, hex_str: str) -> Oklch: ...

    def format(self, colour: Oklch) -> HexStr: ...

    def synthesize_scale(self, seed_hex: HexStr) -> Scale: ...


class OklchAdapter:
    """Default adapter: OKLCh maths and reference-ramp transfer."""

    def __init__(self, ramps: Optional[Ramps] = None) -> None:
        self._ramps = ramps

    def parse(self, hex_str: str) -> Oklch:
        return parse_hex(hex_str)

    def format(self, colour: Oklch) -> HexStr:
        return format_hex(colour.l, colour.c, colour.h)

    def synthesize_scale(self, seed_hex: HexStr) -> Scale:
        return synthesize_scale(seed_hex, self._ramps)


DEFAULT_ADAPTER: ColourAdapter = OklchAdapter()


__all__ = [
    "nearest_ramp_shade",
    "transfer_ramp",
    "synthesize_scale",
    "ColourAdapter",
    "OklchAdapter",
    "DEFAULT_ADAPTER",
]
