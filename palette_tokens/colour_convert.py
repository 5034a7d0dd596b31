# palette_tokens/colour_convert.py
from __future__ import annotations

"""
Colour conversions (sRGB, linear RGB, OKLab, OKLCh).

Exports:
  rgb_to_linear(srgb)
  linear_to_rgb(linear)
  linear_rgb_to_oklab(linear)
  oklab_to_linear_rgb(lab)
  rgb_to_oklab(rgb)
  oklab_to_oklch(lab)
  oklch_to_oklab(lch)
  gamut_map_oklch(lch)
  oklch_to_u8(lch)
  parse_hex(hex_str) -> Oklch
  format_hex(l, c, h) -> "#rrggbb"
  hue_to_hex(hue)
"""

import math
from typing import List, Optional

import numpy as np

from .constants import ACHROMATIC_EPS, GAMUT_EPS, GAMUT_STEPS, HUE_SWATCH_C, HUE_SWATCH_L
from .core_types import HexStr, Oklch, OklabRows, OklchRows, U8Rows, hex_to_rgb, rgb_to_hex

# OKLab matrices (Ottosson 2020)

_RGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ],
    dtype=np.float64,
)
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ],
    dtype=np.float64,
)
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ],
    dtype=np.float64,
)
_LMS_TO_RGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ],
    dtype=np.float64,
)


# sRGB <-> linear


def rgb_to_linear(srgb: np.ndarray) -> np.ndarray:
    """
    Convert sRGB (non-linear 0..1) to linear RGB. Vectorised, sign-preserving.
    Returns float64 with shape preserved.
    """
    srgb_f = np.asarray(srgb, dtype=np.float64)
    mag = np.abs(srgb_f)
    linear = np.where(mag <= 0.04045, mag / 12.92, ((mag + 0.055) / 1.055) ** 2.4)
    return np.copysign(linear, srgb_f)


def linear_to_rgb(linear: np.ndarray) -> np.ndarray:
    """Inverse of rgb_to_linear. Values outside 0..1 are not clamped."""
    lin = np.asarray(linear, dtype=np.float64)
    mag = np.abs(lin)
    with np.errstate(invalid="ignore"):
        srgb = np.where(
            mag <= 0.0031308, mag * 12.92, 1.055 * np.power(mag, 1.0 / 2.4) - 0.055
        )
    return np.copysign(srgb, lin)


# linear RGB <-> OKLab


def linear_rgb_to_oklab(linear: np.ndarray) -> OklabRows:
    """Linear RGB[...,3] to OKLab[...,3]."""
    lms = np.asarray(linear, dtype=np.float64) @ _RGB_TO_LMS.T
    return np.cbrt(lms) @ _LMS_TO_OKLAB.T


def oklab_to_linear_rgb(lab: OklabRows) -> np.ndarray:
    """OKLab[...,3] to linear RGB[...,3] (may fall outside 0..1)."""
    lms_ = np.asarray(lab, dtype=np.float64) @ _OKLAB_TO_LMS.T
    return (lms_**3) @ _LMS_TO_RGB.T


def rgb_to_oklab(rgb: np.ndarray) -> OklabRows:
    """
    sRGB to OKLab.
    Accepts uint8 [0..255] or float [0..1]. Preserves shape (...,3).
    """
    rgb_f = np.asarray(rgb)
    if rgb_f.dtype == np.uint8:
        rgb_f = rgb_f.astype(np.float64) / 255.0
    return linear_rgb_to_oklab(rgb_to_linear(rgb_f))


# OKLab <-> OKLCh


def oklab_to_oklch(lab: OklabRows) -> OklchRows:
    """
    OKLab[...,3] to OKLCh[...,3] (hue in degrees [0,360)).
    Achromatic rows get hue 0; use parse_hex() when the distinction matters.
    """
    lab_f = np.asarray(lab, dtype=np.float64)
    L = lab_f[..., 0]
    a = lab_f[..., 1]
    b = lab_f[..., 2]
    C = np.hypot(a, b)
    h = np.where(C < ACHROMATIC_EPS, 0.0, (np.degrees(np.arctan2(b, a)) + 360.0) % 360.0)
    return np.stack([L, C, h], axis=-1)


def oklch_to_oklab(lch: OklchRows) -> OklabRows:
    """OKLCh[...,3] to OKLab[...,3]."""
    lch_f = np.asarray(lch, dtype=np.float64)
    rad = np.radians(lch_f[..., 2])
    C = lch_f[..., 1]
    return np.stack([lch_f[..., 0], C * np.cos(rad), C * np.sin(rad)], axis=-1)


# Gamut mapping


def _in_gamut(linear: np.ndarray) -> np.ndarray:
    return np.all((linear >= -GAMUT_EPS) & (linear <= 1.0 + GAMUT_EPS), axis=-1)


def gamut_map_oklch(lch: OklchRows) -> OklchRows:
    """
    Reduce chroma (keeping L and h) until each row fits sRGB.
    Rows already in gamut are returned unchanged. Lightness is clipped to [0,1].
    """
    rows = np.array(lch, dtype=np.float64).reshape(-1, 3)
    rows[:, 0] = np.clip(rows[:, 0], 0.0, 1.0)
    rows[:, 1] = np.maximum(rows[:, 1], 0.0)

    inside = _in_gamut(oklab_to_linear_rgb(oklch_to_oklab(rows)))
    if np.all(inside):
        return rows.reshape(np.shape(lch))

    todo = np.where(~inside)[0]
    lo = np.zeros(todo.size, dtype=np.float64)
    hi = rows[todo, 1].copy()
    probe = rows[todo].copy()
    for _ in range(GAMUT_STEPS):
        mid = 0.5 * (lo + hi)
        probe[:, 1] = mid
        ok = _in_gamut(oklab_to_linear_rgb(oklch_to_oklab(probe)))
        lo = np.where(ok, mid, lo)
        hi = np.where(ok, hi, mid)
    rows[todo, 1] = lo
    return rows.reshape(np.shape(lch))


def oklch_to_u8(lch: OklchRows) -> U8Rows:
    """
    OKLCh rows to uint8 sRGB rows. Gamut-maps first, then clamps residual
    overshoot and rounds half-up.
    """
    mapped = gamut_map_oklch(lch)
    srgb = linear_to_rgb(oklab_to_linear_rgb(oklch_to_oklab(mapped)))
    srgb = np.clip(srgb, 0.0, 1.0)
    return np.floor(srgb * 255.0 + 0.5).astype(np.uint8)


# Hex helpers


def parse_hex(hex_str: str) -> Oklch:
    """Parse '#rrggbb' / '#rgb' into Oklch. Raises ValueError on bad input."""
    rgb = np.array(hex_to_rgb(hex_str), dtype=np.uint8)
    L, C, h = oklab_to_oklch(rgb_to_oklab(rgb)).tolist()
    hue: Optional[float] = None if C < ACHROMATIC_EPS else float(h)
    return Oklch(float(L), float(C), hue)


def format_hex(l: float, c: float, h: Optional[float]) -> HexStr:
    """OKLCh to '#rrggbb'. A missing hue is treated as 0."""
    row = np.array([[l, c, 0.0 if h is None else h]], dtype=np.float64)
    r, g, b = oklch_to_u8(row)[0].tolist()
    return rgb_to_hex((r, g, b))


def format_hex_rows(lch: OklchRows) -> List[HexStr]:
    """Vectorised format_hex for an (N,3) OKLCh array."""
    return [rgb_to_hex((r, g, b)) for r, g, b in oklch_to_u8(lch).tolist()]


def hue_to_hex(hue: float) -> HexStr:
    """Representative colour for a bare hue (fixed lightness and chroma)."""
    if not math.isfinite(hue):
        raise ValueError(f"hue must be a finite number of degrees: {hue!r}")
    return format_hex(HUE_SWATCH_L, HUE_SWATCH_C, float(hue) % 360.0)


__all__ = [
    "rgb_to_linear",
    "linear_to_rgb",
    "linear_rgb_to_oklab",
    "oklab_to_linear_rgb",
    "rgb_to_oklab",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "gamut_map_oklch",
    "oklch_to_u8",
    "parse_hex",
    "format_hex",
    "format_hex_rows",
    "hue_to_hex",
]
