# palette_tokens/contrast.py
from __future__ import annotations

"""
WCAG 2.x contrast audit.

Exports:
  srgb_to_wcag_linear(srgb)
  relative_luminance(hex_str) -> float
  relative_luminance_rows(hex_list) -> float64 [N]
  contrast_ratio(hex_a, hex_b) -> float
  audit_pairs(tokens) -> list[(fg, bg)]
  check_wcag(tokens) -> dict["fg/bg", ContrastEntry]
  failing_pairs(wcag) -> list["fg/bg"]
"""

import math
from typing import Dict, List, Mapping, Sequence, Tuple

import numpy as np

from .constants import AA_NORMAL_RATIO, WCAG_LINEAR_THRESHOLD, WCAG_PAIRS, WCAG_PRIMARY_TEXT_PAIRS
from .core_types import ContrastEntry, HexStr, hex_list_to_u8_rgb_array

_LUMA = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def srgb_to_wcag_linear(srgb: np.ndarray) -> np.ndarray:
    """
    sRGB 0..1 to linear using the WCAG 2.x cut-off (0.03928).
    Vectorised; returns float64.
    """
    srgb_f = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb_f <= WCAG_LINEAR_THRESHOLD,
        srgb_f / 12.92,
        ((srgb_f + 0.055) / 1.055) ** 2.4,
    )


def relative_luminance_rows(hex_list: Sequence[HexStr]) -> np.ndarray:
    """Relative luminance for each hex colour. float64 [N]."""
    rgb = hex_list_to_u8_rgb_array(hex_list).astype(np.float64) / 255.0
    lin = srgb_to_wcag_linear(rgb)
    return _LUMA[0] * lin[:, 0] + _LUMA[1] * lin[:, 1] + _LUMA[2] * lin[:, 2]


def relative_luminance(hex_str: HexStr) -> float:
    return float(relative_luminance_rows([hex_str])[0])


def _ratio(lum_a: float, lum_b: float) -> float:
    return (max(lum_a, lum_b) + 0.05) / (min(lum_a, lum_b) + 0.05)


def contrast_ratio(hex_a: HexStr, hex_b: HexStr) -> float:
    """WCAG contrast ratio in [1, 21]. Symmetric in its arguments."""
    lum_a, lum_b = relative_luminance_rows([hex_a, hex_b]).tolist()
    return _ratio(lum_a, lum_b)


def round_ratio(ratio: float) -> float:
    """Two decimals, halves rounded up."""
    return math.floor(ratio * 100.0 + 0.5) / 100.0


def audit_pairs(tokens: Mapping[str, HexStr]) -> List[Tuple[str, str]]:
    """Fixed fg/bg pairs, plus primary-text pairs when that role exists."""
    pairs = list(WCAG_PAIRS)
    if tokens.get("primary-text"):
        pairs.extend(WCAG_PRIMARY_TEXT_PAIRS)
    return pairs


def check_wcag(tokens: Mapping[str, HexStr]) -> Dict[str, ContrastEntry]:
    """
    Audit the token set against AA body text (4.5:1).
    Keys are "fg/bg". `passed` uses the unrounded ratio.
    """
    pairs = audit_pairs(tokens)
    roles = sorted({role for pair in pairs for role in pair})
    missing = [role for role in roles if role not in tokens]
    if missing:
        raise KeyError(f"token set is missing roles: {', '.join(missing)}")

    lum = dict(zip(roles, relative_luminance_rows([tokens[r] for r in roles]).tolist()))
    wcag: Dict[str, ContrastEntry] = {}
    for fg, bg in pairs:
        ratio = _ratio(lum[fg], lum[bg])
        wcag[f"{fg}/{bg}"] = ContrastEntry(
            ratio=round_ratio(ratio), passed=ratio >= AA_NORMAL_RATIO
        )
    return wcag


def failing_pairs(wcag: Mapping[str, ContrastEntry]) -> List[str]:
    return [pair for pair, entry in wcag.items() if not entry.passed]


__all__ = [
    "srgb_to_wcag_linear",
    "relative_luminance",
    "relative_luminance_rows",
    "contrast_ratio",
    "round_ratio",
    "audit_pairs",
    "check_wcag",
    "failing_pairs",
]
