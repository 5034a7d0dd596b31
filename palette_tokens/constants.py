"""
Global tables and tunables used across the project.

- SHADE_KEYS
- Seed derivation (neutral / secondary chroma, scheme hue shifts)
- Tonal synthesis knobs (achromatic cut-off, chroma transfer, gamut search)
- WCAG audit threshold and pairs
- Hue swatch lightness / chroma
"""
from __future__ import annotations

from typing import Dict, Tuple

# ===========
# Scale shape
# ===========
SHADE_KEYS: Tuple[str, ...] = (
    "50",
    "100",
    "200",
    "300",
    "400",
    "500",
    "600",
    "700",
    "800",
    "900",
    "950",
)

# ===============
# Seed derivation
# ===============
NEUTRAL_CHROMA_FACTOR: float = 0.12
NEUTRAL_CHROMA_MAX: float = 0.02
SECONDARY_CHROMA_FACTOR: float = 0.85

SCHEME_HUE_SHIFT: Dict[str, float] = {
    "analogous": 40.0,
    "complementary": 180.0,
}

# ===============
# Tonal synthesis
# ===============
ACHROMATIC_EPS: float = 1e-6  # chroma below this has no hue
CHROMA_RATIO_MIN: float = 0.03  # anchor chroma below this => additive transfer
GAMUT_EPS: float = 1e-6  # allowed linear-RGB overshoot before chroma reduction
GAMUT_STEPS: int = 24  # bisection steps on chroma

# ====
# WCAG
# ====
WCAG_LINEAR_THRESHOLD: float = 0.03928
AA_NORMAL_RATIO: float = 4.5

WCAG_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("text", "bg"),
    ("text", "surface"),
    ("text-muted", "bg"),
    ("text-muted", "surface"),
    ("primary", "bg"),
    ("primary", "surface"),
)
WCAG_PRIMARY_TEXT_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("primary-text", "bg"),
    ("primary-text", "surface"),
)

# ==========
# Hue swatch
# ==========
HUE_SWATCH_L: float = 0.55
HUE_SWATCH_C: float = 0.2

__all__ = [
    "SHADE_KEYS",
    "NEUTRAL_CHROMA_FACTOR",
    "NEUTRAL_CHROMA_MAX",
    "SECONDARY_CHROMA_FACTOR",
    "SCHEME_HUE_SHIFT",
    "ACHROMATIC_EPS",
    "CHROMA_RATIO_MIN",
    "GAMUT_EPS",
    "GAMUT_STEPS",
    "WCAG_LINEAR_THRESHOLD",
    "AA_NORMAL_RATIO",
    "WCAG_PAIRS",
    "WCAG_PRIMARY_TEXT_PAIRS",
    "HUE_SWATCH_L",
    "HUE_SWATCH_C",
]
