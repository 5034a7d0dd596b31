# palette_tokens/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Literal, Mapping, NamedTuple, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str

U8Rows = NDArray[np.uint8]  # (N, 3) sRGB rows
OklabRows = NDArray[np.float64]  # (..., 3) OKLab
OklchRows = NDArray[np.float64]  # (..., 3) OKLCh, hue in degrees

Scale = Dict[str, HexStr]  # shade key -> "#rrggbb"
TokenSet = Dict[str, HexStr]  # role name -> "#rrggbb"

Source = Literal["neutral", "color", "accent"]
SOURCES: Tuple[str, ...] = ("neutral", "color", "accent")

_HEX_DIGITS = re.compile(r"[0-9a-f]{6}")

# Value objects


class Oklch(NamedTuple):
    """Perceptual colour. Hue is None for achromatic colours."""

    l: float  # [0, 1]
    c: float  # >= 0
    h: Optional[float]  # [0, 360) or None


@dataclass(frozen=True)
class RoleRef:
    """Where a role reads its colour from: a scale source and a shade key."""

    source: Source
    shade: str


@dataclass(frozen=True)
class ContrastEntry:
    """Contrast of one fg/bg role pair against the AA body-text threshold."""

    ratio: float  # rounded to 2 decimals
    passed: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"ratio": self.ratio, "pass": self.passed}


@dataclass(frozen=True)
class PaletteOptions:
    """Per-call options. Unknown keys are ignored by from_mapping()."""

    scheme: str = "single"
    dark: bool = False

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "PaletteOptions":
        if options is None:
            return cls()
        if isinstance(options, PaletteOptions):
            return options
        return cls(
            scheme=options.get("scheme", "single"),
            dark=bool(options.get("dark", False)),
        )


@dataclass(frozen=True)
class PaletteResult:
    """Tokens, scales and contrast audit for one primary colour."""

    tokens: Mapping[str, HexStr]
    color_scale: Mapping[str, HexStr]
    neutral_scale: Mapping[str, HexStr]
    secondary_scale: Optional[Mapping[str, HexStr]]
    wcag: Mapping[str, ContrastEntry]

    @classmethod
    def build(
        cls,
        tokens: TokenSet,
        color_scale: Scale,
        neutral_scale: Scale,
        secondary_scale: Optional[Scale],
        wcag: Dict[str, ContrastEntry],
    ) -> "PaletteResult":
        """Wrap freshly built dicts in read-only views."""
        return cls(
            tokens=MappingProxyType(dict(tokens)),
            color_scale=MappingProxyType(dict(color_scale)),
            neutral_scale=MappingProxyType(dict(neutral_scale)),
            secondary_scale=(
                None
                if secondary_scale is None
                else MappingProxyType(dict(secondary_scale))
            ),
            wcag=MappingProxyType(dict(wcag)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-ready dict using the external key names."""
        return {
            "tokens": dict(self.tokens),
            "colorScale": dict(self.color_scale),
            "neutralScale": dict(self.neutral_scale),
            "secondaryScale": (
                None if self.secondary_scale is None else dict(self.secondary_scale)
            ),
            "wcag": {pair: entry.to_dict() for pair, entry in self.wcag.items()},
        }


# Small helpers


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb' or '#rrggbb' (case-insensitive) into an RGB tuple."""
    if not isinstance(hex_str, str):
        raise TypeError(f"hex colour must be a str, got {type(hex_str).__name__}")
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        raise ValueError(f"hex must start with '#': {hex_str!r}")
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) != 7:
        raise ValueError(f"hex must be '#rrggbb' or '#rgb': {hex_str!r}")
    if not _HEX_DIGITS.fullmatch(s[1:]):
        raise ValueError(f"invalid hex digits: {hex_str!r}")
    return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))


def hex_list_to_u8_rgb_array(hex_list: Sequence[str]) -> U8Rows:
    """
    Convert a sequence of hex strings to a (N,3) uint8 array.
    Uses hex_to_rgb for a single source of truth.
    """
    out = np.empty((len(hex_list), 3), dtype=np.uint8)
    for i, hx in enumerate(hex_list):
        r, g, b = hex_to_rgb(hx)
        out[i, 0] = r
        out[i, 1] = g
        out[i, 2] = b
    return out


__all__ = [
    # aliases / types
    "RGBTuple",
    "HexStr",
    "U8Rows",
    "OklabRows",
    "OklchRows",
    "Scale",
    "TokenSet",
    "Source",
    "SOURCES",
    # value objects
    "Oklch",
    "RoleRef",
    "ContrastEntry",
    "PaletteOptions",
    "PaletteResult",
    # helpers
    "rgb_to_hex",
    "hex_to_rgb",
    "hex_list_to_u8_rgb_array",
]
