# palette_tokens/export.py
from __future__ import annotations

"""
Serialisers for a PaletteResult.

Exports:
  to_json(result, indent=2) -> str
  to_css(result, selector=":root") -> str
  report_lines(result) -> list[str]
"""

import json
from typing import List, Mapping, Optional

from .core_types import HexStr, PaletteResult
from .utils import format_scale_line

SCALE_PREFIXES = (
    ("color", "color_scale"),
    ("neutral", "neutral_scale"),
    ("secondary", "secondary_scale"),
)


def to_json(result: PaletteResult, indent: Optional[int] = 2) -> str:
    return json.dumps(result.to_dict(), indent=indent)


def _scales(result: PaletteResult) -> List[tuple[str, Mapping[str, HexStr]]]:
    out = []
    for prefix, attr in SCALE_PREFIXES:
        scale = getattr(result, attr)
        if scale is not None:
            out.append((prefix, scale))
    return out


def to_css(result: PaletteResult, selector: str = ":root") -> str:
    """
    CSS custom properties, scales first then role tokens:
      :root {
        --color-50: #eef2ff;
        ...
        --bg: #fafafa;
      }
    """
    lines = [f"{selector} {{"]
    for prefix, scale in _scales(result):
        for shade, hex_code in scale.items():
            lines.append(f"  --{prefix}-{shade}: {hex_code};")
    for role, hex_code in result.tokens.items():
        lines.append(f"  --{role}: {hex_code};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def report_lines(result: PaletteResult) -> List[str]:
    """Human-readable summary: tokens, scales, then contrast pairs."""
    width = max(len(role) for role in result.tokens)
    lines = ["Tokens:"]
    for role, hex_code in result.tokens.items():
        lines.append(f"  {role:<{width}}  {hex_code}")
    for prefix, scale in _scales(result):
        lines.append(f"{prefix.capitalize()} scale:")
        lines.append("  " + format_scale_line(scale))
    if result.secondary_scale is None:
        lines.append("Secondary scale: none (single scheme)")
    lines.append("WCAG AA (4.5:1):")
    pair_width = max(len(pair) for pair in result.wcag)
    for pair, entry in result.wcag.items():
        verdict = "PASS" if entry.passed else "FAIL"
        lines.append(f"  {pair:<{pair_width}}  {entry.ratio:5.2f}  {verdict}")
    return lines


__all__ = ["to_json", "to_css", "report_lines"]
