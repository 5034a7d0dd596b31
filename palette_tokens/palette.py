# palette_tokens/palette.py
from __future__ import annotations

"""
Palette entry point: scales -> tokens -> contrast audit.

Exports:
  generate_palette(primary_hex, options=None, adapter=None) -> PaletteResult
"""

from typing import Any, Mapping, Optional, Union

from .contrast import check_wcag
from .core_types import HexStr, PaletteOptions, PaletteResult
from .roles import resolve_tokens
from .scales import generate_color_scale, generate_neutral_scale, generate_secondary_scale
from .scheme import resolve_scheme
from .tonal import DEFAULT_ADAPTER, ColourAdapter


def generate_palette(
    primary_hex: HexStr,
    options: Optional[Union[PaletteOptions, Mapping[str, Any]]] = None,
    adapter: Optional[ColourAdapter] = None,
) -> PaletteResult:
    """
    Generate scales, role tokens and a WCAG audit for one primary colour.

    Args:
      primary_hex: '#rrggbb' (or '#rgb'); ValueError if unparseable.
      options: mapping or PaletteOptions with
        scheme: "single" (default) | "analogous" | "complementary"
        dark: bool, default False
        Other keys are ignored.
      adapter: colour backend; defaults to the OKLCh ramp adapter.
    Returns:
      PaletteResult (read-only). secondary_scale is None for "single".
    """
    opts = PaletteOptions.from_mapping(options)
    scheme = resolve_scheme(opts.scheme)
    adapter = adapter or DEFAULT_ADAPTER

    color_scale = generate_color_scale(primary_hex, adapter)
    neutral_scale = generate_neutral_scale(primary_hex, adapter)
    secondary_scale = generate_secondary_scale(primary_hex, scheme, adapter)
    tokens = resolve_tokens(color_scale, neutral_scale, secondary_scale, opts.dark)
    wcag = check_wcag(tokens)
    return PaletteResult.build(tokens, color_scale, neutral_scale, secondary_scale, wcag)


__all__ = ["generate_palette"]
