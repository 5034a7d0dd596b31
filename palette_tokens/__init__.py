# palette_tokens/__init__.py
"""
palette_tokens package.

Purpose:
  Derive an accessible UI palette (tonal scales, role tokens, WCAG audit)
  from one primary colour. See palette_tokens.cli for the command line.

Public API:
  generate_palette : scales -> role tokens -> contrast audit.
  hue_to_hex       : representative colour for a bare hue.
  colour_convert   : OKLab / OKLCh transforms and hex parse/format.
  tonal            : tonal-scale synthesis and the ColourAdapter seam.
  scales           : colour / neutral / secondary scale generators.
  roles            : light and dark role tables, resolve_tokens.
  contrast         : relative luminance, contrast ratio, check_wcag.
  export           : JSON / CSS / text output.
  core_types       : shared aliases and value objects.

Quick start:
  from palette_tokens import generate_palette
  result = generate_palette("#6366f1", {"scheme": "analogous", "dark": True})
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_convert
from . import contrast
from . import core_types
from . import export
from . import roles
from . import scales
from . import tonal

from .colour_convert import hue_to_hex
from .contrast import check_wcag, contrast_ratio, relative_luminance
from .core_types import ContrastEntry, Oklch, PaletteOptions, PaletteResult
from .palette import generate_palette
from .roles import DARK_ROLES, LIGHT_ROLES, resolve_tokens
from .scales import generate_color_scale, generate_neutral_scale, generate_secondary_scale
from .tonal import ColourAdapter, OklchAdapter

__all__ = [
    "__version__",
    "colour_convert",
    "contrast",
    "core_types",
    "export",
    "roles",
    "scales",
    "tonal",
    "hue_to_hex",
    "check_wcag",
    "contrast_ratio",
    "relative_luminance",
    "ContrastEntry",
    "Oklch",
    "PaletteOptions",
    "PaletteResult",
    "generate_palette",
    "DARK_ROLES",
    "LIGHT_ROLES",
    "resolve_tokens",
    "generate_color_scale",
    "generate_neutral_scale",
    "generate_secondary_scale",
    "ColourAdapter",
    "OklchAdapter",
]
