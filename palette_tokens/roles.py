# palette_tokens/roles.py
from __future__ import annotations

"""
Semantic role tables and token resolution.

Exports:
  LIGHT_ROLES, DARK_ROLES : read-only role -> RoleRef tables
  role_table(dark) -> table
  validate_role_table(table)
  resolve_tokens(color_scale, neutral_scale, secondary_scale, dark) -> TokenSet
"""

from types import MappingProxyType
from typing import Mapping, Optional

from .constants import SHADE_KEYS
from .core_types import SOURCES, RoleRef, Scale, TokenSet

RoleTable = Mapping[str, RoleRef]

LIGHT_ROLES: RoleTable = MappingProxyType(
    {
        "bg": RoleRef("neutral", "50"),
        "surface": RoleRef("neutral", "100"),
        "border": RoleRef("neutral", "200"),
        "text-muted": RoleRef("neutral", "500"),
        "text": RoleRef("neutral", "900"),
        "primary": RoleRef("color", "500"),
        "secondary": RoleRef("accent", "200"),
    }
)

DARK_ROLES: RoleTable = MappingProxyType(
    {
        "bg": RoleRef("neutral", "900"),
        "surface": RoleRef("neutral", "800"),
        "border": RoleRef("neutral", "700"),
        "text-muted": RoleRef("neutral", "400"),
        "text": RoleRef("neutral", "50"),
        "primary": RoleRef("color", "600"),  # solid fill under neutral/50 text
        "primary-text": RoleRef("color", "400"),  # coloured text / links on dark surfaces
        "secondary": RoleRef("accent", "800"),
    }
)


def validate_role_table(table: RoleTable) -> None:
    """Raise ValueError if any entry names an unknown source or shade."""
    for role, ref in table.items():
        if ref.source not in SOURCES:
            raise ValueError(f"role {role!r}: unknown source {ref.source!r}")
        if ref.shade not in SHADE_KEYS:
            raise ValueError(f"role {role!r}: unknown shade {ref.shade!r}")


validate_role_table(LIGHT_ROLES)
validate_role_table(DARK_ROLES)


def role_table(dark: bool) -> RoleTable:
    return DARK_ROLES if dark else LIGHT_ROLES


def resolve_tokens(
    color_scale: Scale,
    neutral_scale: Scale,
    secondary_scale: Optional[Scale],
    dark: bool,
) -> TokenSet:
    """
    Map every role of the light or dark table to a hex colour.

    "accent" reads the secondary scale, or the colour scale when there is none
    (single scheme), so the secondary role becomes a shade of the primary.
    A shade missing from its scale raises KeyError.
    """
    scales = {
        "neutral": neutral_scale,
        "color": color_scale,
        "accent": secondary_scale if secondary_scale is not None else color_scale,
    }
    tokens: TokenSet = {}
    for role, ref in role_table(dark).items():
        scale = scales[ref.source]
        if ref.shade not in scale:
            raise KeyError(f"role {role!r}: shade {ref.shade!r} missing from {ref.source} scale")
        tokens[role] = scale[ref.shade]
    return tokens


__all__ = [
    "RoleTable",
    "LIGHT_ROLES",
    "DARK_ROLES",
    "validate_role_table",
    "role_table",
    "resolve_tokens",
]
