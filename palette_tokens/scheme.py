from __future__ import annotations
from typing import Literal, Optional

from .constants import SCHEME_HUE_SHIFT

"""
Scheme selection helpers.

Exports:
- Scheme: Literal["single","analogous","complementary"]
- SCHEMES: tuple of accepted scheme names
- resolve_scheme(requested) -> Scheme
- hue_shift(scheme) -> Optional[float]

Notes:
- "single" has no secondary scale, so hue_shift() returns None for it.
- Unknown names raise ValueError instead of falling through to complementary.
"""


Scheme = Literal["single", "analogous", "complementary"]
SCHEMES = ("single", "analogous", "complementary")


def resolve_scheme(requested: object) -> Scheme:
    """Validate a user-supplied scheme name."""
    if requested in SCHEMES:
        return requested  # type: ignore[return-value]
    raise ValueError(
        f"unknown scheme {requested!r}; expected one of: {', '.join(SCHEMES)}"
    )


def hue_shift(scheme: str) -> Optional[float]:
    """Degrees added to the primary hue for the secondary seed, or None."""
    resolved = resolve_scheme(scheme)
    if resolved == "single":
        return None
    return SCHEME_HUE_SHIFT[resolved]


__all__ = ["Scheme", "SCHEMES", "resolve_scheme", "hue_shift"]
