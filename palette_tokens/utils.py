# palette_tokens/utils.py
from __future__ import annotations

"""
Shared utilities for palette_tokens.

Includes swatch image rendering with Pillow, value formatting, and tidy logging.
"""

import sys
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Sequence, Tuple

import numpy as np
from PIL import Image

from .core_types import HexStr, PaletteResult, U8Rows, hex_list_to_u8_rgb_array

# Swatch images


def swatch_rows(result: PaletteResult) -> List[Tuple[str, List[HexStr]]]:
    """(label, colours) rows: colour, neutral, secondary (if any), tokens."""
    rows: List[Tuple[str, List[HexStr]]] = [
        ("color", list(result.color_scale.values())),
        ("neutral", list(result.neutral_scale.values())),
    ]
    if result.secondary_scale is not None:
        rows.append(("secondary", list(result.secondary_scale.values())))
    rows.append(("tokens", list(result.tokens.values())))
    return rows


def render_swatch_array(
    rows: Sequence[Tuple[str, Sequence[HexStr]]],
    cell: int = 48,
    gap: int = 4,
    background: HexStr = "#ffffff",
) -> U8Rows:
    """
    Paint rows of colour cells into a uint8 (H, W, 3) image.
    Width fits the longest row; shorter rows are left-aligned.
    """
    if cell <= 0 or gap < 0:
        raise ValueError("cell must be > 0 and gap >= 0")
    n_rows = len(rows)
    n_cols = max((len(colours) for _, colours in rows), default=0)
    height = gap + n_rows * (cell + gap)
    width = gap + n_cols * (cell + gap)
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:, :] = hex_list_to_u8_rgb_array([background])[0]
    for r, (_label, colours) in enumerate(rows):
        if not colours:
            continue
        rgb = hex_list_to_u8_rgb_array(list(colours))
        y0 = gap + r * (cell + gap)
        for c in range(rgb.shape[0]):
            x0 = gap + c * (cell + gap)
            canvas[y0 : y0 + cell, x0 : x0 + cell] = rgb[c]
    return canvas


def save_swatch_png(path: Path, result: PaletteResult, cell: int = 48) -> None:
    """Write the palette swatch as a PNG file."""
    Image.fromarray(render_swatch_array(swatch_rows(result), cell=cell)).save(path)


# Pretty formatting


def format_bool_on_off(value: Any) -> str:
    """Pretty boolean: 'on'/'off' for bools; str(value) otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def format_number_compact(value: Any) -> str:
    """Pretty number: 1_234 style for ints; compact for floats; passthrough otherwise."""
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        text = f"{value:.3f}".rstrip("0").rstrip(".")
        return text
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """
    Format (name, value) pairs as 'Name: value' blocks separated by sep.
    Uses format_bool_on_off / format_number_compact for readability.
    """
    out: List[str] = []
    for name, value in pairs:
        display = (
            format_bool_on_off(value)
            if isinstance(value, bool)
            else format_number_compact(value)
        )
        out.append(f"{name}{eq}{display}")
    return sep.join(out)


def format_scale_line(scale: Mapping[str, HexStr]) -> str:
    """'50=#.. 100=#.. ...' on one line."""
    return " ".join(f"{shade}={hex_code}" for shade, hex_code in scale.items())


# CLI logging


def enable_line_buffered_stdout() -> None:
    """
    Enable line-buffered stdout when supported.
    Keeps log lines in order when stdout is piped.
    """
    reconfig = getattr(sys.stdout, "reconfigure", None)
    if callable(reconfig):
        try:
            reconfig(line_buffering=True)
        except ValueError:
            pass  # stream already detached or closed


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    Emit a single human-readable config line, e.g.:
      [run] Scheme: analogous  Dark: on  Format: css
    Routes to debug_log() when debug=True, else to log().
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


def print_banner(title: str) -> None:
    """Section banner."""
    print(f"\n=== {title} ===", flush=True)


def log(message: str) -> None:
    """Plain log line."""
    print(message, flush=True)


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", flush=True)


def warn(message: str) -> None:
    """Warning log line to stderr."""
    print(f"[warn] {message}", file=sys.stderr, flush=True)


def error(message: str) -> None:
    """Error log line to stderr."""
    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    # swatch images
    "swatch_rows",
    "render_swatch_array",
    "save_swatch_png",
    # formatting
    "format_bool_on_off",
    "format_number_compact",
    "key_value_pairs_to_string",
    "format_scale_line",
    # logging
    "enable_line_buffered_stdout",
    "print_config_line",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
