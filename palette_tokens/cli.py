"""
palette_tokens.cli
Derive UI palette tokens from one primary colour and audit their contrast.

Usage:
  palette-tokens COLOR [--scheme single|analogous|complementary] [--dark]
                 [--format table|json|css] [--output PATH] [--swatch PATH]
                 [--strict] [--debug]
  palette-tokens --hue DEG

Formats:
  table : tokens, scales and WCAG AA verdicts for a terminal.
  json  : the palette result as JSON (tokens, colorScale, neutralScale,
          secondaryScale, wcag).
  css   : CSS custom properties for scales and role tokens.

Exit codes:
  0 ok, 1 --strict and at least one pair fails AA, 2 bad input.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from palette_tokens.colour_convert import hue_to_hex, parse_hex
from palette_tokens.contrast import failing_pairs
from palette_tokens.core_types import PaletteOptions, PaletteResult
from palette_tokens.export import report_lines, to_css, to_json
from palette_tokens.palette import generate_palette
from palette_tokens.scheme import SCHEMES
from palette_tokens.utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
    save_swatch_png,
    warn,
)

# CLI args


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the palette-tokens command."""
    parser = argparse.ArgumentParser(
        prog="palette-tokens",
        description="Generate palette scales, role tokens and a WCAG audit from one colour.",
    )
    parser.add_argument("color", nargs="?", help="Primary colour, e.g. '#6366f1'")
    parser.add_argument(
        "--scheme",
        choices=list(SCHEMES),
        default="single",
        help="How the secondary/accent scale is derived.",
    )
    parser.add_argument("--dark", action="store_true", help="Use the dark role table")
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=["table", "json", "css"],
        default="table",
        help="Output format.",
    )
    parser.add_argument(
        "--output", type=Path, default=None, help="Write output here instead of stdout"
    )
    parser.add_argument(
        "--swatch", type=Path, default=None, help="Also write a PNG swatch here"
    )
    parser.add_argument(
        "--strict", action="store_true", help="Exit 1 if any audited pair fails AA"
    )
    parser.add_argument(
        "--hue",
        type=float,
        default=None,
        help="Print the representative colour for a hue (degrees) and exit",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    return parser


def parse_cli_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


# Output


def _render(result: PaletteResult, fmt: str) -> str:
    if fmt == "json":
        return to_json(result) + "\n"
    if fmt == "css":
        return to_css(result)
    return "\n".join(report_lines(result)) + "\n"


def _debug_seed(color: str) -> None:
    seed = parse_hex(color)
    debug_log(
        key_value_pairs_to_string(
            [
                ("L", seed.l),
                ("C", seed.c),
                ("h", "-" if seed.h is None else seed.h),
            ]
        )
    )


# Entry point


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point. Returns the process exit code.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    if args.hue is not None:
        try:
            log(hue_to_hex(args.hue))
        except ValueError as e:
            error(str(e))
            return 2
        return 0

    if not args.color:
        error("a colour is required (or use --hue)")
        return 2

    options = PaletteOptions(scheme=args.scheme, dark=args.dark)
    if args.debug:
        print_config_line(
            "run",
            [("Colour", args.color), ("Scheme", options.scheme), ("Dark", options.dark), ("Format", args.fmt)],
            debug=True,
        )

    t_start = time.perf_counter()
    try:
        if args.debug:
            _debug_seed(args.color)
        result = generate_palette(args.color, options)
    except (TypeError, ValueError) as e:
        error(str(e))
        return 2
    t_done = time.perf_counter()

    text = _render(result, args.fmt)
    # keep stdout machine-readable for json/css
    chatty = args.output is not None or args.fmt == "table"
    if args.output is not None:
        args.output.write_text(text, encoding="utf-8")
        log(f"Wrote {args.output}")
    else:
        if args.fmt == "table":
            print_banner(f"{args.color} ({options.scheme}, {'dark' if options.dark else 'light'})")
        sys.stdout.write(text)
        sys.stdout.flush()

    if args.swatch is not None:
        save_swatch_png(args.swatch, result)
        if chatty:
            log(f"Wrote {args.swatch}")

    if args.debug:
        debug_log(f"generated in {(t_done - t_start) * 1000.0:.1f}ms")

    failed = failing_pairs(result.wcag)
    if failed:
        warn(f"below AA: {', '.join(failed)}")
        if args.strict:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
