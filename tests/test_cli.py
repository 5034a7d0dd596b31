"""Tests for the palette-tokens command line."""

import json

from palette_tokens.cli import build_parser, main
from palette_tokens.colour_convert import hue_to_hex


def test_parser_defaults():
    args = build_parser().parse_args(["#6366f1"])
    assert args.color == "#6366f1"
    assert args.scheme == "single"
    assert args.dark is False
    assert args.fmt == "table"


def test_json_output(capsys):
    assert main(["#6366f1", "--format", "json", "--dark"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert "primary-text" in data["tokens"]
    assert data["secondaryScale"] is None
    assert len(data["wcag"]) == 8


def test_css_output(capsys):
    assert main(["#6366f1", "--format", "css", "--scheme", "complementary"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(":root {")
    assert "--secondary-500:" in out


def test_table_output(capsys):
    assert main(["#6366f1"]) == 0
    out = capsys.readouterr().out
    assert "=== #6366f1 (single, light) ===" in out
    assert "text/bg" in out
    assert "PASS" in out


def test_output_file_and_swatch(tmp_path, capsys):
    out_file = tmp_path / "tokens.css"
    swatch = tmp_path / "swatch.png"
    code = main(["#22c55e", "--format", "css", "--output", str(out_file), "--swatch", str(swatch)])
    assert code == 0
    assert out_file.read_text(encoding="utf-8").startswith(":root {")
    assert swatch.exists()
    assert f"Wrote {out_file}" in capsys.readouterr().out


def test_hue_mode(capsys):
    assert main(["--hue", "264"]) == 0
    assert capsys.readouterr().out.strip() == hue_to_hex(264.0)


def test_non_finite_hue_exits_2(capsys):
    assert main(["--hue", "nan"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "finite" in captured.err


def test_bad_colour_exits_2(capsys):
    assert main(["not-a-colour"]) == 2
    assert "[error]" in capsys.readouterr().err


def test_missing_colour_exits_2(capsys):
    assert main([]) == 2
    assert "colour is required" in capsys.readouterr().err


def test_strict_reports_failures(capsys):
    # yellow primary on a near-white background cannot reach 4.5:1
    code = main(["#facc15", "--strict", "--format", "json"])
    err = capsys.readouterr().err
    assert code == 1
    assert "primary/bg" in err


def test_debug_lines(capsys):
    assert main(["#6366f1", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "[debug] [run] Colour: #6366f1" in out
    assert "[debug] L:" in out
