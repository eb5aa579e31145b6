"""
Tests for CLI functionality.
"""

import json
from unittest.mock import patch

import pytest

from textpager.cli import create_parser, format_listing, geometry_from_args, main
from textpager.engine.layout_engine import paginate
from textpager.exceptions import RenderingError
from textpager.version import __version__


@pytest.fixture
def input_file(temp_dir, assessment_text):
    path = temp_dir / "assessment.txt"
    path.write_text(assessment_text, encoding="utf-8")
    return path


class TestCLI:
    """Test cases for CLI functionality."""

    def test_parse_args_defaults(self):
        args = create_parser().parse_args(["input.txt"])

        assert args.format == "pdf"
        assert args.title == "Contract Risk Assessment"
        assert not args.normalize

    def test_parse_args_help(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["-h"])

    def test_geometry_from_args(self):
        args = create_parser().parse_args(["in.txt", "--margin", "15", "--page-width", "216", "--line-height", "5"])

        geometry = geometry_from_args(args)

        assert geometry.margin_mm == 15.0
        assert geometry.page_width_mm == 216.0
        assert geometry.page_height_mm == 297.0
        assert geometry.line_height_mm == 5.0

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_missing_input(self, temp_dir, capsys):
        assert main([str(temp_dir / "missing.txt")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_pdf_output(self, input_file):
        assert main([str(input_file)]) == 0

        output = input_file.with_suffix(".pdf")
        assert output.read_bytes().startswith(b"%PDF")

    def test_json_output(self, input_file, temp_dir):
        output = temp_dir / "layout.json"

        assert main([str(input_file), "-f", "json", "-o", str(output), "--no-title"]) == 0

        payload = json.loads(output.read_text(encoding="utf-8"))
        assert payload["total_pages"] == 1
        assert payload["title"] is None
        assert payload["pages"][0]["commands"][0]["text"] == "Executive Summary"

    def test_text_listing_to_stdout(self, input_file, capsys):
        assert main([str(input_file), "-f", "text"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("1 page(s)")
        assert "Page 1 of 1" in out

    def test_degenerate_geometry(self, input_file, capsys):
        assert main([str(input_file), "-f", "json", "--margin", "200"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_degenerate_geometry_pdf(self, input_file):
        assert main([str(input_file), "--margin", "200"]) == 1

    def test_format_listing(self):
        listing = format_listing(paginate("### Title", title=None))

        lines = listing.splitlines()
        assert lines[0] == "1 page(s)"
        assert lines[1] == "--- page 1 ---"
        assert lines[2].endswith("14.0B Title")

    def test_no_input_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage: textpager" in capsys.readouterr().out

    def test_file_named_version_is_paginated(self, temp_dir, assessment_text, monkeypatch, capsys):
        (temp_dir / "version").write_text(assessment_text, encoding="utf-8")
        monkeypatch.chdir(temp_dir)

        assert main(["version", "-f", "json"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["total_pages"] == 1

    def test_fallback_keeps_input_file(self, temp_dir, capsys):
        report = temp_dir / "report.txt"
        report.write_bytes(b"line one\r\nline two\r\n")
        failure = RenderingError("backend unavailable")

        with patch("textpager.api.PdfRenderer.render", side_effect=failure):
            assert main([str(report)]) == 0

        assert report.read_bytes() == b"line one\r\nline two\r\n"
        fallback = temp_dir / "report.fallback.txt"
        assert fallback.exists()
        assert str(fallback) in capsys.readouterr().out

    def test_refuses_to_overwrite_pdf_input(self, temp_dir, capsys):
        source = temp_dir / "report.pdf"
        source.write_text("not really a pdf", encoding="utf-8")

        assert main([str(source)]) == 1

        assert source.read_text(encoding="utf-8") == "not really a pdf"
        assert "overwrite" in capsys.readouterr().err

    def test_non_utf8_input(self, temp_dir, capsys):
        source = temp_dir / "latin1.txt"
        source.write_bytes(b"\xff\xfe caf\xe9")

        assert main([str(source), "-f", "text"]) == 1
        assert "Cannot read" in capsys.readouterr().err

    def test_directory_input(self, temp_dir, capsys):
        folder = temp_dir / "notes"
        folder.mkdir()

        assert main([str(folder), "-f", "text"]) == 1
        assert "Cannot read" in capsys.readouterr().err
