"""
Command-line interface for textpager.

Usage:
    textpager assessment.txt --output assessment.pdf
    textpager assessment.txt --format json --output layout.json
    textpager assessment.txt --format text
    textpager --version
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .api import export_document
from .engine.geometry import PageGeometry
from .engine.layout_engine import paginate
from .engine.page_compositor import DEFAULT_TITLE
from .exceptions import GeometryError, RenderingError
from .version import __version__

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="textpager",
        description="Paginate plain text into fixed-size pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  textpager assessment.txt -o assessment.pdf
  textpager assessment.txt --format json -o layout.json
  textpager assessment.txt --format text --margin 15
  textpager --version
        """,
    )
    parser.add_argument("input", nargs="?", help="Input text file")
    parser.add_argument("-o", "--output", help="Output path (default: input name with new extension)")
    parser.add_argument(
        "-f", "--format",
        choices=["pdf", "json", "text"],
        default="pdf",
        help="Output format (default: pdf)",
    )
    parser.add_argument("--title", default=DEFAULT_TITLE, help=f"Title on page 1 (default: {DEFAULT_TITLE!r})")
    parser.add_argument("--no-title", action="store_true", help="Do not stamp a title on page 1")
    parser.add_argument("--page-width", type=float, default=210.0, help="Page width in mm (default: 210)")
    parser.add_argument("--page-height", type=float, default=297.0, help="Page height in mm (default: 297)")
    parser.add_argument("--margin", type=float, default=20.0, help="Margin in mm (default: 20)")
    parser.add_argument("--font-size", type=float, default=11.0, help="Body font size in pt (default: 11)")
    parser.add_argument("--line-height", type=float, default=6.0, help="Line height in mm (default: 6)")
    parser.add_argument("--normalize", action="store_true", help="Normalize markdown headings and rules first")
    parser.add_argument("--no-fallback", action="store_true", help="Fail instead of writing plain text when PDF fails")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def geometry_from_args(args) -> PageGeometry:
    return PageGeometry(
        page_width_mm=args.page_width,
        page_height_mm=args.page_height,
        margin_mm=args.margin,
        default_font_size_pt=args.font_size,
        line_height_mm=args.line_height,
    )


def format_listing(document) -> str:
    """Human-readable dump of every placement command."""
    lines = [f"{document.total_pages} page(s)"]
    for page in document.pages:
        lines.append(f"--- page {page.number} ---")
        for command in page.commands:
            weight = "B" if command.style.bold else " "
            lines.append(
                f"{command.x:7.2f} {command.y:7.2f} {command.font_size_pt:4.1f}{weight} {command.text}"
            )
    return "\n".join(lines)


def cmd_version(args=None):
    """Show version information."""
    print(f"textpager v{__version__}")
    return 0


def cmd_paginate(args):
    """Paginate the input file into the requested format."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    try:
        text = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: Cannot read {input_path}: {exc}", file=sys.stderr)
        return 1

    geometry = geometry_from_args(args)
    title = None if args.no_title else args.title

    try:
        if args.format == "pdf":
            output_path = Path(args.output) if args.output else input_path.with_suffix(".pdf")
            if output_path.resolve() == input_path.resolve():
                print(f"Error: Output would overwrite input: {input_path}", file=sys.stderr)
                return 1
            written = export_document(
                text,
                output_path,
                geometry,
                title=title,
                normalize=args.normalize,
                fallback_to_text=not args.no_fallback,
            )
            print(f"Saved: {written}")
            return 0

        document = paginate(text, geometry, title=title, normalize=args.normalize)
    except GeometryError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    except RenderingError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    if args.format == "json":
        payload = json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
    else:
        payload = format_listing(document)

    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"Saved: {args.output}")
    else:
        print(payload)
    return 0


def main(argv=None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
    )

    # Handle --version flag
    if args.version:
        return cmd_version(args)
    if args.input is None:
        parser.print_help()
        return 1
    return cmd_paginate(args)


if __name__ == "__main__":
    sys.exit(main() or 0)
