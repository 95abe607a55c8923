"""
Command line entry point.

Usage:
    richtext-toolkit dib logo.dib --format png --output logo.png
    richtext-toolkit dib dump.bin --offset 512 --format uri --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from richtext_toolkit import __version__
from richtext_toolkit.core.errors import FormatError
from richtext_toolkit.dib import load_packed_dib

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="richtext-toolkit",
        description="Decode embedded DIB bitmaps from document containers.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    dib = sub.add_parser("dib", help="Extract a packed DIB as a standalone image")
    dib.add_argument("path", type=Path, help="File holding the packed DIB")
    dib.add_argument("--offset", type=int, default=0, help="Offset of the DIB header (default: 0)")
    dib.add_argument(
        "--format", "-f", choices=["uri", "raw", "png"], default="uri",
        help="uri: data URI, raw: .bmp/.jpg/.png payload, png: convert with Pillow (default: uri)",
    )
    dib.add_argument("--output", "-o", type=Path, help="Output file (default: stdout for uri)")
    dib.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def _run_dib(args: argparse.Namespace) -> int:
    bitmap = load_packed_dib(args.path.read_bytes(), args.offset)
    print(f"{bitmap.encoding} {bitmap.width}x{bitmap.height} infosize={bitmap.info.infosize}", file=sys.stderr)

    if args.format == "uri":
        uri = bitmap.extract()
        if args.output is None:
            print(uri)
        else:
            args.output.write_text(uri, encoding="ascii")
        return 0

    if args.output is None:
        print("--output is required for raw and png formats", file=sys.stderr)
        return 2

    args.output.parent.mkdir(parents=True, exist_ok=True)
    if args.format == "raw":
        args.output.write_bytes(bitmap.extract_bytes())
    else:
        bitmap.to_image().save(args.output, format="PNG")
    logger.info(f"Wrote {args.output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("richtext_toolkit").setLevel(level)

    try:
        return _run_dib(args)
    except FormatError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
