"""CLI entry point for vtes_proxies."""
from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from vtes_proxies.diagnostics import Diagnostics
from vtes_proxies.errors import ProxySheetError
from vtes_proxies.layout import build_proxy_pdf, default_output_path

console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vtes-proxies",
        description="VTES Proxies – Turn a deck list into a printable 3x3 proxy sheet PDF",
    )
    parser.add_argument(
        "deck_list",
        help="Path to the deck list (one '<quantity> <card name>' per line).",
    )
    parser.add_argument(
        "image_folder",
        help="Folder containing the card images as <imagekey>.jpg.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Path to output file (default: deck list name with .pdf, or output.pdf).",
    )
    parser.add_argument(
        "--cut-guides",
        action="store_true",
        help="Draw cut marks along the card edges on every page.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show every probed image path and key rewrite.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.deck_list or not args.image_folder:
        parser.error("deck_list and image_folder must not be empty")

    deck_path = Path(args.deck_list)
    image_folder = Path(args.image_folder)
    if not image_folder.is_dir():
        parser.error(f"image folder not found: {image_folder}")

    output_path = (
        Path(args.output)
        if args.output is not None
        else default_output_path(deck_path)
    )

    diagnostics = Diagnostics(console=console, verbose=args.verbose)
    try:
        build_proxy_pdf(
            deck_path=deck_path,
            image_folder=image_folder,
            output_path=output_path,
            diagnostics=diagnostics,
            cut_guides=args.cut_guides,
        )
    except (ProxySheetError, OSError, UnicodeDecodeError) as e:
        diagnostics.error(f"[bold]{type(e).__name__}[/bold]: {escape(str(e))}")
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
