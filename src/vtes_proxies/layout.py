from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from rich import box
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn, TimeElapsedColumn
from rich.markup import escape
from rich.table import Table

from .deck import read_deck_list
from .diagnostics import Diagnostics
from .grid import GridGeometry, PagePlan, paginate
from .groups import resolve_crypt_groups
from .images import CardImage, build_image_list
from .pdf_generator import get_file_size_str, write_page_plans_pdf


DEFAULT_OUTPUT_NAME = "output.pdf"


def default_output_path(deck_path: Path) -> Path:
    """
    Derive the PDF path from the deck list path.

    `decks/bum.txt` becomes `decks/bum.pdf`. Names without a three letter
    extension fall back to `output.pdf` in the working directory.
    """
    name = deck_path.name
    if len(name) > 4 and name[-4] == ".":
        return deck_path.with_name(name[:-4] + ".pdf")
    return Path(DEFAULT_OUTPUT_NAME)


def collect_deck_images(
    deck_path: Path,
    image_folder: Path,
    diagnostics: Diagnostics,
) -> List[CardImage]:
    """
    Read a deck list and resolve every entry to its card image.

    - Crypt cards are resolved to their group image first.
    - Crypt images come before library images, each block sorted by path.
    - Cards without an image are left out and recorded in `diagnostics`.

    Raises:
        OSError: If the deck list cannot be read
        DeckListError: If a line is malformed
        AmbiguousGroupError: If a crypt card has images for several groups
    """
    deck = read_deck_list(deck_path, diagnostics=diagnostics)
    deck.crypt = resolve_crypt_groups(deck.crypt, image_folder, diagnostics)
    return build_image_list(deck, image_folder, diagnostics)


def plan_deck_pages(
    deck_path: Path,
    image_folder: Path,
    diagnostics: Diagnostics,
    geometry: GridGeometry = GridGeometry(),
) -> List[PagePlan]:
    """Resolve a deck list and lay its images out on pages without writing anything."""
    cards = collect_deck_images(deck_path, image_folder, diagnostics)
    return paginate(cards, geometry)


def build_proxy_pdf(
    deck_path: Path,
    image_folder: Path,
    output_path: Path,
    diagnostics: Optional[Diagnostics] = None,
    geometry: GridGeometry = GridGeometry(),
    cut_guides: bool = False,
) -> List[PagePlan]:
    """
    High-level helper:
    - Resolves all cards of the deck list to images in `image_folder`
    - Writes a single PDF with the grid layout
    - Prints a summary and a report of missing images

    Returns the page plans that were rendered.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    console = diagnostics.console

    console.print()
    console.print(Panel.fit(
        "[bold magenta]🧛 VTES Proxies[/bold magenta]\n"
        f"[dim]{escape(deck_path.name)} → {escape(output_path.name)}[/dim]",
        border_style="magenta",
    ))
    console.print()
    diagnostics.debug(
        f"Starting with deck list {escape(str(deck_path))} "
        f"and image folder {escape(str(image_folder))}"
    )

    pages = plan_deck_pages(deck_path, image_folder, diagnostics, geometry)
    cards_placed = sum(len(page) for page in pages)

    # Ensure the output directory exists
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task_id = progress.add_task("[green]Writing PDF pages...", total=len(pages))

        def on_page(page_num: int, total_pages: int) -> None:
            progress.update(
                task_id,
                advance=1,
                description=f"[green]Writing page [bold]{page_num}/{total_pages}[/bold]...",
            )

        write_page_plans_pdf(
            pages,
            output_path=output_path,
            geometry=geometry,
            progress_callback=on_page,
            cut_guides=cut_guides,
        )

    diagnostics.debug(f"PDF saved successfully: {escape(str(output_path.resolve()))}")

    # Print summary
    console.print()

    table = Table(box=box.ROUNDED, border_style="green")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("🃏 Cards placed", f"[bold]{cards_placed}[/bold]")
    table.add_row("📄 Pages created", f"[bold]{len(pages)}[/bold]")
    table.add_row("💾 Output file", f"[bold]{escape(str(output_path))}[/bold]")
    table.add_row("📊 File size", f"[bold]{get_file_size_str(output_path)}[/bold]")

    console.print(table)
    print_missing_images_report(diagnostics)

    console.print()
    console.print("[green]✔[/green] [bold green]Done![/bold green] Your proxy sheets are ready to print.")
    console.print()

    return pages


def print_missing_images_report(diagnostics: Diagnostics) -> None:
    """Print a table of deck entries that were skipped for lack of an image."""
    missing = diagnostics.missing_images
    if not missing:
        return

    console = diagnostics.console
    copies = sum(m.quantity for m in missing)
    console.print()
    console.print(
        f"[yellow]⚠ {len(missing)} cards ({copies} copies) have no image and were skipped:[/yellow]"
    )
    table = Table(box=box.SIMPLE, border_style="yellow", show_header=True)
    table.add_column("Section", style="dim")
    table.add_column("Card", style="white")
    table.add_column("Qty", justify="right")
    table.add_column("Expected file", style="yellow")
    for m in missing:
        table.add_row(m.section, m.key, str(m.quantity), m.image_path.name)
    console.print(table)
