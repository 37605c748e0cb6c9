"""Diagnostics sink shared by the pipeline components."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from rich.console import Console


@dataclass
class MissingImage:
    """Represents a deck entry whose image file does not exist."""

    section: str
    key: str
    image_path: Path
    quantity: int


@dataclass
class Diagnostics:
    """
    Collects and prints messages for one run.

    One instance is passed to every component of a run. Skipped deck
    entries end up in `missing_images` for the final report.
    """

    console: Console = field(default_factory=lambda: Console(stderr=True))
    verbose: bool = False
    missing_images: List[MissingImage] = field(default_factory=list)

    def debug(self, message: str) -> None:
        if self.verbose:
            self.console.print(f"[dim]{message}[/dim]")

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✘[/red] {message}")

    def record_missing(
        self,
        section: str,
        key: str,
        image_path: Path,
        quantity: int,
        message: Optional[str] = None,
    ) -> None:
        """Remember a skipped entry for the end-of-run report."""
        self.missing_images.append(
            MissingImage(section=section, key=key, image_path=image_path, quantity=quantity)
        )
        if message:
            self.warn(message)
