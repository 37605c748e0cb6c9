from io import StringIO
from pathlib import Path
from typing import Callable

import pytest
from PIL import Image
from rich.console import Console

from vtes_proxies.diagnostics import Diagnostics


@pytest.fixture
def diagnostics() -> Diagnostics:
    """Diagnostics that print into a buffer instead of the terminal."""
    console = Console(file=StringIO(), width=200, color_system=None)
    return Diagnostics(console=console, verbose=True)


@pytest.fixture
def diagnostics_output(diagnostics: Diagnostics) -> Callable[[], str]:
    """Return everything printed to the diagnostics console so far."""
    return lambda: diagnostics.console.file.getvalue()


@pytest.fixture
def image_folder(tmp_path: Path) -> Path:
    folder = tmp_path / "images"
    folder.mkdir()
    return folder


@pytest.fixture
def add_images(image_folder: Path) -> Callable[..., None]:
    """Create empty image files; enough for existence checks."""

    def _add(*names: str) -> None:
        for name in names:
            (image_folder / name).touch()

    return _add


@pytest.fixture
def add_jpegs(image_folder: Path) -> Callable[..., None]:
    """Create small real JPEG files that reportlab can embed."""

    def _add(*names: str) -> None:
        for name in names:
            Image.new("RGB", (25, 35), "darkred").save(image_folder / name, "JPEG")

    return _add


@pytest.fixture
def sample_deck_list() -> str:
    """Deck list with a library and a crypt section."""
    return """4 Bum's Rush
2 Blood Doll

Crypt (3 cards, min=4, max=8, avg=6)
2 Dracula
1 Ur (Adv)"""
