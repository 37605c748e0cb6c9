"""PDF generation for proxy sheets."""
from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from reportlab.pdfgen import canvas

from .errors import DocumentWriteError
from .grid import GridGeometry, PagePlan


# Length of the cut marks at the page edges (points)
CUT_MARK_LENGTH = 12


def write_page_plans_pdf(
    pages: Sequence[PagePlan],
    output_path: Path,
    geometry: GridGeometry = GridGeometry(),
    progress_callback: Optional[Callable[[int, int], None]] = None,
    cut_guides: bool = False,
) -> None:
    """
    Render placed card images into a PDF, one PDF page per PagePlan.

    The document is written to a temporary file next to `output_path` and
    only moved into place once it has been saved completely.

    Args:
        pages: Page plans produced by `grid.paginate`
        output_path: Path to write the PDF to
        geometry: Grid the plans were laid out with
        progress_callback: Optional callback(current_page, total_pages)
        cut_guides: Draw cut marks along the cell edges on every page

    Raises:
        DocumentWriteError: If an image cannot be drawn or the file cannot be saved
    """
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.stem}-", suffix=".pdf", dir=output_path.parent
        )
    except OSError as e:
        raise DocumentWriteError(f"Could not write {output_path}: {e}") from e
    os.close(fd)
    tmp_path = Path(tmp_name)

    try:
        c = canvas.Canvas(str(tmp_path), pagesize=geometry.page_size)
        total_pages = len(pages)

        for page in pages:
            if progress_callback is not None:
                progress_callback(page.index + 1, total_pages)

            if cut_guides:
                draw_cut_guides(c, geometry)

            for placement in page.placements:
                c.drawImage(
                    str(placement.image.image_path),
                    placement.x,
                    placement.y,
                    width=geometry.card_width,
                    height=geometry.card_height,
                )

            c.showPage()

        c.save()
        tmp_path.chmod(output_file_mode(output_path))
        tmp_path.replace(output_path)
    except Exception as e:
        tmp_path.unlink(missing_ok=True)
        raise DocumentWriteError(f"Could not write {output_path}: {e}") from e


def cut_lines(geometry: GridGeometry) -> tuple[List[float], List[float]]:
    """
    X positions of vertical and y positions of horizontal cutting lines.

    Every card has its own pair of edges, so with a non-zero margin there
    are two lines between neighbouring cards.
    """
    x_positions: List[float] = []
    for column in range(geometry.columns):
        x, _ = geometry.cell_position(0, column)
        x_positions.extend([x, x + geometry.card_width])

    y_positions: List[float] = []
    for row in range(geometry.rows):
        _, y = geometry.cell_position(row, 0)
        y_positions.extend([y, y + geometry.card_height])

    return sorted(set(x_positions)), sorted(set(y_positions))


def draw_cut_guides(c: canvas.Canvas, geometry: GridGeometry) -> None:
    """
    Draw cut marks on the canvas for the card grid.

    The marks sit at the page edges: vertical ones at the top and bottom,
    horizontal ones at the left and right.
    """
    page_width, page_height = geometry.page_size
    x_positions, y_positions = cut_lines(geometry)

    # Cut marks (black, thin)
    c.setLineWidth(0.5)
    c.setStrokeColorRGB(0, 0, 0)

    for x in x_positions:
        c.line(x, page_height, x, page_height - CUT_MARK_LENGTH)
        c.line(x, 0, x, CUT_MARK_LENGTH)

    for y in y_positions:
        c.line(0, y, CUT_MARK_LENGTH, y)
        c.line(page_width, y, page_width - CUT_MARK_LENGTH, y)


def output_file_mode(output_path: Path) -> int:
    """
    Permission bits for the finished PDF.

    An existing target keeps its mode; a new file gets `0o666` minus the
    process umask, the same as a file opened directly for writing.
    """
    try:
        return stat.S_IMODE(output_path.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def get_file_size_str(file_path: Path) -> str:
    """Human-readable size of a file: "812 B", "256.0 KB" or "1.5 MB"."""
    file_size = file_path.stat().st_size
    for unit, factor in (("MB", 1024 * 1024), ("KB", 1024)):
        if file_size >= factor:
            return f"{file_size / factor:.1f} {unit}"
    return f"{file_size} B"
