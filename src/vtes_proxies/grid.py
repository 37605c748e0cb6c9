"""Placement of card images onto fixed-size pages in a fixed grid."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm

from .images import CardImage


# Default card dimensions (in points, 1 point = 1/72 inch)
DEFAULT_CARD_WIDTH = 6.35 * cm
DEFAULT_CARD_HEIGHT = 8.89 * cm

# Default grid layout
DEFAULT_ROWS = 3
DEFAULT_COLUMNS = 3

# Gap between neighbouring cards and distance of the grid from the
# top-left corner of the page (points)
DEFAULT_MARGIN = 1.0
DEFAULT_OFFSET_X = 25.0
DEFAULT_OFFSET_Y = 25.0


@dataclass(frozen=True)
class GridGeometry:
    """Page size and grid of a proxy sheet."""

    card_width: float = DEFAULT_CARD_WIDTH
    card_height: float = DEFAULT_CARD_HEIGHT
    columns: int = DEFAULT_COLUMNS
    rows: int = DEFAULT_ROWS
    margin: float = DEFAULT_MARGIN
    offset_x: float = DEFAULT_OFFSET_X
    offset_y: float = DEFAULT_OFFSET_Y
    page_size: Tuple[float, float] = A4

    def __post_init__(self) -> None:
        if self.card_width <= 0 or self.card_height <= 0:
            raise ValueError("Card width and height must be positive.")
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError("Grid must have at least one row and one column.")
        if self.page_size[0] <= 0 or self.page_size[1] <= 0:
            raise ValueError("Page size must be positive.")
        if self.margin < 0 or self.offset_x < 0 or self.offset_y < 0:
            raise ValueError("Margin and offsets must not be negative.")

    @property
    def page_width(self) -> float:
        return self.page_size[0]

    @property
    def page_height(self) -> float:
        return self.page_size[1]

    @property
    def cells_per_page(self) -> int:
        return self.columns * self.rows

    def cell_position(self, row: int, column: int) -> Tuple[float, float]:
        """
        Bottom-left corner of a cell in PDF coordinates.

        Rows count downwards from the top of the page, while PDF y grows
        upwards from the bottom edge.
        """
        x = self.offset_x + column * (self.card_width + self.margin)
        y = (
            self.page_height
            - self.offset_y
            - self.card_height
            - row * (self.card_height + self.margin)
        )
        return x, y


@dataclass(frozen=True)
class Placement:
    """A card image placed in one grid cell."""

    image: CardImage
    row: int
    column: int
    x: float
    y: float


@dataclass(frozen=True)
class PagePlan:
    """The filled cells of one page, in row-major order."""

    index: int
    placements: Tuple[Placement, ...]

    def __len__(self) -> int:
        return len(self.placements)


def page_count(total_images: int, geometry: GridGeometry) -> int:
    return math.ceil(total_images / geometry.cells_per_page)


def paginate(
    images: Sequence[CardImage],
    geometry: GridGeometry = GridGeometry(),
) -> List[PagePlan]:
    """
    Lay the images out page by page, left to right and top to bottom.

    - Images are used in the order given.
    - A page holds at most `columns x rows` images.
    - The last page only holds the remaining images; empty cells are not
      emitted, and no images means no pages.
    """
    pages: List[PagePlan] = []
    per_page = geometry.cells_per_page

    for page_index in range(page_count(len(images), geometry)):
        start = page_index * per_page
        group = images[start : start + per_page]

        placements: List[Placement] = []
        for idx, image in enumerate(group):
            row = idx // geometry.columns
            column = idx % geometry.columns
            x, y = geometry.cell_position(row, column)
            placements.append(Placement(image=image, row=row, column=column, x=x, y=y))

        pages.append(PagePlan(index=page_index, placements=tuple(placements)))

    return pages
