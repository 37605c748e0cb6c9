"""
Package initialization for vtes_proxies.

This package turns a VTES deck list into a printable proxy sheet PDF:
every card is resolved to an image file and the images are laid out
3x3 on A4 pages.

Modules:
    - keys: structured image keys (base name, group, advanced)
    - deck: deck list parsing and card name normalization
    - groups: resolution of crypt cards to their group image
    - images: expansion of deck entries into the ordered image list
    - grid: placement of images onto pages
    - pdf_generator: PDF rendering of the page plans
    - layout: High-level API orchestrating the above modules
"""

from .deck import DeckList, normalize_card_name, parse_deck_lines, read_deck_list
from .diagnostics import Diagnostics, MissingImage
from .errors import AmbiguousGroupError, DeckListError, DocumentWriteError, ProxySheetError
from .grid import GridGeometry, PagePlan, Placement, paginate
from .groups import resolve_crypt_groups
from .images import CardImage, build_image_list
from .keys import ImageKey
from .layout import build_proxy_pdf, collect_deck_images, default_output_path, plan_deck_pages
from .pdf_generator import write_page_plans_pdf

__all__ = [
    # Data classes
    "CardImage",
    "DeckList",
    "GridGeometry",
    "ImageKey",
    "MissingImage",
    "PagePlan",
    "Placement",
    # Diagnostics and errors
    "Diagnostics",
    "ProxySheetError",
    "DeckListError",
    "AmbiguousGroupError",
    "DocumentWriteError",
    # Core functions
    "normalize_card_name",
    "parse_deck_lines",
    "read_deck_list",
    "resolve_crypt_groups",
    "build_image_list",
    "paginate",
    "write_page_plans_pdf",
    "collect_deck_images",
    "plan_deck_pages",
    "build_proxy_pdf",
    "default_output_path",
]
