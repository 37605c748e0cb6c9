"""Tests for building the ordered image list."""

from pathlib import Path
from typing import Callable

from vtes_proxies.deck import CRYPT, LIBRARY, DeckList
from vtes_proxies.diagnostics import Diagnostics
from vtes_proxies.images import build_image_list, collect_section_images
from vtes_proxies.keys import ImageKey


def key(text: str) -> ImageKey:
    return ImageKey.parse(text)


class TestCollectSectionImages:
    """Tests for expanding one section map."""

    def test_one_image_per_copy(
        self,
        image_folder: Path,
        add_images: Callable[..., None],
        diagnostics: Diagnostics,
    ) -> None:
        add_images("blooddoll.jpg")

        images = collect_section_images({key("blooddoll"): 3}, image_folder, LIBRARY, diagnostics)

        assert [i.image_path for i in images] == [image_folder / "blooddoll.jpg"] * 3
        assert {i.section for i in images} == {LIBRARY}

    def test_sorted_by_path(
        self,
        image_folder: Path,
        add_images: Callable[..., None],
        diagnostics: Diagnostics,
    ) -> None:
        add_images("a.jpg", "b.jpg")

        images = collect_section_images({key("a"): 2, key("b"): 1}, image_folder, CRYPT, diagnostics)

        assert [i.key for i in images] == ["a", "a", "b"]

    def test_missing_image_skipped_and_recorded(
        self,
        image_folder: Path,
        add_images: Callable[..., None],
        diagnostics: Diagnostics,
        diagnostics_output: Callable[[], str],
    ) -> None:
        add_images("blooddoll.jpg")

        images = collect_section_images(
            {key("blooddoll"): 1, key("bumsrush"): 4}, image_folder, LIBRARY, diagnostics
        )

        assert [i.key for i in images] == ["blooddoll"]
        assert len(diagnostics.missing_images) == 1
        missing = diagnostics.missing_images[0]
        assert missing.key == "bumsrush"
        assert missing.quantity == 4
        assert missing.image_path == image_folder / "bumsrush.jpg"
        assert "No image found for library card bumsrush" in diagnostics_output()

    def test_missing_crypt_image_recorded_without_warning(
        self,
        image_folder: Path,
        diagnostics: Diagnostics,
        diagnostics_output: Callable[[], str],
    ) -> None:
        images = collect_section_images({key("dracula"): 1}, image_folder, CRYPT, diagnostics)

        assert images == []
        assert diagnostics.missing_images[0].section == CRYPT
        assert "No image found" not in diagnostics_output()


class TestBuildImageList:
    """Tests for the combined crypt + library order."""

    def test_crypt_block_before_library_block(
        self,
        image_folder: Path,
        add_images: Callable[..., None],
        diagnostics: Diagnostics,
    ) -> None:
        add_images("a.jpg", "b.jpg", "aaa.jpg", "zzz.jpg")
        deck = DeckList(
            library={key("zzz"): 1, key("aaa"): 2},
            crypt={key("b"): 2, key("a"): 1},
        )

        images = build_image_list(deck, image_folder, diagnostics)

        assert [i.key for i in images] == ["a", "b", "b", "aaa", "aaa", "zzz"]
        assert [i.section for i in images] == [CRYPT] * 3 + [LIBRARY] * 3

    def test_crypt_sorted_by_path_not_by_deck_order(
        self,
        image_folder: Path,
        add_images: Callable[..., None],
        diagnostics: Diagnostics,
    ) -> None:
        """Quantities {a:2, b:1} with a sorting after b give [b, a, a]."""
        add_images("zoe.jpg", "beast.jpg")
        deck = DeckList(crypt={key("zoe"): 2, key("beast"): 1})

        images = build_image_list(deck, image_folder, diagnostics)

        assert [i.key for i in images] == ["beast", "zoe", "zoe"]

    def test_empty_deck(self, image_folder: Path, diagnostics: Diagnostics) -> None:
        assert build_image_list(DeckList(), image_folder, diagnostics) == []
