"""Tests for the command line interface."""

from pathlib import Path
from typing import Callable

import pytest
from pypdf import PdfReader

from vtes_proxies.__main__ import build_parser, main


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args(["deck.txt", "images"])
        assert args.deck_list == "deck.txt"
        assert args.image_folder == "images"
        assert args.output is None
        assert not args.cut_guides
        assert not args.verbose

    def test_missing_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["deck.txt"])
        assert exc_info.value.code != 0
        assert "usage" in capsys.readouterr().err


class TestMain:
    """Tests for running the CLI."""

    def test_empty_argument(self, image_folder: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["", str(image_folder)])
        assert exc_info.value.code == 2
        assert "must not be empty" in capsys.readouterr().err

    def test_image_folder_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "deck.txt"), str(tmp_path / "nowhere")])
        assert exc_info.value.code == 2

    def test_builds_pdf(
        self,
        tmp_path: Path,
        image_folder: Path,
        add_jpegs: Callable[..., None],
    ) -> None:
        add_jpegs("bum.jpg", "draculag3.jpg")
        deck = tmp_path / "bum.txt"
        deck.write_text("4 Bum\nCrypt:\n1 Dracula\n", encoding="utf-8")
        output = tmp_path / "sheets.pdf"

        main([str(deck), str(image_folder), "--output", str(output), "--cut-guides", "-v"])

        assert len(PdfReader(output).pages) == 1

    def test_default_output_next_to_deck(
        self,
        tmp_path: Path,
        image_folder: Path,
        add_jpegs: Callable[..., None],
    ) -> None:
        add_jpegs("bum.jpg")
        deck = tmp_path / "bum.txt"
        deck.write_text("4 Bum\n", encoding="utf-8")

        main([str(deck), str(image_folder)])

        assert (tmp_path / "bum.pdf").is_file()

    def test_ambiguous_group_exits_with_error(
        self,
        tmp_path: Path,
        image_folder: Path,
        add_images: Callable[..., None],
    ) -> None:
        add_images("draculag1.jpg", "draculag2.jpg")
        deck = tmp_path / "deck.txt"
        deck.write_text("Crypt:\n1 Dracula\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main([str(deck), str(image_folder)])

        assert exc_info.value.code == 1
        assert not (tmp_path / "deck.pdf").exists()

    def test_unreadable_deck_list_exits_with_error(self, tmp_path: Path, image_folder: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.txt"), str(image_folder)])
        assert exc_info.value.code == 1
