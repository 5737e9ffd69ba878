"""Tests for listing output."""

from io import StringIO

from rich.console import Console

from showfiles.features.layout import LayoutConfig, SpaceStyle
from showfiles.ui.cli.display import ListingDisplay


def _display(layout: LayoutConfig) -> tuple[ListingDisplay, StringIO]:
    output = StringIO()
    return ListingDisplay(layout, Console(file=output, width=40)), output


def test_names_are_printed_verbatim() -> None:
    """Markup-like names and long rows are neither styled nor wrapped."""

    display, output = _display(LayoutConfig(one_per_line=True))
    display.show_batch(["[bold]x[/bold]", "y" * 60, ":smile:"])

    assert output.getvalue().splitlines() == ["[bold]x[/bold]", "y" * 60, ":smile:"]


def test_space_style_applies_before_layout() -> None:
    display, output = _display(
        LayoutConfig(space_style=SpaceStyle.ESCAPED, terminal_width=100, min_column_spacing=2)
    )
    display.show_batch(["a b", "c", "d"])

    assert output.getvalue() == "a\\ b  c  d\n"


def test_literal_and_header() -> None:
    display, output = _display(LayoutConfig(space_style=SpaceStyle.QUOTED))
    display.show_literal("my notes.txt")
    display.show_header("photos/")

    assert output.getvalue().splitlines() == ["'my notes.txt'", "# photos/:"]


def test_empty_batch_prints_nothing() -> None:
    display, output = _display(LayoutConfig())
    display.show_batch([])
    assert output.getvalue() == ""
