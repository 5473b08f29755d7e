"""Verdict banner for typed answers."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static


class VerdictBanner(Vertical):
    """Correct / incorrect banner with the expected and typed answers."""

    def __init__(self, **kwargs) -> None:
        super().__init__(id="verdict-banner", **kwargs)

    def compose(self) -> ComposeResult:
        yield Static("", id="verdict-text")
        yield Static("", id="verdict-detail")

    def show_verdict(self, correct: bool, expected: str, typed: str = "") -> None:
        text = self.query_one("#verdict-text", Static)
        detail = self.query_one("#verdict-detail", Static)

        self.remove_class("correct", "wrong")
        if correct:
            text.update("[green bold]✓ Correct![/]")
            detail.update(f"[dim]Answer:[/] [bold]{escape(expected)}[/]")
            self.add_class("correct")
        else:
            text.update("[red bold]✗ Incorrect[/]")
            detail.update(
                f"[dim]Answer:[/] [bold]{escape(expected)}[/]\n"
                f"[dim]You typed:[/] [strike]{escape(typed)}[/]"
            )
            self.add_class("wrong")

        self.add_class("visible")

    def hide(self) -> None:
        self.remove_class("visible", "correct", "wrong")
