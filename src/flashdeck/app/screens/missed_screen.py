"""Missed-card list with per-card miss counts."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static

from flashdeck.engine.selection import SourceKind


class MissedScreen(Screen):
    """Lists every card missed so far in this session."""

    BINDINGS = [
        ("escape", "back", "Back"),
    ]

    def compose(self) -> ComposeResult:
        missed = self.app.history.missed_cards(self.app.cards)

        yield Header(show_clock=True)
        with Vertical(id="missed-container"):
            with Horizontal(id="missed-header"):
                yield Button("← Back", id="back-btn", variant="default")
                yield Static("[bold]Missed cards[/]", id="missed-title")
                if missed:
                    yield Button("Review all", id="review-all", variant="error")
            with VerticalScroll(id="missed-items"):
                if not missed:
                    yield Static("[green]✓[/] No missed cards!", id="missed-empty")
                for card in missed:
                    yield Static(
                        f"[red]Misses: {self.app.history.count(card.id)}[/]  "
                        f"[bold]{escape(card.question)}[/]\n"
                        f"  [dim]{escape(card.answer)}[/]",
                        classes="missed-item",
                    )
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "review-all":
            self.app.open_setup(SourceKind.MISSED)
        elif event.button.id == "back-btn":
            self.action_back()

    def action_back(self) -> None:
        self.app.back_to_menu()
