"""Menu screen — deck summary and entry points."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static

from flashdeck.engine.selection import SourceKind


class MenuScreen(Screen):
    """Start a quiz on all cards, review missed cards, or list them."""

    BINDINGS = [
        ("a", "study_all", "Study all"),
        ("r", "review_missed", "Review missed"),
        ("l", "missed_list", "Missed list"),
    ]

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="menu-container"):
            yield Static("[bold]Let's Study![/]", id="menu-title")
            yield Static("", id="deck-info")
            yield Button("Study all cards", id="study-all", variant="primary")
            yield Button("Review missed", id="review-missed", variant="error")
            yield Button("Missed list", id="missed-list", variant="default")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_counts()

    def on_screen_resume(self) -> None:
        self.refresh_counts()

    def refresh_counts(self) -> None:
        total = len(self.app.cards)
        missed = len(self.app.history)

        info = f"Cards in deck: [bold]{total}[/]"
        if self.app.deck_used_fallback:
            info += "\n[yellow]Deck source unavailable — showing sample cards.[/]"
        self.query_one("#deck-info", Static).update(info)

        self.query_one("#study-all", Button).label = f"Study all cards ({total})"
        review = self.query_one("#review-missed", Button)
        review.label = f"Review missed ({missed})"
        review.disabled = missed == 0

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "study-all":
            self.action_study_all()
        elif event.button.id == "review-missed":
            self.action_review_missed()
        elif event.button.id == "missed-list":
            self.action_missed_list()

    def action_study_all(self) -> None:
        self.app.open_setup(SourceKind.ALL)

    def action_review_missed(self) -> None:
        if len(self.app.history) == 0:
            self.notify("No missed cards yet.", severity="warning")
            return
        self.app.open_setup(SourceKind.MISSED)

    def action_missed_list(self) -> None:
        self.app.show_missed()
