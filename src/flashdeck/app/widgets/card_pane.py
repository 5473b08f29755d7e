"""Card display with id, position and optional answer."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import ProgressBar, Static

from flashdeck.engine.csv_parser import Card


class CardPane(Vertical):
    """Shows the current question and, once revealed, its answer."""

    def __init__(self, total: int, **kwargs) -> None:
        super().__init__(id="card-pane", **kwargs)
        self.border_title = "Card"
        self._total = total

    def compose(self) -> ComposeResult:
        with Horizontal(id="card-header"):
            yield Static("", id="card-id")
            yield Static("", id="card-counter")
        yield ProgressBar(total=self._total, show_eta=False, id="card-progress")
        yield Static("[dim]QUESTION[/]", classes="card-caption")
        yield Static("", id="card-question")
        yield Static("[dim]ANSWER[/]", id="answer-caption", classes="card-caption")
        yield Static("", id="card-answer")

    def show_card(self, card: Card, index: int) -> None:
        self.query_one("#card-id", Static).update(f"[dim]ID: {card.id}[/]")
        self.query_one("#card-counter", Static).update(
            f"[bold]Q. {index + 1} / {self._total}[/]"
        )
        self.query_one("#card-progress", ProgressBar).update(progress=index + 1)
        self.query_one("#card-question", Static).update(escape(card.question))
        self.query_one("#card-answer", Static).update(escape(card.answer))
        self.hide_answer()

    def show_answer(self) -> None:
        self.query_one("#answer-caption", Static).display = True
        self.query_one("#card-answer", Static).display = True

    def hide_answer(self) -> None:
        self.query_one("#answer-caption", Static).display = False
        self.query_one("#card-answer", Static).display = False
