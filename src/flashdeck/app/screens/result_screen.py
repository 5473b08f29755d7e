"""Result screen — score and counts for the finished session."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static

from flashdeck.engine.quiz_runner import CardResult, score_tier, summarize
from flashdeck.engine.selection import SourceKind

_TIER_STYLE = {"high": "green", "mid": "yellow", "low": "red"}


class ResultScreen(Screen):
    BINDINGS = [
        ("escape", "menu", "Menu"),
    ]

    def __init__(self, results: list[CardResult], **kwargs) -> None:
        super().__init__(**kwargs)
        self.results = results
        self.summary = summarize(results)

    def compose(self) -> ComposeResult:
        summary = self.summary
        tier = score_tier(summary.score)
        style = _TIER_STYLE[tier]

        yield Header(show_clock=True)
        with Vertical(id="result-container"):
            yield Static("[bold]Results[/]", id="result-title")
            yield Static(
                f"[{style} bold]{summary.score}[/]\n[dim]POINTS[/]",
                id="result-score",
                classes=f"tier-{tier}",
            )
            with Horizontal(id="result-counts"):
                yield Static(f"[green]Correct[/]\n[bold]{summary.correct}[/]", id="correct-count")
                yield Static(f"[red]Incorrect[/]\n[bold]{summary.wrong}[/]", id="wrong-count")
            if summary.wrong > 0:
                yield Button(
                    f"Review missed cards ({summary.wrong})",
                    id="retry-missed", variant="error",
                )
            yield Button("Back to menu", id="menu-btn", variant="primary")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "retry-missed":
            self.app.open_setup(SourceKind.MISSED)
        elif event.button.id == "menu-btn":
            self.action_menu()

    def action_menu(self) -> None:
        self.app.back_to_menu()
