"""Setup screen — mode, order, start position and card count."""

from __future__ import annotations

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label, RadioButton, RadioSet

from flashdeck.engine.selection import Order, QuizSettings, SourceKind, StudyMode

_SOURCE_LABELS = {
    SourceKind.ALL: "All cards",
    SourceKind.MISSED: "Missed cards",
}


class SetupScreen(Screen):
    """Configure a quiz before starting it."""

    BINDINGS = [
        ("escape", "back", "Back"),
    ]

    def __init__(
        self,
        kind: SourceKind,
        total_cards: int,
        mode: StudyMode = StudyMode.FLASHCARD,
        order: Order = Order.RANDOM,
        limit_choices: Optional[list[int]] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.kind = kind
        self.total_cards = total_cards
        self.mode = mode
        self.order = order
        self.limit: Optional[int] = None
        self.limit_choices = limit_choices or [10, 20, 50]

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="setup-container"):
            yield Label(f"[bold]Quiz setup — {_SOURCE_LABELS[self.kind]}[/]")

            yield Label("\n[bold]Mode[/]")
            with RadioSet(id="mode-set"):
                yield RadioButton(
                    "Flash card (self-graded)", id="mode-flashcard",
                    value=self.mode == StudyMode.FLASHCARD,
                )
                yield RadioButton(
                    "Typed answer (auto-graded)", id="mode-input",
                    value=self.mode == StudyMode.INPUT,
                )

            yield Label("\n[bold]Order[/]")
            with RadioSet(id="order-set"):
                yield RadioButton("Random", id="order-random", value=self.order == Order.RANDOM)
                yield RadioButton(
                    "Sequential", id="order-sequential", value=self.order == Order.SEQUENTIAL,
                )

            with Vertical(id="start-index-box"):
                yield Label("[dim]Start position (0 = from the beginning)[/]")
                yield Input(value="0", type="integer", id="start-index")

            yield Label(f"\n[bold]Number of cards[/] (available: {self.total_cards})")
            with Horizontal(id="limit-buttons"):
                for n in self.limit_choices:
                    yield Button(str(n), id=f"limit-{n}", classes="limit-btn")
                yield Button("All", id="limit-all", classes="limit-btn", variant="primary")

            with Horizontal(id="setup-actions"):
                yield Button("← Back", id="back-btn", variant="default")
                yield Button("Start →", id="start-btn", variant="success")
        yield Footer()

    def on_mount(self) -> None:
        self._update_start_index_visibility()

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        pressed = event.pressed.id
        if pressed == "mode-flashcard":
            self.mode = StudyMode.FLASHCARD
        elif pressed == "mode-input":
            self.mode = StudyMode.INPUT
        elif pressed == "order-random":
            self.order = Order.RANDOM
        elif pressed == "order-sequential":
            self.order = Order.SEQUENTIAL
        self._update_start_index_visibility()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("limit-"):
            value = button_id.removeprefix("limit-")
            self.limit = None if value == "all" else int(value)
            self._highlight_limit(button_id)
        elif button_id == "start-btn":
            self.action_start()
        elif button_id == "back-btn":
            self.action_back()

    def build_settings(self) -> QuizSettings:
        return QuizSettings(
            mode=self.mode,
            order=self.order,
            limit=self.limit,
            start_index=self._read_start_index(),
        )

    def action_start(self) -> None:
        self.app.start_quiz(self.kind, self.build_settings())

    def action_back(self) -> None:
        self.app.back_to_menu()

    def _read_start_index(self) -> int:
        if self.order != Order.SEQUENTIAL:
            return 0
        raw = self.query_one("#start-index", Input).value.strip()
        try:
            return max(int(raw), 0)
        except ValueError:
            return 0

    def _update_start_index_visibility(self) -> None:
        self.query_one("#start-index-box").display = self.order == Order.SEQUENTIAL

    def _highlight_limit(self, active_id: str) -> None:
        for btn in self.query(".limit-btn").results(Button):
            btn.variant = "primary" if btn.id == active_id else "default"
