"""Quiz screen — one card at a time in flash-card or typed-answer mode."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input

from flashdeck.app.widgets.card_pane import CardPane
from flashdeck.app.widgets.verdict_banner import VerdictBanner
from flashdeck.engine.quiz_runner import QuizRunner
from flashdeck.engine.selection import StudyMode


class QuizScreen(Screen):
    """Presents the play queue and reports results to the app when done."""

    BINDINGS = [
        Binding("escape", "quit_quiz", "Quit to menu"),
    ]

    def __init__(self, runner: QuizRunner, **kwargs) -> None:
        super().__init__(**kwargs)
        self.runner = runner

    @property
    def typed_mode(self) -> bool:
        return self.runner.mode == StudyMode.INPUT

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="quiz-layout"):
            yield CardPane(total=self.runner.total)
            yield VerdictBanner()
            with Vertical(id="quiz-controls"):
                # Flash-card mode
                yield Button("Show answer", id="show-answer", variant="primary")
                with Horizontal(id="self-grade"):
                    yield Button("✗ Didn't know", id="grade-wrong", variant="error")
                    yield Button("✓ Got it!", id="grade-right", variant="success")
                # Typed mode
                yield Input(placeholder="Type your answer... (Enter to check)", id="answer-input")
                yield Button("Check", id="check-answer", variant="primary")
                yield Button("Next →", id="next-card", variant="primary")
            yield Button("Quit to menu", id="quit-quiz", variant="default")
        yield Footer()

    def on_mount(self) -> None:
        self._present_current_card()

    # ── Presentation ──

    def _present_current_card(self) -> None:
        card = self.runner.current_card
        if card is None:
            return
        self.query_one(CardPane).show_card(card, self.runner.index)
        self.query_one(VerdictBanner).hide()
        answer_input = self.query_one("#answer-input", Input)
        answer_input.value = ""
        self._sync_controls()

    def _sync_controls(self) -> None:
        """Show only the controls that apply to the current mode and card state."""
        shown = self.runner.answer_shown
        flash = not self.typed_mode

        self.query_one("#show-answer").display = flash and not shown
        self.query_one("#self-grade").display = flash and shown
        self.query_one("#answer-input").display = self.typed_mode and not shown
        self.query_one("#check-answer").display = self.typed_mode and not shown
        self.query_one("#next-card").display = self.typed_mode and shown

        if shown:
            self.query_one(CardPane).show_answer()

        if self.typed_mode:
            focus_id = "#next-card" if shown else "#answer-input"
        else:
            focus_id = "#grade-right" if shown else "#show-answer"
        self.query_one(focus_id).focus()

    # ── Events ──

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "show-answer":
            self.action_reveal()
        elif button_id == "grade-right":
            self._record(True)
        elif button_id == "grade-wrong":
            self._record(False)
        elif button_id == "check-answer":
            self._check(self.query_one("#answer-input", Input).value)
        elif button_id == "next-card":
            self._record(bool(self.runner.verdict))
        elif button_id == "quit-quiz":
            self.action_quit_quiz()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "answer-input":
            self._check(event.value)

    # ── Actions ──

    def action_reveal(self) -> None:
        if self.typed_mode or self.runner.answer_shown:
            return
        self.runner.reveal()
        self._sync_controls()

    def action_quit_quiz(self) -> None:
        """Abandon the session without recording anything."""
        self.app.back_to_menu()

    def _check(self, text: str) -> None:
        if not self.typed_mode or self.runner.answer_shown:
            return
        card = self.runner.current_card
        if card is None:
            return
        correct = self.runner.check_input(text)
        self.query_one(VerdictBanner).show_verdict(correct, card.answer, text)
        self._sync_controls()

    def _record(self, is_correct: bool) -> None:
        self.runner.record(is_correct)
        if self.runner.is_finished:
            self.app.finish_quiz(self.runner)
        else:
            self._present_current_card()
