"""flashdeck main Textual application."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from flashdeck.app.screens.menu_screen import MenuScreen
from flashdeck.app.screens.missed_screen import MissedScreen
from flashdeck.app.screens.quiz_screen import QuizScreen
from flashdeck.app.screens.result_screen import ResultScreen
from flashdeck.app.screens.setup_screen import SetupScreen
from flashdeck.config.settings import Settings
from flashdeck.engine.csv_parser import Card
from flashdeck.engine.deck_loader import load_deck_async
from flashdeck.engine.quiz_runner import QuizRunner
from flashdeck.engine.selection import (
    EmptySelectionError,
    QuizSettings,
    SourceKind,
    select_cards,
    source_cards,
)
from flashdeck.state.miss_history import MissHistory

logger = logging.getLogger(__name__)


class FlashdeckApp(App):
    """Flashcard study tool."""

    TITLE = "flashdeck"
    SUB_TITLE = "Flashcard study"

    CSS_PATH = Path(__file__).parent / "css" / "flashdeck.tcss"

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("d", "toggle_theme", "Light/Dark"),
    ]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        source: Optional[str] = None,
        rng: Optional[random.Random] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.settings = settings or Settings.load()
        self.source = source or self.settings.get_source()
        self.rng = rng or random.Random()
        self.cards: list[Card] = []
        self.history = MissHistory()
        self.deck_origin = ""
        self.deck_used_fallback = False

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("Loading deck...", id="loading")
        yield Footer()

    def on_mount(self) -> None:
        self.run_worker(self._load_deck(), exclusive=True)

    async def _load_deck(self) -> None:
        deck = await load_deck_async(self.source, self.settings.fetch_timeout_seconds)
        self.cards = deck.cards
        self.deck_origin = deck.origin
        self.deck_used_fallback = deck.used_fallback
        if deck.used_fallback:
            self.sub_title = "Flashcard study — sample deck"
        else:
            self.sub_title = f"Flashcard study — {Path(deck.origin).name}"
        logger.info("Deck ready: %d cards from %s", len(self.cards), deck.origin)
        self.push_screen(MenuScreen())

    # ── Navigation ──

    def _show(self, screen: Screen) -> None:
        """Open a screen above the menu, replacing any non-menu screen."""
        if isinstance(self.screen, MenuScreen):
            self.push_screen(screen)
        else:
            self.switch_screen(screen)

    def back_to_menu(self) -> None:
        if not isinstance(self.screen, MenuScreen):
            self.pop_screen()

    def open_setup(self, kind: SourceKind) -> None:
        total = len(source_cards(kind, self.cards, self.history))
        self._show(SetupScreen(
            kind=kind,
            total_cards=total,
            mode=self.settings.default_mode,
            order=self.settings.default_order,
            limit_choices=self.settings.limit_choices,
        ))

    def show_missed(self) -> None:
        self._show(MissedScreen())

    # ── Session lifecycle ──

    def start_quiz(self, kind: SourceKind, quiz_settings: QuizSettings) -> bool:
        """Build the play queue and open the quiz. Returns False if nothing to play."""
        source = source_cards(kind, self.cards, self.history)
        try:
            queue = select_cards(source, quiz_settings, rng=self.rng)
        except EmptySelectionError:
            self.notify(
                "There are no cards to play with these settings.",
                title="Cannot start",
                severity="error",
            )
            return False

        self._show(QuizScreen(QuizRunner(queue, quiz_settings.mode)))
        return True

    def finish_quiz(self, runner: QuizRunner) -> None:
        results = runner.results
        missed = self.history.record_results(results)
        logger.info("Session finished: %d cards, %d missed", len(results), missed)
        self._show(ResultScreen(results))

    def action_toggle_theme(self) -> None:
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"
