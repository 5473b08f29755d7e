"""Quiz state machine: present → reveal/check → record → advance."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from flashdeck.engine.csv_parser import Card
from flashdeck.engine.normalizer import answers_match
from flashdeck.engine.selection import EmptySelectionError, StudyMode


class CardState(str, Enum):
    PRESENTING = "presenting"  # Question shown, answer hidden
    REVEALED = "revealed"  # Answer shown, waiting for the user to move on


@dataclass
class CardResult:
    card_id: int
    is_correct: bool
    user_answer: Optional[str] = None  # typed mode only


@dataclass
class SessionSummary:
    correct: int
    wrong: int
    total: int

    @property
    def score(self) -> int:
        if self.total == 0:
            return 0
        # Round half up: 1 of 8 is 13, not 12
        return math.floor(self.correct / self.total * 100 + 0.5)


def summarize(results: list[CardResult]) -> SessionSummary:
    correct = sum(1 for r in results if r.is_correct)
    return SessionSummary(correct=correct, wrong=len(results) - correct, total=len(results))


def score_tier(score: int) -> str:
    """Bucket a 0-100 score for display."""
    if score >= 80:
        return "high"
    if score >= 50:
        return "mid"
    return "low"


class QuizRunner:
    """Drives one pass over a play queue and collects results."""

    def __init__(self, cards: list[Card], mode: StudyMode = StudyMode.FLASHCARD):
        if not cards:
            raise EmptySelectionError("Cannot start a session without cards")
        self.cards = list(cards)
        self.mode = mode
        self.index = 0
        self.state = CardState.PRESENTING
        self.verdict: Optional[bool] = None
        self.typed_answer = ""
        self._results: list[CardResult] = []

    @property
    def total(self) -> int:
        return len(self.cards)

    @property
    def current_card(self) -> Optional[Card]:
        if 0 <= self.index < len(self.cards):
            return self.cards[self.index]
        return None

    @property
    def is_finished(self) -> bool:
        return self.index >= len(self.cards)

    @property
    def answer_shown(self) -> bool:
        return self.state == CardState.REVEALED

    @property
    def progress_fraction(self) -> float:
        if self.is_finished:
            return 1.0
        return (self.index + 1) / len(self.cards)

    @property
    def results(self) -> list[CardResult]:
        return list(self._results)

    def reveal(self) -> None:
        if self.current_card is not None:
            self.state = CardState.REVEALED

    def check_input(self, text: str) -> bool:
        """Grade a typed answer for the current card and reveal the answer."""
        if self.mode != StudyMode.INPUT:
            raise ValueError("check_input is only available in typed mode")
        card = self.current_card
        if card is None:
            raise ValueError("Session is already finished")
        # Already graded; keep the first verdict
        if self.verdict is not None:
            return self.verdict

        self.typed_answer = text
        self.verdict = answers_match(text, card.answer)
        self.state = CardState.REVEALED
        return self.verdict

    def record(self, is_correct: bool) -> Optional[Card]:
        """Store the result for the current card and move to the next one."""
        card = self.current_card
        if card is None:
            return None

        self._results.append(CardResult(
            card_id=card.id,
            is_correct=is_correct,
            user_answer=self.typed_answer if self.mode == StudyMode.INPUT else None,
        ))

        self.index += 1
        self.state = CardState.PRESENTING
        self.verdict = None
        self.typed_answer = ""
        return self.current_card

    def summary(self) -> SessionSummary:
        return summarize(self._results)
