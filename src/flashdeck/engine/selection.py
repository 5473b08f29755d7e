"""Play queue selection: source list, ordering, start offset and limit."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from flashdeck.engine.csv_parser import Card
from flashdeck.state.miss_history import MissHistory


class StudyMode(str, Enum):
    FLASHCARD = "flashcard"  # self-graded
    INPUT = "input"  # typed answer, graded by the normalizer


class Order(str, Enum):
    SEQUENTIAL = "sequential"
    RANDOM = "random"


class SourceKind(str, Enum):
    ALL = "all"
    MISSED = "missed"


class EmptySelectionError(ValueError):
    """Raised when a selection leaves no cards to play."""


@dataclass
class QuizSettings:
    mode: StudyMode = StudyMode.FLASHCARD
    order: Order = Order.SEQUENTIAL
    limit: Optional[int] = None  # None plays every card
    start_index: int = 0  # only honoured for sequential order


def shuffle_cards(cards: list[Card], rng: Optional[random.Random] = None) -> list[Card]:
    """Fisher-Yates shuffle on a copy of ``cards``."""
    rng = rng or random
    deck = list(cards)
    for i in range(len(deck) - 1, 0, -1):
        j = rng.randint(0, i)
        deck[i], deck[j] = deck[j], deck[i]
    return deck


def source_cards(
    kind: SourceKind, all_cards: list[Card], history: MissHistory,
) -> list[Card]:
    """Return the cards a setup screen selects from."""
    if kind == SourceKind.MISSED:
        return history.missed_cards(all_cards)
    return list(all_cards)


def select_cards(
    source: list[Card],
    settings: QuizSettings,
    rng: Optional[random.Random] = None,
) -> list[Card]:
    """Build the play queue for one session.

    Raises EmptySelectionError if nothing is left to play.
    """
    if settings.order == Order.RANDOM:
        deck = shuffle_cards(source, rng)
    else:
        deck = list(source[max(settings.start_index, 0):])

    if settings.limit is not None:
        deck = deck[: max(settings.limit, 0)]

    if not deck:
        raise EmptySelectionError("No cards available for this selection")
    return deck
