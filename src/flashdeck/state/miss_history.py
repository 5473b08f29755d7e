"""In-memory miss tracking for the running session."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from flashdeck.engine.csv_parser import Card

if TYPE_CHECKING:
    from flashdeck.engine.quiz_runner import CardResult


class MissHistory:
    """Counts how many times each card was answered incorrectly.

    Entries are created on the first miss; a card that is absent has zero
    misses. Nothing is written to disk.
    """

    def __init__(self) -> None:
        self._counts: dict[int, int] = {}

    def record_miss(self, card_id: int) -> int:
        self._counts[card_id] = self._counts.get(card_id, 0) + 1
        return self._counts[card_id]

    def record_results(self, results: Iterable[CardResult]) -> int:
        """Add one miss per incorrect result. Returns the number recorded."""
        recorded = 0
        for r in results:
            if not r.is_correct:
                self.record_miss(r.card_id)
                recorded += 1
        return recorded

    def count(self, card_id: int) -> int:
        return self._counts.get(card_id, 0)

    def missed_ids(self) -> set[int]:
        return {cid for cid, n in self._counts.items() if n > 0}

    def missed_cards(self, all_cards: list[Card]) -> list[Card]:
        """Return the missed cards in deck order."""
        return [c for c in all_cards if self.count(c.id) > 0]

    def as_dict(self) -> dict[int, int]:
        return dict(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._counts
