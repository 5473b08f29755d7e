"""Deck source retrieval with graceful fallback to built-in sample data."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests

from flashdeck.engine.csv_parser import Card, parse_cards

logger = logging.getLogger(__name__)

SAMPLE_CSV = """Question,Answer
Apple,りんご
Computer,コンピュータ
Japan,日本
Artificial Intelligence,人工知能
Network,ネットワーク
Database,データベース
Algorithm,アルゴリズム
Security,セキュリティ
Programming,プログラミング
Cloud,クラウド"""

SAMPLE_ORIGIN = "<sample>"


class DeckSourceError(Exception):
    """The deck source could not be retrieved."""


@dataclass
class LoadedDeck:
    cards: list[Card]
    origin: str
    used_fallback: bool = False


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_source_text(source: str, timeout: float = 10.0) -> str:
    """Return the raw text of a deck file or URL.

    Raises DeckSourceError on any retrieval failure.
    """
    if _is_url(source):
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DeckSourceError(f"Deck download failed: {exc}") from exc
        # Decks are always UTF-8; requests would guess latin-1 for text/csv
        try:
            return response.content.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise DeckSourceError(f"Deck is not valid UTF-8: {source}") from exc

    path = Path(source).expanduser()
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise DeckSourceError(f"Deck file unreadable: {path} ({exc})") from exc


def load_deck(source: Optional[str], timeout: float = 10.0) -> LoadedDeck:
    """Fetch and parse a deck, substituting the sample deck on failure."""
    if source:
        try:
            text = fetch_source_text(source, timeout=timeout)
            cards = parse_cards(text)
            logger.info("Loaded %d cards from %s", len(cards), source)
            return LoadedDeck(cards=cards, origin=source)
        except DeckSourceError as exc:
            logger.warning("Deck load error: %s", exc)

    logger.info("Using built-in sample deck")
    return LoadedDeck(cards=parse_cards(SAMPLE_CSV), origin=SAMPLE_ORIGIN, used_fallback=True)


async def load_deck_async(source: Optional[str], timeout: float = 10.0) -> LoadedDeck:
    """Run load_deck off the event loop."""
    return await asyncio.to_thread(load_deck, source, timeout)
