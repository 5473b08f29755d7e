"""Comma-separated deck parser.

Handles quoted fields with embedded commas, newlines and doubled quotes.
Malformed rows are dropped rather than reported.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Card:
    id: int  # 1-based row position, header row counted
    question: str
    answer: str


def _is_blank_row(row: list[str]) -> bool:
    return len(row) == 1 and row[0] == ""


def parse_rows(text: str) -> list[list[str]]:
    """Split raw text into rows of fields, skipping blank lines."""
    rows: list[list[str]] = []
    row: list[str] = []
    cell: list[str] = []
    in_quotes = False

    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if ch == '"':
            if in_quotes and nxt == '"':
                cell.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            row.append("".join(cell))
            cell = []
        elif ch in "\r\n" and not in_quotes:
            if ch == "\r" and nxt == "\n":
                i += 1
            row.append("".join(cell))
            if not _is_blank_row(row):
                rows.append(row)
            row = []
            cell = []
        else:
            cell.append(ch)
        i += 1

    if cell or row:
        row.append("".join(cell))
        if not _is_blank_row(row):
            rows.append(row)

    return rows


def parse_cards(text: str) -> list[Card]:
    """Parse deck text into cards. The first row is a header and is skipped."""
    rows = parse_rows(text or "")
    cards: list[Card] = []
    for idx, row in enumerate(rows[1:], start=2):
        if len(row) < 2:
            continue
        cards.append(Card(id=idx, question=row[0].strip(), answer=row[1].strip()))
    return cards
