"""Shared fixtures for flashdeck tests."""

from __future__ import annotations

import pytest

from flashdeck.config.settings import Settings
from flashdeck.engine.csv_parser import Card

DECK_CSV = (
    "Question,Answer,Note\n"
    "Apple,りんご,fruit\n"
    "Tokyo,東京\n"
    "\n"
    "\"New York, NY\",ニューヨーク\n"
    "lonely\n"
    "Cat,ﾈｺ\n"
)


@pytest.fixture
def deck_text():
    return DECK_CSV


@pytest.fixture
def deck_file(tmp_path):
    """Write a small deck to disk and return its path."""
    path = tmp_path / "deck.csv"
    path.write_text(DECK_CSV, encoding="utf-8")
    return path


@pytest.fixture
def cards():
    return [
        Card(id=i + 2, question=f"Q{i}", answer=f"A{i}")
        for i in range(10)
    ]


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path / "data", source=str(tmp_path / "missing.csv"))


@pytest.fixture(autouse=True)
def _no_env_source(monkeypatch):
    monkeypatch.delenv("FLASHDECK_SOURCE", raising=False)
