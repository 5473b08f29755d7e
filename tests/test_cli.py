"""Tests for the click CLI."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from flashdeck.cli import main
from flashdeck.config.settings import Settings


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def _default_settings():
    # Keep the root logger untouched so other tests' log capture still works
    with patch("flashdeck.cli.Settings.load", return_value=Settings()), \
            patch("flashdeck.cli.configure_logging"):
        yield


class TestLaunch:
    def test_source_on_subcommand(self, runner, deck_file):
        with patch("flashdeck.app.main_app.FlashdeckApp") as app_cls:
            result = runner.invoke(main, ["launch", "--source", str(deck_file)])
        assert result.exit_code == 0
        assert app_cls.call_args.kwargs["source"] == str(deck_file)
        app_cls.return_value.run.assert_called_once()

    def test_default_launch_uses_group_source(self, runner, deck_file):
        with patch("flashdeck.app.main_app.FlashdeckApp") as app_cls:
            result = runner.invoke(main, ["--source", str(deck_file)])
        assert result.exit_code == 0
        assert app_cls.call_args.kwargs["source"] == str(deck_file)


class TestCheck:
    def test_correct(self, runner):
        result = runner.invoke(main, ["check", "ﾈｺ", "ネコ"])
        assert result.exit_code == 0
        assert "correct" in result.output

    def test_incorrect(self, runner):
        result = runner.invoke(main, ["check", "dog", "ネコ"])
        assert result.exit_code == 1
        assert "incorrect" in result.output


class TestCards:
    def test_lists_file_deck(self, runner, deck_file):
        result = runner.invoke(main, ["--source", str(deck_file), "cards"])
        assert result.exit_code == 0
        assert "2: Apple -> りんご" in result.output
        assert "4 cards" in result.output

    def test_source_on_subcommand(self, runner, deck_file):
        result = runner.invoke(main, ["cards", "--source", str(deck_file)])
        assert result.exit_code == 0
        assert "4 cards" in result.output

    def test_subcommand_source_wins(self, runner, deck_file, tmp_path):
        result = runner.invoke(
            main,
            ["--source", str(tmp_path / "missing.csv"), "cards", "--source", str(deck_file)],
        )
        assert result.exit_code == 0
        assert "4 cards" in result.output

    def test_fallback_deck(self, runner, tmp_path):
        result = runner.invoke(main, ["--source", str(tmp_path / "missing.csv"), "cards"])
        assert result.exit_code == 0
        assert "10 cards" in result.output
        assert "Cloud -> クラウド" in result.output
