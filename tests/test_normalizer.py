"""Tests for answer normalization."""

import pytest

from flashdeck.engine.normalizer import answers_match, normalize_answer


class TestNormalizeAnswer:
    def test_strip_and_lowercase(self):
        assert normalize_answer("  Tokyo ") == normalize_answer("tokyo")

    def test_halfwidth_katakana(self):
        assert normalize_answer("ﾈｺ") == normalize_answer("ネコ")

    def test_fullwidth_latin(self):
        assert normalize_answer("ＡＢＣ") == "abc"

    def test_internal_whitespace_removed(self):
        assert normalize_answer("New York") == "newyork"
        assert normalize_answer("New\t 　York") == "newyork"

    def test_empty_and_none(self):
        assert normalize_answer("") == ""
        assert normalize_answer(None) == ""
        assert normalize_answer("   ") == ""

    @pytest.mark.parametrize(
        "text", ["  Tokyo ", "ﾈｺ", "ＡＢＣ d", "Straße", "", "ｶﾞｷﾞ", "e\u00b4", "a\u00a8", "u\u02dc"],
    )
    def test_idempotent(self, text):
        once = normalize_answer(text)
        assert normalize_answer(once) == once

    def test_spacing_accent_composes(self):
        # NFKC turns U+00B4 into space + U+0301; the mark lands on the "e"
        assert normalize_answer("e\u00b4") == "\u00e9"


class TestAnswersMatch:
    def test_match(self):
        assert answers_match("new york", "New York")

    def test_kana_width(self):
        assert answers_match("ﾃﾞｰﾀﾍﾞｰｽ", "データベース")

    def test_no_match(self):
        assert not answers_match("apple", "りんご")

    def test_no_partial_credit(self):
        assert not answers_match("Artificial", "Artificial Intelligence")

    def test_no_alternate_answers(self):
        assert not answers_match("cat", "cat, kitty")
