"""Tests for the deck parser."""

from flashdeck.engine.csv_parser import Card, parse_cards, parse_rows


class TestParseRows:
    def test_simple_rows(self):
        assert parse_rows("a,b\nc,d\n") == [["a", "b"], ["c", "d"]]

    def test_quoted_comma_and_newline(self):
        rows = parse_rows('h1,h2\n"a,b\nc",x\n')
        assert rows[1] == ["a,b\nc", "x"]

    def test_doubled_quote(self):
        rows = parse_rows('"he said ""hi"""')
        assert rows == [['he said "hi"']]

    def test_crlf_is_one_terminator(self):
        assert parse_rows("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]

    def test_lone_cr_terminates_row(self):
        assert parse_rows("a,b\rc,d") == [["a", "b"], ["c", "d"]]

    def test_blank_lines_dropped(self):
        assert parse_rows("a,b\n\n\r\n\nc,d") == [["a", "b"], ["c", "d"]]

    def test_trailing_row_without_newline(self):
        assert parse_rows("a,b\nc,d") == [["a", "b"], ["c", "d"]]

    def test_empty_trailing_fields_kept(self):
        assert parse_rows("a,\n,\n") == [["a", ""], ["", ""]]

    def test_trailing_comma_at_end_of_input(self):
        assert parse_rows("a,") == [["a", ""]]

    def test_unterminated_quote_runs_to_end(self):
        assert parse_rows('a,"b\nc') == [["a", "b\nc"]]

    def test_empty_input(self):
        assert parse_rows("") == []


class TestParseCards:
    def test_single_record(self):
        cards = parse_cards("Q,A\nApple,りんご\n")
        assert cards == [Card(id=2, question="Apple", answer="りんご")]

    def test_ids_follow_row_position(self, deck_text):
        cards = parse_cards(deck_text)
        # Blank line is not a row; "lonely" is row 5 but has one field
        assert [c.id for c in cards] == [2, 3, 4, 6]

    def test_order_preserved(self, deck_text):
        cards = parse_cards(deck_text)
        assert [c.question for c in cards] == ["Apple", "Tokyo", "New York, NY", "Cat"]

    def test_extra_columns_ignored(self, deck_text):
        assert parse_cards(deck_text)[0].answer == "りんご"

    def test_fields_trimmed(self):
        cards = parse_cards("Q,A\n  Apple  ,\t りんご \n")
        assert cards[0].question == "Apple"
        assert cards[0].answer == "りんご"

    def test_short_rows_dropped_anywhere(self):
        cards = parse_cards("Q,A\nonly\nx,y\nalso-only")
        assert [(c.id, c.question) for c in cards] == [(3, "x")]

    def test_quoted_multiline_question(self):
        cards = parse_cards('Q,A\n"line one\nline two",ans\n')
        assert cards[0].question == "line one\nline two"
        assert cards[0].id == 2

    def test_header_only(self):
        assert parse_cards("Question,Answer\n") == []

    def test_empty_text(self):
        assert parse_cards("") == []

    def test_ids_unique(self, deck_text):
        ids = [c.id for c in parse_cards(deck_text)]
        assert len(ids) == len(set(ids))
