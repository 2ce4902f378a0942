"""Tests for shell input parsing."""

import pytest

from music_deck.utils.parsers import parse_command, parse_position, parse_quoted_args


class TestParseQuotedArgs:
    def test_plain_args(self):
        assert parse_quoted_args(["a", "b"]) == ["a", "b"]

    def test_double_quoted_span(self):
        args = ["file:///a.mp3", '"Blue', 'Monday"', "New", "Order"]
        assert parse_quoted_args(args) == ["file:///a.mp3", "Blue Monday", "New", "Order"]

    def test_single_quoted_word(self):
        assert parse_quoted_args(["'Intro'"]) == ["Intro"]

    def test_apostrophe_inside_word_is_not_a_quote(self):
        assert parse_quoted_args(["Don't", "Stop"]) == ["Don't", "Stop"]

    def test_unclosed_quote_joins_rest(self):
        assert parse_quoted_args(['"Never', "ends"]) == ["Never ends"]

    def test_empty(self):
        assert parse_quoted_args([]) == []


class TestParseCommand:
    def test_lowercases_command(self):
        assert parse_command("PLAY") == ("play", [])

    def test_args_keep_case(self):
        assert parse_command('add /m/x.mp3 "My Song" Me') == ("add", ["/m/x.mp3", "My Song", "Me"])

    @pytest.mark.parametrize("line", ["", "   "])
    def test_blank_input(self, line):
        assert parse_command(line) == ("", [])


class TestParsePosition:
    @pytest.mark.parametrize("value,expected", [("1", 0), ("3", 2), ("0", -1)])
    def test_converts_to_index(self, value, expected):
        assert parse_position(value) == expected

    @pytest.mark.parametrize("value", ["x", "1.5", ""])
    def test_invalid(self, value):
        assert parse_position(value) is None
