"""Tests for tagcloud.counter module."""

from pathlib import Path

import pytest

from tagcloud.counter import count_words, normalize, read_text, tokenize
from tagcloud.errors import InputReadError


class TestNormalize:
    """Tests for token normalization."""

    def test_strips_punctuation(self) -> None:
        """Punctuation is removed from both ends and the middle."""
        assert normalize("fox!") == "fox"
        assert normalize("don't") == "dont"
        assert normalize("(e-mail)") == "email"

    def test_keeps_digits_and_case(self) -> None:
        """Digits and letter case survive normalization."""
        assert normalize("Route66,") == "Route66"

    def test_strips_non_ascii_letters(self) -> None:
        """Only ASCII letters count as letters."""
        assert normalize("café") == "caf"

    def test_punctuation_only_becomes_empty(self) -> None:
        """Tokens with no letters or digits normalize to the empty string."""
        assert normalize("--") == ""


class TestTokenize:
    """Tests for tokenize function."""

    def test_splits_on_any_whitespace(self) -> None:
        """Tokens are split on spaces, tabs and newlines."""
        assert tokenize("one\ttwo\n three  four") == ["one", "two", "three", "four"]

    def test_scenario_text(self) -> None:
        """Mixed punctuation and case are normalized per token."""
        assert tokenize("the Quick, quick fox! fox fox.") == [
            "the",
            "Quick",
            "quick",
            "fox",
            "fox",
            "fox",
        ]

    def test_empty_text(self) -> None:
        """Empty or blank text has no tokens."""
        assert tokenize("") == []
        assert tokenize("   \n ") == []

    def test_no_break_space_joins_token(self) -> None:
        """No-break spaces are stripped inside a token rather than splitting it."""
        assert tokenize("a" + chr(0xA0) + "b c") == ["ab", "c"]
        assert tokenize("x" + chr(0x202F) + "y") == ["xy"]

    def test_unicode_spaces_split(self) -> None:
        """Other Unicode space separators split tokens."""
        assert tokenize("a" + chr(0x3000) + "b" + chr(0x2003) + "c") == ["a", "b", "c"]

    def test_keeps_empty_tokens(self) -> None:
        """Tokens emptied by normalization are returned for the counter to decide."""
        assert tokenize("a -- b") == ["a", "", "b"]


class TestCountWords:
    """Tests for count_words function."""

    def test_counts_scenario(self) -> None:
        """Counts are case-sensitive."""
        table = count_words(tokenize("the Quick, quick fox! fox fox."))
        assert dict(table) == {"the": 1, "Quick": 1, "quick": 1, "fox": 3}

    def test_drops_empty_tokens_by_default(self) -> None:
        """Empty tokens are not counted unless requested."""
        table = count_words(tokenize("a -- b ... a"))
        assert dict(table) == {"a": 2, "b": 1}

    def test_keep_empty_counts_empty_key(self) -> None:
        """keep_empty counts emptied tokens under the empty-string key."""
        table = count_words(tokenize("a -- b ... a"), keep_empty=True)
        assert table[""] == 2
        assert table["a"] == 2

    def test_distinct_keys_match_distinct_tokens(self) -> None:
        """Every distinct normalized token becomes exactly one key."""
        text = "Alpha beta, alpha! BETA beta gamma; 42 42 (42)"
        tokens = tokenize(text)
        table = count_words(tokens)

        assert set(table) == set(tokens)
        for word in table:
            assert table[word] == tokens.count(word)

    def test_counting_twice_is_identical(self) -> None:
        """Counting the same input twice gives the same table."""
        text = "x y z x y x"
        assert count_words(tokenize(text)) == count_words(tokenize(text))


class TestReadText:
    """Tests for read_text function."""

    def test_reads_file(self, tmp_path: Path) -> None:
        """Whole file contents are returned."""
        path = tmp_path / "input.txt"
        path.write_text("hello world\nagain", encoding="utf-8")
        assert read_text(path) == "hello world\nagain"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Missing files raise InputReadError."""
        with pytest.raises(InputReadError, match="not found"):
            read_text(tmp_path / "missing.txt")

    def test_directory_raises(self, tmp_path: Path) -> None:
        """Directories cannot be read as input."""
        with pytest.raises(InputReadError):
            read_text(tmp_path)

    def test_undecodable_file_raises(self, tmp_path: Path) -> None:
        """Bytes that are invalid in the encoding raise InputReadError."""
        path = tmp_path / "bad.txt"
        path.write_bytes(b"caf\xe9 ok")
        with pytest.raises(InputReadError):
            read_text(path, encoding="utf-8")

    def test_alternate_encoding(self, tmp_path: Path) -> None:
        """A different encoding can be requested."""
        path = tmp_path / "latin.txt"
        path.write_bytes(b"caf\xe9 ok")
        assert read_text(path, encoding="latin-1") == "café ok"

    def test_unknown_encoding_raises(self, tmp_path: Path) -> None:
        """Unknown encoding names raise InputReadError."""
        path = tmp_path / "input.txt"
        path.write_text("hello")
        with pytest.raises(InputReadError):
            read_text(path, encoding="no-such-codec")
