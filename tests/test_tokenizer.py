"""Unit tests for the tokenizer and separator set."""
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import pytest
from models.token import Token
from services.errors import InvalidPositionError
from services.separator_set import SeparatorSet, DEFAULT
from services.tokenizer import next_token, tokenize


class TestSeparatorSet:
    """Test suite for SeparatorSet."""
    
    def test_from_string_membership(self):
        separators = SeparatorSet.from_string(" .,")
        assert " " in separators
        assert "." in separators
        assert "a" not in separators
        assert len(separators) == 3
    
    def test_duplicates_collapse(self):
        assert SeparatorSet.from_string("  ..") == SeparatorSet.from_string(". ")
    
    def test_immutable(self):
        separators = SeparatorSet.from_string(" ")
        with pytest.raises(AttributeError):
            separators._chars = frozenset("x")
    
    def test_rejects_multi_character_entries(self):
        with pytest.raises(ValueError):
            SeparatorSet(["ab"])
    
    def test_default_covers_whitespace_and_punctuation(self):
        for ch in " \t\n\r,.!?;:\"'()":
            assert ch in DEFAULT
        assert "a" not in DEFAULT
        assert "7" not in DEFAULT


class TestNextToken:
    """Test suite for next_token."""
    
    def test_word_at_start(self):
        assert next_token("hello world", 0, {" "}) == Token("hello", False)
    
    def test_separator_run_is_maximal(self):
        assert next_token("a  ,b", 1, {" ", ","}) == Token("  ,", True)
    
    def test_word_in_middle(self):
        assert next_token("a  ,bcd", 4, {" ", ","}) == Token("bcd", False)
    
    def test_single_character_remainder(self):
        assert next_token("ab c", 3, {" "}) == Token("c", False)
        assert next_token("abc.", 3, {"."}) == Token(".", True)
    
    def test_whole_text_single_word(self):
        assert next_token("word", 0, {" "}) == Token("word", False)
    
    def test_empty_separator_set(self):
        assert next_token("a b.c", 0, set()) == Token("a b.c", False)
    
    def test_accepts_separator_set(self):
        token = next_token("x!y", 1, SeparatorSet.from_string("!"))
        assert token.is_separator
        assert len(token) == 1
    
    @pytest.mark.parametrize("position", [-1, 5, 6])
    def test_position_out_of_range(self, position):
        with pytest.raises(InvalidPositionError) as exc_info:
            next_token("hello", position, {" "})
        assert exc_info.value.error.code == "INVALID_POSITION"
        assert exc_info.value.error.details["length"] == 5
    
    def test_empty_text(self):
        with pytest.raises(InvalidPositionError):
            next_token("", 0, {" "})


class TestTokenize:
    """Test suite for tokenize."""
    
    @pytest.mark.parametrize("text", [
        "the cat sat. THE dog sat!",
        "  leading and trailing  ",
        "...",
        "x",
        "line one\nline two\r\n",
        "a,b,,c;;d",
    ])
    def test_tokens_reconstruct_text(self, text):
        separators = {" ", ".", "!", ",", ";", "\n", "\r"}
        tokens = list(tokenize(text, separators))
        
        assert "".join(token.text for token in tokens) == text
        assert all(len(token) >= 1 for token in tokens)
        # Adjacent tokens always differ in classification
        for left, right in zip(tokens, tokens[1:]):
            assert left.is_separator != right.is_separator
        # Every character agrees with its token's classification
        for token in tokens:
            assert all((ch in separators) == token.is_separator for ch in token.text)
    
    def test_token_sequence(self):
        tokens = list(tokenize("Hi, you!", {" ", ",", "!"}))
        assert tokens == [
            Token("Hi", False),
            Token(", ", True),
            Token("you", False),
            Token("!", True),
        ]
    
    def test_empty_text_yields_nothing(self):
        assert list(tokenize("", {" "})) == []
    
    def test_line_breaks_not_in_set_stay_in_words(self):
        tokens = list(tokenize("one\ntwo", {" "}))
        assert tokens == [Token("one\ntwo", False)]
