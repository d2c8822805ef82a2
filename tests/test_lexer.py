"""Test character classification and tokenization."""

import pytest

from lazyparse.config.schema import LexerConfig
from lazyparse.core.cursor import LookaheadCursor
from lazyparse.core.types import EXHAUSTED, Failed, SentenceBreak, Value, Word
from lazyparse.lexer import CharClass, Classifier, Lexer, tokenize


def tokens_of(text, config=None):
    return list(tokenize(text, config))


class TestClassifier:
    """Test the default classification tables."""

    @pytest.mark.parametrize("ch", list(".?!"))
    def test_end_of_sentence(self, ch):
        """Test terminal punctuation."""
        assert Classifier().classify(ch) is CharClass.END_OF_SENTENCE

    @pytest.mark.parametrize("ch", list(",\";:`(){}[]"))
    def test_other_punctuation(self, ch):
        """Test separating punctuation."""
        assert Classifier().classify(ch) is CharClass.OTHER_PUNCTUATION

    @pytest.mark.parametrize("ch", [" ", "\t", "\n", "\r", "\x0b", "\x0c", "\u00a0"])
    def test_whitespace(self, ch):
        """Test whitespace characters."""
        assert Classifier().classify(ch) is CharClass.WHITESPACE

    @pytest.mark.parametrize("ch", ["a", "Z", "7", "'", "-", "_", "é", "#"])
    def test_word_characters(self, ch):
        """Test that everything else is a word character."""
        assert Classifier().classify(ch) is CharClass.WORD

    def test_custom_tables(self):
        """Test classification with configured tables."""
        rules = Classifier(LexerConfig(end_of_sentence=";", other_punctuation="-"))

        assert rules.classify(";") is CharClass.END_OF_SENTENCE
        assert rules.classify("-") is CharClass.OTHER_PUNCTUATION
        assert rules.classify(".") is CharClass.WORD


class TestLexer:
    """Test the extraction function and token cursor."""

    def test_single_word(self):
        """Test that letters and digits form one word."""
        assert tokens_of("abc123XYZ") == [Word("abc123XYZ")]

    def test_words_and_breaks(self):
        """Test a short sentence."""
        assert tokens_of("Hello, world!") == [
            Word("Hello"), Word("world"), SentenceBreak("!")
        ]

    def test_consecutive_breaks_are_separate_tokens(self):
        """Test that each terminal mark produces its own break."""
        assert tokens_of("?.!") == [
            SentenceBreak("?"), SentenceBreak("."), SentenceBreak("!")
        ]

    def test_only_separators(self):
        """Test that separators alone produce no tokens."""
        assert tokens_of("  ,;\n\t()[]{}``\"  ") == []

    def test_empty_input(self):
        """Test that empty input produces no tokens."""
        assert tokens_of("") == []

    def test_word_keeps_inner_apostrophes_and_hyphens(self):
        """Test that non-table characters stay inside words."""
        assert tokens_of("that's uh-huh") == [Word("that's"), Word("uh-huh")]

    def test_break_ends_word_without_space(self):
        """Test that punctuation terminates a word directly."""
        assert tokens_of("end.start") == [Word("end"), SentenceBreak("."), Word("start")]

    @pytest.mark.parametrize("left,right", [(" ", " "), ("(", ")"), ("\"", "\""), ("\n", "."), ("[", ",")])
    def test_word_integrity_between_boundaries(self, left, right):
        """Test that a bounded word is reproduced exactly."""
        word = "Zürich-2024's"
        tokens = tokens_of(f"x{left}{word}{right}y")

        assert tokens[1] == Word(word)

    def test_single_call_consumes_one_token(self):
        """Test that one lexer call stops at the word boundary."""
        chars = LookaheadCursor("  two words")
        token = Lexer()(chars)

        assert token == Word("two")
        assert chars.peek().value == " "

    def test_lexer_returns_exhaustion_after_trailing_separators(self):
        """Test that trailing separators end with the inner terminal outcome."""
        chars = LookaheadCursor(" , ")

        assert Lexer()(chars) is EXHAUSTED

    def test_failure_after_word(self, failing_source):
        """Test that a read error ends the token stream as a failure."""
        error = OSError("stream reset")
        tokens = tokenize(failing_source("one two", error))

        assert tokens.advance() == Value(Word("one"))
        assert tokens.peek() == Value(Word("two"))
        tokens.advance()
        outcome = tokens.peek()
        assert isinstance(outcome, Failed)
        assert outcome.cause is error

    def test_custom_config(self, sample_config):
        """Test tokenizing with configured tables."""
        tokens = tokens_of("a;b \"c\"", sample_config.lexer)

        assert tokens == [Word("a"), SentenceBreak(";"), Word("b"), Word("\"c\"")]

    def test_empty_word_is_rejected(self):
        """Test that an empty Word cannot be constructed."""
        with pytest.raises(ValueError):
            Word("")
