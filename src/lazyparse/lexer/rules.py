"""Character classification for the lexer."""

from enum import Enum
from typing import Optional

from ..config.schema import LexerConfig


class CharClass(Enum):
    END_OF_SENTENCE = "end_of_sentence"
    OTHER_PUNCTUATION = "other_punctuation"
    WHITESPACE = "whitespace"
    WORD = "word"


class Classifier:
    """Maps a character to its CharClass using closed punctuation tables."""

    def __init__(self, config: Optional[LexerConfig] = None):
        config = config or LexerConfig()
        self.end_of_sentence = frozenset(config.end_of_sentence)
        self.other_punctuation = frozenset(config.other_punctuation)

    def classify(self, ch: str) -> CharClass:
        if ch in self.end_of_sentence:
            return CharClass.END_OF_SENTENCE
        if ch in self.other_punctuation:
            return CharClass.OTHER_PUNCTUATION
        if ch.isspace():
            return CharClass.WHITESPACE
        return CharClass.WORD

    def is_end_of_sentence(self, ch: str) -> bool:
        return ch in self.end_of_sentence

    def is_separator(self, ch: str) -> bool:
        """Whitespace or punctuation that does not end a sentence."""
        return ch in self.other_punctuation or ch.isspace()

    def is_word_char(self, ch: str) -> bool:
        return self.classify(ch) is CharClass.WORD
