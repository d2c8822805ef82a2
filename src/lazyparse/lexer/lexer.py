"""Lexer turning a character cursor into a token cursor."""

from typing import Iterable, Optional, Union

from ..config.schema import LexerConfig
from ..core.abc import Cursor
from ..core.cursor import ChainedCursor, chain
from ..core.types import Exhausted, Failed, SentenceBreak, Token, Value, Word, is_terminal
from .rules import Classifier


class Lexer:
    """
    Extraction function producing one token per call.

    Used with ``chain``: each call skips separators, then returns either a
    SentenceBreak, a Word, or the inner cursor's terminal outcome.
    """

    def __init__(self, config: Optional[LexerConfig] = None,
                 classifier: Optional[Classifier] = None):
        self.classifier = classifier or Classifier(config)

    def __call__(self, chars: Cursor[str]) -> Union[Token, Exhausted, Failed]:
        rules = self.classifier

        head = chars.peek()
        while isinstance(head, Value) and rules.is_separator(head.value):
            chars.advance()
            head = chars.peek()

        if is_terminal(head):
            return head

        if rules.is_end_of_sentence(head.value):
            chars.advance()
            return SentenceBreak(head.value)

        buf = []
        while isinstance(head, Value) and rules.is_word_char(head.value):
            buf.append(head.value)
            chars.advance()
            head = chars.peek()
        return Word("".join(buf))

    def tokenize(self, chars: Union[Cursor[str], Iterable[str]]) -> ChainedCursor:
        """
        Build a lazy token cursor over a character source.

        Args:
            chars: Character cursor or any iterable of characters

        Returns:
            ChainedCursor: Cursor of Word and SentenceBreak tokens
        """
        return chain(chars, self)


def tokenize(chars: Iterable[str], config: Optional[LexerConfig] = None) -> ChainedCursor:
    """Tokenize characters with the given (or default) classification tables."""
    return Lexer(config).tokenize(chars)
