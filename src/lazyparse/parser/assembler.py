"""Sentence assembler draining a token cursor into sentences."""

from typing import Iterable, List, Optional

from ..config.schema import PipelineConfig
from ..core.abc import Cursor, Logger, Meter
from ..core.stats import summarize
from ..core.types import Failed, SentenceBreak, Value
from ..lexer.lexer import Lexer


class SentenceAssembler:
    """
    Groups words between sentence breaks into sentences.
    Breaks that would close an empty sentence are ignored.
    """

    def __init__(self, *, logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize assembler with optional observability hooks.

        Args:
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.log = logger
        self.meter = meter

    def assemble(self, tokens: Cursor) -> List[List[str]]:
        """
        Drain the token cursor and build the sentence list.

        Args:
            tokens: Cursor of Word and SentenceBreak tokens

        Returns:
            List[List[str]]: Sentences in input order, none of them empty

        Raises:
            Exception: The original cause when the token cursor fails.
                Sentences completed before the failure are discarded.
        """
        sentences: List[List[str]] = []
        sentence: List[str] = []
        ignored_breaks = 0

        outcome = tokens.peek()
        while isinstance(outcome, Value):
            token = tokens.advance().value
            if isinstance(token, SentenceBreak):
                if sentence:
                    sentences.append(sentence)
                    sentence = []
                else:
                    ignored_breaks += 1
            else:
                sentence.append(token.text)
            outcome = tokens.peek()

        if isinstance(outcome, Failed):
            if self.log:
                self.log.error("parse_failed",
                               error=repr(outcome.cause),
                               completed_sentences=len(sentences))
            if self.meter:
                self.meter.inc("lazyparse.parse_failed")
            raise outcome.cause

        if sentence:
            sentences.append(sentence)

        if self.meter:
            self.meter.inc("lazyparse.breaks_ignored", ignored_breaks)
            summary = summarize(sentences)
            if summary.sentence_count:
                self.meter.observe("lazyparse.words_per_sentence", summary.mean_sentence_length)
        if self.log:
            self.log.info("parse_complete",
                          sentences=len(sentences),
                          words=sum(len(s) for s in sentences))

        return sentences


def parse(source: Iterable[str], config: Optional[PipelineConfig] = None, *,
          logger: Optional[Logger] = None, meter: Optional[Meter] = None) -> List[List[str]]:
    """
    Parse a character source into sentences.

    Args:
        source: Any single-pass iterable of characters
        config: Optional pipeline config (default classification tables otherwise)
        logger: Optional structured logger
        meter: Optional metrics collector

    Returns:
        List[List[str]]: Sentences, each a list of words
    """
    config = config or PipelineConfig()
    tokens = Lexer(config.lexer).tokenize(source)
    return SentenceAssembler(logger=logger, meter=meter).assemble(tokens)
