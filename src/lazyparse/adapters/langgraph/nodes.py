"""LangGraph node factories for lazyparse integration."""

from typing import Optional

from langchain_core.runnables import RunnableLambda
from ...config.schema import PipelineConfig
from ...core.abc import Logger, Meter
from ...core.stats import summarize
from ...parser.assembler import parse
from ...sources.text import chars_from_text
from .state_keys import *

def make_parse_node(config: Optional[PipelineConfig] = None,
                    text_key: str = SOURCE_TEXT,
                    logger: Optional[Logger] = None,
                    meter: Optional[Meter] = None):
    """
    Create a LangGraph node that splits state text into sentences.

    Args:
        config: Optional pipeline config
        text_key: State key containing the text to parse
        logger: Optional structured logger
        meter: Optional metrics collector

    Returns:
        RunnableLambda: Node that adds sentences and their summary to state
    """
    def _parse_text(state):
        text = state.get(text_key, "")
        sentences = parse(chars_from_text(text), config, logger=logger, meter=meter)
        summary = summarize(sentences)

        return {
            SENTENCES: sentences,
            PARSE_SUMMARY: {
                "sentence_count": summary.sentence_count,
                "word_count": summary.word_count,
                "words_per_sentence": summary.words_per_sentence,
            },
        }

    return RunnableLambda(_parse_text)
