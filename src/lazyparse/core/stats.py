"""Summary statistics over parsed sentences."""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import numpy as np


@dataclass
class ParseSummary:
    """Counts and words-per-sentence statistics for one parse."""
    sentence_count: int
    word_count: int
    words_per_sentence: Dict[str, float] = field(default_factory=dict)  # min/mean/max

    @property
    def mean_sentence_length(self) -> float:
        """Average number of words per sentence."""
        return self.words_per_sentence.get("mean", 0.0)


def summarize(sentences: Sequence[List[str]]) -> ParseSummary:
    """
    Compute counts and length statistics for parsed sentences.

    Args:
        sentences: Output of a parse

    Returns:
        ParseSummary: Empty statistics when there are no sentences
    """
    if not sentences:
        return ParseSummary(sentence_count=0, word_count=0)

    lengths = np.array([len(s) for s in sentences], dtype=np.int64)
    return ParseSummary(
        sentence_count=int(lengths.size),
        word_count=int(lengths.sum()),
        words_per_sentence={
            "min": float(lengths.min()),
            "mean": float(lengths.mean()),
            "max": float(lengths.max()),
        },
    )
