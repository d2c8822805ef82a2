"""Outcome and token types shared by the cursor pipeline."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Value(Generic[T]):
    """A successfully fetched item."""
    value: T


@dataclass(frozen=True)
class Exhausted:
    """Normal end of input. Use the ``EXHAUSTED`` singleton."""

    def __repr__(self) -> str:
        return "EXHAUSTED"


@dataclass(frozen=True)
class Failed:
    """Abnormal end of input carrying the original exception."""
    cause: BaseException


EXHAUSTED = Exhausted()

# Result of a single fetch: Value | Exhausted | Failed
Outcome = Union[Value[T], Exhausted, Failed]


def is_terminal(outcome) -> bool:
    """True for Exhausted and Failed outcomes."""
    return isinstance(outcome, (Exhausted, Failed))


@dataclass(frozen=True)
class Word:
    """A run of word characters. Never empty."""
    text: str

    def __post_init__(self):
        if not self.text:
            raise ValueError("Word text must not be empty")


@dataclass(frozen=True)
class SentenceBreak:
    """End-of-sentence marker produced by terminal punctuation."""
    mark: str = "."


Token = Union[Word, SentenceBreak]
