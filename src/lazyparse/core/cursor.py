"""Lookahead cursors and the chaining combinator."""

from typing import Callable, Generic, Iterable, Iterator, TypeVar, Union

from .abc import Cursor
from .types import EXHAUSTED, Exhausted, Failed, Outcome, Value, is_terminal

T = TypeVar("T")
U = TypeVar("U")

# An extraction function returns the next item, or the inner cursor's
# terminal outcome when input ran out before an item could be built.
Extract = Callable[[Cursor[T]], Union[U, Exhausted, Failed]]


class LookaheadCursor(Generic[T]):
    """
    Buffering cursor over a single-pass iterator.
    One item is fetched at construction so peek() never touches the source.
    """

    def __init__(self, source: Iterable[T]):
        """
        Initialize cursor and pre-fetch the first item.

        Args:
            source: Any iterable; it is consumed at most once
        """
        self._it: Iterator[T] = iter(source)
        self.consumed = 0
        self._slot: Outcome = self._fetch()

    def _fetch(self) -> Outcome:
        try:
            return Value(next(self._it))
        except StopIteration:
            return EXHAUSTED
        except Exception as e:
            return Failed(e)

    def peek(self) -> Outcome:
        return self._slot

    def advance(self) -> Outcome:
        current = self._slot
        if not is_terminal(current):
            self.consumed += 1
            self._slot = self._fetch()
        return current

    def __iter__(self) -> Iterator[T]:
        return _drain(self)


class ChainedCursor(Generic[T, U]):
    """
    Cursor whose items are built on demand from an inner cursor.

    Each fetch calls ``extract`` exactly once, letting it consume as many
    inner items as it needs. ``extract`` is never called once the inner
    cursor is terminal; that terminal outcome is reported as-is instead.
    """

    def __init__(self, inner: Cursor[T], extract: Extract):
        """
        Initialize chained cursor and pre-fetch the first item.

        Args:
            inner: Cursor supplying input items
            extract: Function building one output item from the inner cursor
        """
        self.inner = inner
        self.extract = extract
        self.consumed = 0
        self._slot: Outcome = self._fetch()

    def _fetch(self) -> Outcome:
        head = self.inner.peek()
        if is_terminal(head):
            return head
        try:
            item = self.extract(self.inner)
        except Exception as e:
            return Failed(e)
        if is_terminal(item):
            return item
        return Value(item)

    def peek(self) -> Outcome:
        return self._slot

    def advance(self) -> Outcome:
        current = self._slot
        if not is_terminal(current):
            self.consumed += 1
            self._slot = self._fetch()
        return current

    def __iter__(self) -> Iterator[U]:
        return _drain(self)


def chain(inner: Union[Cursor[T], Iterable[T]], extract: Extract) -> ChainedCursor:
    """
    Build a lazy cursor of extracted items on top of ``inner``.

    Args:
        inner: A cursor, or a plain iterable which is wrapped in a LookaheadCursor
        extract: Function called once per output item

    Returns:
        ChainedCursor: Cursor that can itself be chained again
    """
    if not (hasattr(inner, "peek") and hasattr(inner, "advance")):
        inner = LookaheadCursor(inner)
    return ChainedCursor(inner, extract)


def _drain(cursor: Cursor[T]) -> Iterator[T]:
    """Yield values until exhaustion; raise the cause of a failure."""
    while True:
        outcome = cursor.advance()
        if isinstance(outcome, Value):
            yield outcome.value
        elif isinstance(outcome, Failed):
            raise outcome.cause
        else:
            return
