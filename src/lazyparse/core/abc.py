"""Protocol interfaces for the cursor pipeline and host-injected services."""

from typing import Protocol, TypeVar, Any

from .types import Outcome

T_co = TypeVar("T_co", covariant=True)


class Cursor(Protocol[T_co]):
    """Single-pass lookahead over a sequence of items.

    Implemented by LookaheadCursor (buffering adapter over an iterator)
    and ChainedCursor (items computed on demand from an inner cursor).
    """

    def peek(self) -> Outcome:
        """
        Return the pending outcome without consuming it.

        Returns:
            Outcome: Value(item), EXHAUSTED or Failed(cause)
        """
        ...

    def advance(self) -> Outcome:
        """
        Return the pending outcome and fetch the next one.

        Returns:
            Outcome: The outcome that peek() reported before this call
        """
        ...

class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...

class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
