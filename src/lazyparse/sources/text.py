"""Character sources over strings and text files."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO, Union

from ..config.schema import SourceConfig


def chars_from_text(text: str) -> Iterator[str]:
    """Yield the characters of an in-memory string."""
    return iter(text)


def chars_from_file(f: TextIO, chunk_size: int = 8192) -> Iterator[str]:
    """
    Yield characters from an open text file, reading one chunk at a time.

    Read errors propagate from the generator and surface as a Failed
    outcome in the cursor wrapping it. The caller owns ``f``.

    Args:
        f: File opened in text mode
        chunk_size: Characters per underlying read call
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    while True:
        chunk = f.read(chunk_size)
        if not chunk:
            return
        yield from chunk


@contextmanager
def open_chars(path: Union[str, Path], config: SourceConfig = None):
    """
    Open a text file and yield a character iterator over it.

    The file is closed on exit, including when parsing fails.

    Args:
        path: Path to the text file
        config: Encoding and chunk size, defaults when omitted
    """
    config = config or SourceConfig()
    with open(path, "r", encoding=config.encoding) as f:
        yield chars_from_file(f, config.read_chunk_size)
