"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from lazyparse.config.loader import load_config_from_string


LYRICS = (
    "Oh, that's the way, uh-huh uh-huh.\n"
    "I like it, uh-huh, uh-huh!\n"
    "That's the way, uh-huh uh-huh.\n"
    "I like it, uh-huh, uh-huh?\n"
    "That's the way, uh-huh uh-huh.\n"
    "I like it, uh-huh, uh-huh.\n"
    "That's the way, uh-huh uh-huh.\n"
    "I like it, uh-huh, uh-huh."
)


@pytest.fixture
def lyrics():
    """Provide a multi-sentence text with mixed punctuation."""
    return LYRICS


@pytest.fixture
def sample_config_yaml():
    """Provide a sample config YAML for testing."""
    return """
version: 1
lexer:
  end_of_sentence: ".?!;"
  other_punctuation: ",:()"
source:
  encoding: utf-8
  read_chunk_size: 4
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded config object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(sample_config_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def temp_text_file(lyrics):
    """Provide a temporary text file containing the lyrics."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.txt', delete=False, encoding='utf-8') as f:
        f.write(lyrics)
        temp_path = Path(f.name)

    yield temp_path

    if temp_path.exists():
        temp_path.unlink()


class CountingSource:
    """Character iterator that records how many characters were pulled."""

    def __init__(self, text: str):
        self._it = iter(text)
        self.pulled = 0

    def __iter__(self):
        return self

    def __next__(self):
        ch = next(self._it)
        self.pulled += 1
        return ch


class FailingSource:
    """Character iterator that raises after yielding a prefix."""

    def __init__(self, prefix: str, error: Exception):
        self._it = iter(prefix)
        self.error = error
        self.calls_after_failure = 0
        self._failed = False

    def __iter__(self):
        return self

    def __next__(self):
        if self._failed:
            self.calls_after_failure += 1
            raise self.error
        try:
            return next(self._it)
        except StopIteration:
            self._failed = True
            raise self.error


@pytest.fixture
def counting_source():
    """Factory for character sources that count pulls."""
    return CountingSource


@pytest.fixture
def failing_source():
    """Factory for character sources that fail after a prefix."""
    return FailingSource


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Simple meter for testing that captures counters and observations."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
