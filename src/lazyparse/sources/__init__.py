"""
lazyparse Sources Package

Character sources for the parsing pipeline. Any iterable of single
characters works; these helpers cover strings and text files.
"""

from .text import chars_from_text, chars_from_file, open_chars

__all__ = ['chars_from_text', 'chars_from_file', 'open_chars']
