"""
lazyparse - Streaming sentence parsing over lookahead cursors.

Characters are pulled lazily through a lexer cursor into a sentence
assembler. Nothing but the final list of sentences is materialized.
"""

__version__ = "0.1.0"
