from .assembler import SentenceAssembler, parse

__all__ = ['SentenceAssembler', 'parse']
