from .lexer import Lexer, tokenize
from .rules import CharClass, Classifier

__all__ = ['Lexer', 'tokenize', 'CharClass', 'Classifier']
