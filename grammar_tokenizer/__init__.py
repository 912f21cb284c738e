from .errors import (
    GrammarError,
    IndexTooLargeError,
    LexicalError,
    NavigationError,
    NegativeIndexError,
    NoNextTokenError,
    NoPreviousTokenError,
    TokenIndexError,
    TokenizerError,
)
from .grammar import Grammar
from .scanner import Scanner
from .tokenizer import Tokenizer, tokenize
from .tokens import END, Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "END",
    "Grammar",
    "GrammarError",
    "IndexTooLargeError",
    "LexicalError",
    "NavigationError",
    "NegativeIndexError",
    "NoNextTokenError",
    "NoPreviousTokenError",
    "Scanner",
    "Token",
    "TokenIndexError",
    "TokenType",
    "Tokenizer",
    "TokenizerError",
    "tokenize",
]
