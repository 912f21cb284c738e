import logging
from typing import Iterator, List

from .errors import (
    IndexTooLargeError,
    NegativeIndexError,
    NoNextTokenError,
    NoPreviousTokenError,
)
from .grammar import Grammar
from .scanner import Scanner
from .tokens import END, Token

logger = logging.getLogger(__name__)


class Tokenizer:
    """Cursor over the tokens of a string, scanned lazily and memoized.

    Tokens are produced on demand, left to right, and each one is scanned
    exactly once. END is not stored: once the scanner reports it the
    sequence is complete, and the position right after the last token reads
    as END.

    Any method that may need to scan can raise LexicalError.
    """

    def __init__(self, grammar: Grammar | None = None, text: str = ""):
        self._grammar = grammar
        self._text = text
        self.reset()

    @property
    def grammar(self) -> Grammar | None:
        return self._grammar

    @grammar.setter
    def grammar(self, grammar: Grammar):
        # Tokens already scanned belong to the old grammar, start over
        self._grammar = grammar
        self.reset()

    @property
    def text(self) -> str:
        """The original input, untouched by scanning"""
        return self._text

    @text.setter
    def text(self, text: str):
        self._text = text
        self.reset()

    @property
    def remaining(self) -> str:
        return self._scanner.remaining()

    @property
    def active_index(self) -> int:
        return self._active_index

    def reset(self):
        """Discard scanned tokens and rewind to the start of the text"""
        self._scanner = Scanner(self._grammar, self._text)
        self._tokens: List[Token] = []
        self._exhausted = False
        self._active_index = 0
        logger.debug("Tokenizer reset, %d characters to scan", len(self._text))

    def _token_at(self, index: int):
        """Scan forward until index is available, END past the last token"""
        while len(self._tokens) <= index and not self._exhausted:
            token = self._scanner.scan_one()
            if token is END:
                self._exhausted = True
            else:
                self._tokens.append(token)
        return self._tokens[index] if index < len(self._tokens) else END

    def _scan_all(self):
        while not self._exhausted:
            self._token_at(len(self._tokens))

    def active_token(self):
        """Token at the active index"""
        return self._token_at(self._active_index)

    def step_back(self) -> "Tokenizer":
        """Move the active index one token back"""
        if self._active_index == 0:
            raise NoPreviousTokenError()
        self._active_index -= 1
        return self

    def step_forward(self) -> "Tokenizer":
        """Move the active index one token forward"""
        if self.active_token() is END:
            raise NoNextTokenError()
        # Scan before moving so a LexicalError leaves the index alone
        self._token_at(self._active_index + 1)
        self._active_index += 1
        return self

    def previous_token(self):
        return self.step_back().active_token()

    def next_token(self):
        return self.step_forward().active_token()

    def has_previous(self) -> bool:
        return self._active_index > 0

    def has_next(self) -> bool:
        """True if both the active token and the one after it are not END"""
        if self.active_token() is END:
            return False
        saved_index = self._active_index
        following = self.next_token()
        self._active_index = saved_index
        return following is not END

    def first_token(self):
        self._active_index = 0
        return self.active_token()

    def last_token(self):
        """Move to the last token and return it, END if there are no tokens"""
        self._scan_all()
        if not self._tokens:
            return END
        self._active_index = len(self._tokens) - 1
        return self.active_token()

    def token_at(self, index: int) -> Token:
        self._scan_all()
        if index < 0:
            raise NegativeIndexError(index)
        max_index = len(self._tokens) - 1
        if index > max_index:
            raise IndexTooLargeError(index, max_index)
        return self._tokens[index]

    def all_tokens(self) -> List[Token]:
        """Every token in order, END excluded. The active index is kept."""
        self._scan_all()
        return list(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        index = 0
        while True:
            token = self._token_at(index)
            if token is END:
                return
            yield token
            index += 1

    def __repr__(self) -> str:
        return (
            f"Tokenizer({self._grammar!r}, {self._text!r}, "
            f"active_index={self._active_index})"
        )


def tokenize(grammar: Grammar, text: str) -> List[Token]:
    """
    Tokenize a whole string.

    Args:
        grammar: Token types to match, in priority order
        text: Input to split into tokens

    Returns:
        All tokens in order, without END

    Raises:
        LexicalError: part of the input matches no token type

    Examples:
        >>> g = Grammar.from_dict({"token_types": {"NUMBER": "[0-9]+", "PLUS": "\\\\+"}})
        >>> [str(t) for t in tokenize(g, "12+3")]
        ['NUMBER:"12"', 'PLUS:"+"', 'NUMBER:"3"']
    """
    return Tokenizer(grammar, text).all_tokens()
