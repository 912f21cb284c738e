import logging

from .errors import LexicalError, TokenizerError
from .grammar import Grammar
from .tokens import END, Token

logger = logging.getLogger(__name__)


class Scanner:
    """Maximal-munch scanner over a window of the original text.

    The remaining input is ``text[pos:end]``. Matching strips tokens off the
    front (``pos`` grows), trimming may also pull ``end`` in from the back.
    The original text itself is never modified.
    """

    def __init__(self, grammar: Grammar | None, text: str):
        self.grammar = grammar
        self.text = text
        self.pos = 0
        self.end = len(text)
        self.matched = 0

    @property
    def original(self) -> str:
        return self.text

    @property
    def consumed(self) -> int:
        """Number of characters removed from the front so far"""
        return self.pos

    def remaining(self) -> str:
        """Get the unconsumed input"""
        return self.text[self.pos : self.end]

    def at_end(self) -> bool:
        return self.pos >= self.end

    def eat(self, count: int) -> str:
        """Consume and return the next count characters"""
        start = self.pos
        self.pos = min(self.pos + count, self.end)
        return self.text[start : self.pos]

    def trim_start(self):
        while self.pos < self.end and self.text[self.pos].isspace():
            self.pos += 1

    def trim_end(self):
        while self.end > self.pos and self.text[self.end - 1].isspace():
            self.end -= 1

    def longest_match(self, text: str) -> tuple[int, int]:
        """Find (token type index, match length) of the longest match.

        Only a strictly longer match replaces the current best, so on equal
        lengths the earlier declared token type wins. Returns (-1, 0) when
        nothing matches.
        """
        best_index, best_length = -1, 0
        for i, token_type in enumerate(self.grammar.token_types):
            length = token_type.match_length(text)
            if length is not None and length > best_length:
                best_index, best_length = i, length
        return best_index, best_length

    def scan_one(self):
        """Strip one token off the front of the remaining input.

        With a trimming grammar, whitespace at the start and end of the
        input is always dropped, and whitespace between tokens is dropped
        when no token type matches it. Trimming happens even when the call
        ends up returning END or raising.

        Unlike trimming before every match, interior whitespace is offered
        to the patterns first: with a catch-all type such as ``ANY: "."``,
        ``"1 +2"`` yields ``ANY:" "`` between ``NUMBER:"1"`` and ``PLUS:"+"``.

        Returns:
            The longest matching Token, or END once the input is exhausted

        Raises:
            LexicalError: remaining input is not empty and nothing matches.
                Nothing is consumed in that case.
        """
        if self.grammar is None:
            raise TokenizerError("No grammar set")

        trimming = self.grammar.trimming
        if trimming:
            self.trim_end()
            if self.matched == 0:
                self.trim_start()

        if self.at_end():
            return END

        remaining = self.remaining()
        index, length = self.longest_match(remaining)
        if index == -1 and trimming and remaining[0].isspace():
            # trim_end already ran, so there is text after the whitespace
            self.trim_start()
            remaining = self.remaining()
            index, length = self.longest_match(remaining)
        if index == -1:
            raise LexicalError(remaining)

        token = Token(self.grammar.token_types[index], self.eat(length))
        self.matched += 1
        logger.debug("Scanned %s at offset %d", token, self.pos - length)
        return token
