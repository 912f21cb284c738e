import re
from dataclasses import dataclass, field

from .errors import GrammarError


@dataclass(frozen=True)
class TokenType:
    """Named category of lexeme with the regex that recognizes it"""

    name: str
    regex: str
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.name:
            raise GrammarError("Token type must have a name")
        try:
            compiled = re.compile(self.regex)
        except re.error as e:
            raise GrammarError(f"Invalid regex for {self.name}: {e}") from e
        # Frozen dataclass, so bypass __setattr__ for the derived field
        object.__setattr__(self, "pattern", compiled)

    def match_length(self, text: str) -> int | None:
        """Length of the match anchored at the start of text, None if no match.

        Empty matches count as no match: they would never consume input.
        """
        match = self.pattern.match(text)
        if match is None or match.end() == 0:
            return None
        return match.end()


@dataclass(frozen=True)
class Token:
    """A token type paired with the text it matched"""

    token_type: TokenType
    value: str

    @property
    def name(self) -> str:
        return self.token_type.name

    def __str__(self) -> str:
        return f'{self.token_type.name}:"{self.value}"'

    __repr__ = __str__


class _EndToken:
    """End-of-input sentinel - no type, no text, equal only to itself"""

    _instance = None

    token_type = None
    value = None
    name = "END"

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "END"

    __str__ = __repr__

    def __reduce__(self):
        return (_EndToken, ())


END = _EndToken()
