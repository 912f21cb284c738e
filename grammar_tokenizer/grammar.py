import logging
from pathlib import Path
from typing import Iterable, Iterator

import yaml

from .errors import GrammarError
from .tokens import TokenType

logger = logging.getLogger(__name__)


class Grammar:
    """Ordered token types plus the whitespace trimming policy.

    Declaration order is match priority: when two token types match the
    same number of characters, the one declared first wins.
    """

    def __init__(self, token_types: Iterable[TokenType] = (), trimming: bool = False):
        self.trimming = trimming
        self._token_types: list[TokenType] = []
        for token_type in token_types:
            self._register(token_type)

    def add_token_type(self, name: str, regex: str) -> TokenType:
        """Append a token type at the lowest priority and return it"""
        token_type = TokenType(name, regex)
        self._register(token_type)
        return token_type

    def _register(self, token_type: TokenType):
        if token_type.name in self:
            raise GrammarError(f"Duplicate token type: {token_type.name}")
        self._token_types.append(token_type)

    @property
    def token_types(self) -> tuple[TokenType, ...]:
        return tuple(self._token_types)

    def __len__(self) -> int:
        return len(self._token_types)

    def __iter__(self) -> Iterator[TokenType]:
        return iter(self._token_types)

    def __contains__(self, name: str) -> bool:
        return any(t.name == name for t in self._token_types)

    def __getitem__(self, name: str) -> TokenType:
        for token_type in self._token_types:
            if token_type.name == name:
                return token_type
        raise KeyError(name)

    def __repr__(self) -> str:
        names = ", ".join(t.name for t in self._token_types)
        return f"Grammar([{names}], trimming={self.trimming})"

    @classmethod
    def from_dict(cls, data: dict) -> "Grammar":
        """
        Build a grammar from plain data.

        Args:
            data: Mapping with a ``token_types`` entry and an optional
                ``trimming`` flag. ``token_types`` is either a list of
                ``{name, regex}`` mappings or an ordered mapping of
                name to regex.

        Returns:
            The grammar, token types in the order given

        Examples:
            >>> g = Grammar.from_dict({"token_types": {"NUMBER": "[0-9]+"}})
            >>> [t.name for t in g]
            ['NUMBER']
        """
        if not isinstance(data, dict):
            raise GrammarError("Grammar definition must be a mapping")

        trimming = data.get("trimming", False)
        if not isinstance(trimming, bool):
            raise GrammarError("'trimming' must be true or false")

        entries = data.get("token_types")
        if isinstance(entries, dict):
            entries = [{"name": name, "regex": regex} for name, regex in entries.items()]
        if not isinstance(entries, list) or not entries:
            raise GrammarError("'token_types' must be a non-empty list or mapping")

        grammar = cls(trimming=trimming)
        for entry in entries:
            if not isinstance(entry, dict) or "name" not in entry or "regex" not in entry:
                raise GrammarError(f"Token type entry needs 'name' and 'regex': {entry!r}")
            name, regex = entry["name"], entry["regex"]
            if name is None or not isinstance(regex, str):
                raise GrammarError(f"Token type entry needs a name and a regex string: {entry!r}")
            # YAML turns bare numbers into ints
            grammar.add_token_type(str(name), regex)

        logger.debug("Built %r", grammar)
        return grammar

    @classmethod
    def loads(cls, text: str) -> "Grammar":
        """Parse a grammar from YAML text"""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise GrammarError(f"Invalid grammar YAML: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_yaml(cls, path) -> "Grammar":
        """Load a grammar from a YAML file"""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Grammar file '{path}' not found.")
        logger.debug("Loading grammar from %s", path)
        with open(path, "r", encoding="utf-8") as f:
            return cls.loads(f.read())
