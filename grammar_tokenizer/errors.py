class TokenizerError(Exception):
    """Base class for everything the tokenizer raises"""


class GrammarError(TokenizerError, ValueError):
    """Grammar definition or grammar file is malformed"""


class LexicalError(TokenizerError):
    """No token type matches the front of the remaining input"""

    def __init__(self, remaining: str):
        super().__init__(f'No lexical element matches "{remaining}"')
        self.remaining = remaining


class NavigationError(TokenizerError):
    """Cursor was asked to move outside the token sequence"""


class NoPreviousTokenError(NavigationError):
    def __init__(self):
        super().__init__("No tokens before the first one.")


class NoNextTokenError(NavigationError):
    def __init__(self):
        super().__init__("No tokens after the END token.")


class TokenIndexError(TokenizerError, IndexError):
    """Direct index access outside the token sequence"""


class NegativeIndexError(TokenIndexError):
    def __init__(self, index: int):
        super().__init__("Negative token index.")
        self.index = index


class IndexTooLargeError(TokenIndexError):
    def __init__(self, index: int, max_index: int):
        super().__init__(f"Index too large. Max index = {max_index}")
        self.index = index
        self.max_index = max_index
