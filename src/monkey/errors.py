"""Errors raised by the opt-in strict lexing helpers."""


class LexerError(Exception):
    """Base error for all lexer errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class IllegalCharacterError(LexerError):
    """A character that does not start any token, found in strict mode."""

    def __init__(self, char: str, position: int, *, cause: Exception | None = None):
        super().__init__(f"Illegal character {char!r} at offset {position}", cause=cause)
        self.char = char
        self.position = position
