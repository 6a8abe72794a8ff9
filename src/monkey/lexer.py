import logging
from collections.abc import Iterator

from monkey.errors import IllegalCharacterError
from monkey.token import Token, TokenKind, lookup_char, lookup_ident

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\n\r")


class Lexer:
    """Scans source text into tokens, one call to ``next_token`` at a time.

    ``char`` is the character under the cursor, or ``None`` once the cursor
    has moved past the end of ``source``.
    """

    def __init__(self, source: str):
        self.source = source
        self.position = 0
        self.read_position = 0
        self.char: str | None = None
        self.token_start = 0
        self._read_char()

    def __repr__(self) -> str:
        return (
            f"Lexer(source={self.source!r}, position={self.position}, "
            f"read_position={self.read_position}, char={self.char!r})"
        )

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return

    def next_token(self) -> Token:
        self._skip_whitespace()
        self.token_start = self.position

        token = lookup_char(self.char)
        if token is None:
            if self.char == "=":
                if self._peek_char() == "=":
                    self._read_char()
                    token = Token(TokenKind.EQUAL)
                else:
                    token = Token(TokenKind.ASSIGN)
            elif self.char == "!":
                if self._peek_char() == "=":
                    self._read_char()
                    token = Token(TokenKind.NOT_EQUAL)
                else:
                    token = Token(TokenKind.BANG)
            elif self.char is None:
                token = Token(TokenKind.EOF)
            elif self.char.isalpha():
                # The scan leaves the cursor one past the token already.
                return lookup_ident(self._read_identifier())
            elif self.char.isdigit():
                return Token.integer(self._read_number())
            else:
                logger.debug("Illegal character %r at offset %d", self.char, self.position)
                token = Token(TokenKind.ILLEGAL)

        self._read_char()
        return token

    def _read_char(self) -> None:
        if self.read_position > len(self.source):
            return
        if self.read_position == len(self.source):
            self.char = None
        else:
            self.char = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def _peek_char(self) -> str | None:
        if self.read_position >= len(self.source):
            return None
        return self.source[self.read_position]

    def _skip_whitespace(self) -> None:
        while self.char is not None and self.char in WHITESPACE:
            self._read_char()

    def _read_identifier(self) -> str:
        start = self.position
        while self.char is not None and self.char.isalpha():
            self._read_char()
        return self.source[start : self.position]

    def _read_number(self) -> str:
        start = self.position
        while self.char is not None and self.char.isdigit():
            self._read_char()
        return self.source[start : self.position]


def lex(source: str, *, strict: bool = False) -> list[Token]:
    lexer = Lexer(source)
    tokens: list[Token] = []
    for token in lexer:
        if strict and token.kind is TokenKind.ILLEGAL:
            raise IllegalCharacterError(source[lexer.token_start], lexer.token_start)
        tokens.append(token)
    return tokens
