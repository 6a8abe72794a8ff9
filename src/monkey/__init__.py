from monkey.errors import IllegalCharacterError, LexerError
from monkey.lexer import Lexer, lex
from monkey.token import (
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenKind,
    lookup_char,
    lookup_ident,
)

__all__ = [
    "IllegalCharacterError",
    "KEYWORDS",
    "Lexer",
    "LexerError",
    "SINGLE_CHAR_TOKENS",
    "Token",
    "TokenKind",
    "lex",
    "lookup_char",
    "lookup_ident",
]
