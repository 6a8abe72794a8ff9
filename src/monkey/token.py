from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class TokenKind(str, Enum):
    ASSIGN = "assign"
    SEMICOLON = "semicolon"
    LPAREN = "lparen"
    RPAREN = "rparen"
    COMMA = "comma"
    PLUS = "plus"
    MINUS = "minus"
    ASTERISK = "asterisk"
    SLASH = "slash"
    BANG = "bang"
    LESS_THAN = "lessThan"
    GREATER_THAN = "greaterThan"
    EQUAL = "equal"
    NOT_EQUAL = "notEqual"
    LBRACE = "lbrace"
    RBRACE = "rbrace"
    FUNCTION = "function"
    LET = "letKeyword"
    IF = "ifKeyword"
    ELSE = "elseKeyword"
    RETURN = "returnKeyword"
    TRUE = "trueKeyword"
    FALSE = "falseKeyword"
    IDENTIFIER = "identifier"
    INT = "int"
    EOF = "eof"
    ILLEGAL = "illegal"


@dataclass(slots=True, frozen=True)
class Token:
    kind: TokenKind
    literal: str | None = None

    @classmethod
    def identifier(cls, name: str) -> "Token":
        return cls(TokenKind.IDENTIFIER, name)

    @classmethod
    def integer(cls, digits: str) -> "Token":
        return cls(TokenKind.INT, digits)

    def __str__(self) -> str:
        if self.literal is None:
            return self.kind.value
        return f'{self.kind.value}("{self.literal}")'


KEYWORDS = MappingProxyType(
    {
        "fn": TokenKind.FUNCTION,
        "let": TokenKind.LET,
        "if": TokenKind.IF,
        "else": TokenKind.ELSE,
        "return": TokenKind.RETURN,
        "true": TokenKind.TRUE,
        "false": TokenKind.FALSE,
    }
)

# Characters that never start a two-character operator.
SINGLE_CHAR_TOKENS = MappingProxyType(
    {
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        ",": TokenKind.COMMA,
        "+": TokenKind.PLUS,
        "{": TokenKind.LBRACE,
        "}": TokenKind.RBRACE,
        "-": TokenKind.MINUS,
        "/": TokenKind.SLASH,
        "*": TokenKind.ASTERISK,
        "<": TokenKind.LESS_THAN,
        ">": TokenKind.GREATER_THAN,
        ";": TokenKind.SEMICOLON,
    }
)


def lookup_ident(text: str) -> Token:
    kind = KEYWORDS.get(text)
    if kind is not None:
        return Token(kind)
    return Token.identifier(text)


def lookup_char(char: str | None) -> Token | None:
    kind = SINGLE_CHAR_TOKENS.get(char)
    if kind is None:
        return None
    return Token(kind)
