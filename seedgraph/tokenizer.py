from dataclasses import dataclass
from enum import Enum
from typing import override
from .types import Position, Span
from .source_map import position
from .errors import LexError


class TokenType(Enum):
    None_ = "None"
    Eof = "Eof"
    OpenParen = "OpenParen"
    CloseParen = "CloseParen"
    String = "String"
    Ident = "Ident"


WHITESPACE = (" ", "\n", "\t", "\v", "\f", "\r")
QUOTES = ('"', "'")
EOF_CHAR = "\0"


@dataclass(frozen=True)
class Token:
    kind: TokenType
    raw: str
    span: Span

    @override
    def __repr__(self):
        return f"{self.raw}"


def _escape(s: str) -> str:
    return s.encode("unicode_escape").decode("ascii")


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE


def is_control(ch: str) -> bool:
    return (ch < " " and not is_whitespace(ch)) or ch == "\x7f"


def char_at(text: str, index: int) -> str:
    if index >= len(text):
        return EOF_CHAR
    return text[index]


def next_token(text: str, index: int) -> tuple[Token, int]:
    """
    Scan one token starting at `index`. Returns the token and the index
    just past it. Whitespace before the token is skipped. At end of input
    the Eof token is returned and the index is left where it is.
    """
    while is_whitespace(char_at(text, index)):
        index += 1

    ch = char_at(text, index)

    if ch == EOF_CHAR:
        return Token(TokenType.Eof, "", Span(index, index)), index

    if ch == "(":
        return Token(TokenType.OpenParen, ch, Span(index, index + 1)), index + 1

    if ch == ")":
        return Token(TokenType.CloseParen, ch, Span(index, index + 1)), index + 1

    if ch in QUOTES and (index == 0 or text[index - 1] != "\\"):
        start = index + 1
        end = start
        while char_at(text, end) not in (ch, EOF_CHAR):
            end += 1
        span = Span(start, end)
        # an unterminated string stops at end of input, not past it
        after = end + 1 if char_at(text, end) == ch else end
        return Token(TokenType.String, text[start:end], span), after

    if is_control(ch):
        raise LexError(
            f"unexpected character `{_escape(ch)}`({ord(ch)})",
            position(text, index),
        )

    start = index + 1 if ch == "\\" else index
    end = index + 1
    while True:
        peeked = char_at(text, end)
        if peeked == EOF_CHAR or is_whitespace(peeked) or peeked in "()":
            break
        end += 1
    return Token(TokenType.Ident, text[start:end], Span(start, end)), end


class Lexer:
    text: str
    index: int
    lookahead: Token

    def __init__(self, text: str):
        self.text = text
        self.index = 0
        self.lookahead = Token(TokenType.None_, "", Span(0, 0))
        _ = self.advance()

    def peek(self) -> Token:
        return self.lookahead

    def advance(self) -> Token:
        tmp = self.lookahead
        self.lookahead, self.index = next_token(self.text, self.index)
        return tmp

    def at(self, kind: TokenType) -> bool:
        return self.lookahead.kind == kind

    def position(self) -> Position:
        return position(self.text, self.index)


def tokenize(text: str) -> list[Token]:
    tokens: list[Token] = []
    lexer = Lexer(text)
    while not lexer.at(TokenType.Eof):
        tokens.append(lexer.advance())
    tokens.append(lexer.advance())
    return tokens


def tokens_debug(text: str, tokens: list[Token]) -> str:
    lines = []
    for t in tokens:
        pos = position(text, t.span.start)
        lines.append(
            f'Token {{ kind: {t.kind.name}, raw: "{_escape(t.raw)}", pos: {pos} }}'
        )
    return "\n".join(lines)
