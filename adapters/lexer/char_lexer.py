"""
Adapter: CharLexer
Implements the Lexer port — a single left-to-right pass over the characters.

Character classes:
  0-9          — accumulated into one NUMBER token (value*10 + digit)
  ( )          — PAREN (opening and closing share one token kind)
  + - * /      — PLUS, MINUS, MUL, DIV
  whitespace   — skipped
  anything else — UnknownTokenError

There are no negative literals: "-5" is MINUS followed by NUMBER(5).
"""
from __future__ import annotations

from adapters.int_domain import IntegerDomain
from contracts import Token, TokenKind, UnknownTokenError

_SINGLE_CHAR_TOKENS: dict[str, Token] = {
    "(": Token(kind=TokenKind.PAREN),
    ")": Token(kind=TokenKind.PAREN),
    "+": Token(kind=TokenKind.PLUS),
    "-": Token(kind=TokenKind.MINUS),
    "*": Token(kind=TokenKind.MUL),
    "/": Token(kind=TokenKind.DIV),
}


def _is_digit(ch: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits such as "²" or "٣"
    return "0" <= ch <= "9"


class _CharCursor:
    def __init__(self, text: str) -> None:
        self._text = text
        self.pos = 0

    def peek(self) -> str | None:
        return self._text[self.pos] if self.pos < len(self._text) else None

    def next(self) -> str | None:
        ch = self.peek()
        if ch is not None:
            self.pos += 1
        return ch


class CharLexer:
    """Character-level tokenizer with one character of lookahead."""

    def __init__(self, domain: IntegerDomain | None = None) -> None:
        self._domain = domain or IntegerDomain()

    # -- Lexer protocol ----------------------------------------------------

    def tokenize(self, text: str) -> list[Token]:
        tokens: list[Token] = []
        cursor = _CharCursor(text)
        while True:
            ch = cursor.next()
            if ch is None:
                break
            if _is_digit(ch):
                tokens.append(self._number(ch, cursor))
            elif ch in _SINGLE_CHAR_TOKENS:
                tokens.append(_SINGLE_CHAR_TOKENS[ch])
            elif ch.isspace():
                continue
            else:
                raise UnknownTokenError(ch, cursor.pos - 1)
        return tokens

    # -- Private -----------------------------------------------------------

    def _number(self, first: str, cursor: _CharCursor) -> Token:
        start = cursor.pos - 1
        value = self._domain.fit(int(first), what="literal", position=start)
        while cursor.peek() is not None and _is_digit(cursor.peek()):
            ch = cursor.next()
            value = self._domain.fit(value * 10 + int(ch), what="literal", position=start)
        return Token(kind=TokenKind.NUMBER, value=value)
