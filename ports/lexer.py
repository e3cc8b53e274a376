"""
Port: Lexer
Responsibility: turning raw expression text into an ordered list of tokens.
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Lexer(Protocol):
    def tokenize(self, text: str) -> list[Token]:
        """
        Scans text left to right and returns its tokens.
        Whitespace is skipped; "(" and ")" both become a PAREN token.
        Raises UnknownTokenError on the first character that is not a digit,
        an operator, a parenthesis or whitespace. No partial list is returned.
        """
        ...
