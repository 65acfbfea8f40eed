"""Lexical analysis of regular-expression patterns into terminal tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = ["TokenType", "Terminal", "tokenize", "token_name", "VALUE_MASK"]

VALUE_MASK = 0xFFFFFF
"""Token values are stored in 24 bits; larger numbers wrap around."""


class TokenType(enum.Enum):
    """Kinds of terminal tokens produced by the lexer."""

    TERMINATOR = 0
    CHAR = 1
    NUMBER = 2
    BEGIN_CHARSET = 3
    BEGIN_GROUP = 4
    BEGIN_QUANTIFIER = 5
    COMMA = 6
    END_CHARSET = 7
    END_GROUP = 8
    END_QUANTIFIER = 9
    MINUS = 10
    NOT = 11
    SPLIT = 12
    PLUS = 13
    QUEST = 14
    TIMES = 15


@dataclass(frozen=True)
class Terminal:
    """A single token: its kind and its value (a byte or a number)."""

    kind: TokenType
    value: int = 0

    @property
    def name(self) -> str:
        return self.kind.name


_SINGLE_CHARACTERS: dict[int, TokenType] = {
    ord("["): TokenType.BEGIN_CHARSET,
    ord("("): TokenType.BEGIN_GROUP,
    ord("{"): TokenType.BEGIN_QUANTIFIER,
    ord(","): TokenType.COMMA,
    ord("]"): TokenType.END_CHARSET,
    ord(")"): TokenType.END_GROUP,
    ord("}"): TokenType.END_QUANTIFIER,
    ord("-"): TokenType.MINUS,
    ord("^"): TokenType.NOT,
    ord("|"): TokenType.SPLIT,
    ord("+"): TokenType.PLUS,
    ord("?"): TokenType.QUEST,
    ord("*"): TokenType.TIMES,
}

# Bytes accepted as digits of a quantifier number.
_NUMBER_DIGITS = range(ord("0"), ord("9"))


def _lex_number(data: bytes, start: int) -> tuple[int, int]:
    """Read a number at ``start``; return its (wrapped) value and end offset."""
    end = start
    value = 0
    while end < len(data) and data[end] in _NUMBER_DIGITS:
        value = (value * 10 + data[end] - ord("0")) & VALUE_MASK
        end += 1
    return value, end


def tokenize(text: str | bytes) -> list[Terminal]:
    """Split a pattern into terminals, always ending with a TERMINATOR.

    Text is read up to the first NUL byte. Numbers are recognised only
    between ``{`` and ``}``; everything else that is not an operator is a
    CHAR whose value is the byte itself.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    data = data.partition(b"\0")[0]

    tokens: list[Terminal] = []
    in_quantifier = False
    pos = 0
    while pos < len(data):
        byte = data[pos]
        kind = _SINGLE_CHARACTERS.get(byte)
        if kind is not None:
            tokens.append(Terminal(kind))
            if kind is TokenType.BEGIN_QUANTIFIER:
                in_quantifier = True
            elif kind is TokenType.END_QUANTIFIER:
                in_quantifier = False
            pos += 1
            continue
        if in_quantifier:
            value, end = _lex_number(data, pos)
            if end > pos:
                tokens.append(Terminal(TokenType.NUMBER, value))
                pos = end
                continue
        tokens.append(Terminal(TokenType.CHAR, byte & 0xFF))
        pos += 1
    tokens.append(Terminal(TokenType.TERMINATOR))
    return tokens


def token_name(kind: TokenType | int) -> str:
    """Return the name of a token kind, given as a member or its value."""
    return TokenType(kind).name