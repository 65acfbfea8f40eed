"""Parsing of terminal tokens into a syntax tree of branches and elements."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional, Union

from .syntax import (
    Charset,
    Element,
    Group,
    Kind,
    Quantified,
    Quantifier,
    Range,
    Regexp,
    Unit,
)
from .tokens import Terminal, TokenType, tokenize

__all__ = ["ParseError", "produce", "parse"]

_QUANTIFIER_MASK = 0xFFFF
"""Quantifier bounds are kept in 16 bits; larger numbers wrap around."""

_OBJECT_START = frozenset(
    {TokenType.CHAR, TokenType.BEGIN_CHARSET, TokenType.BEGIN_GROUP, TokenType.NOT}
)
_UNIT_START = frozenset({TokenType.CHAR, TokenType.BEGIN_CHARSET, TokenType.NOT})
_REGEXP_FOLLOW = frozenset({TokenType.SPLIT, TokenType.END_GROUP, TokenType.TERMINATOR})
_SIMPLE_QUANTIFIERS = {
    TokenType.QUEST: Quantifier(0, 1),
    TokenType.PLUS: Quantifier(1, 0),
    TokenType.TIMES: Quantifier(0, 0),
}
_QUANTIFIER_START = frozenset(_SIMPLE_QUANTIFIERS) | {TokenType.BEGIN_QUANTIFIER}


class ParseError(ValueError):
    """Raised when the tokens do not form a valid pattern."""

    def __init__(self, message: str, position: int, token: Optional[Terminal] = None) -> None:
        super().__init__(f"{message} (token {position})")
        self.position = position
        self.token = token


class _Parser:
    def __init__(self, tokens: Iterable[Terminal]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def _peek(self) -> Terminal:
        if self._pos >= len(self._tokens):
            raise ParseError("input ended without a TERMINATOR", self._pos)
        return self._tokens[self._pos]

    def _advance(self) -> Terminal:
        token = self._peek()
        self._pos += 1
        return token

    def _unexpected(self, what: str) -> ParseError:
        token = self._peek()
        return ParseError(f"unexpected {token.kind.name}, expected {what}", self._pos, token)

    def _expect(self, kind: TokenType) -> Terminal:
        if self._peek().kind is not kind:
            raise self._unexpected(kind.name)
        return self._advance()

    def parse(self) -> Regexp:
        regexp = self._regexp()
        self._expect(TokenType.TERMINATOR)
        return regexp

    def _regexp(self) -> Regexp:
        branches: Regexp = []
        if self._peek().kind not in _REGEXP_FOLLOW:
            branches.append(self._branch())
        while self._peek().kind is TokenType.SPLIT:
            self._advance()
            branches.append(self._branch())
        return branches

    def _branch(self) -> list[Element]:
        branch = [self._object()]
        while self._peek().kind in _OBJECT_START:
            branch.append(self._object())
        return branch

    def _object(self) -> Element:
        element = self._atom()
        while self._peek().kind in _QUANTIFIER_START:
            quantifier = self._quantifier()
            element = Element(Kind.QUANTIFIED, False, Quantified(quantifier, element))
        return element

    def _atom(self) -> Element:
        kind = self._peek().kind
        if kind is TokenType.CHAR:
            chars = []
            while self._peek().kind is TokenType.CHAR:
                chars.append(chr(self._advance().value & 0xFF))
            return Element(Kind.SEQUENCE, False, "".join(chars))
        if kind is TokenType.BEGIN_CHARSET:
            return Element(Kind.CHARSET, False, self._charset())
        if kind is TokenType.BEGIN_GROUP:
            return Element(Kind.GROUP, False, self._group())
        if kind is TokenType.NOT:
            self._advance()
            inner = self._peek().kind
            if inner is TokenType.CHAR:
                return Element(Kind.CHAR, True, chr(self._advance().value & 0xFF))
            if inner is TokenType.BEGIN_CHARSET:
                return Element(Kind.CHARSET, True, self._charset())
            if inner is TokenType.BEGIN_GROUP:
                return Element(Kind.GROUP, True, self._group())
            raise self._unexpected("a character, charset or group after NOT")
        raise self._unexpected("a character, charset, group or NOT")

    def _charset(self) -> Charset:
        self._expect(TokenType.BEGIN_CHARSET)
        units = [self._unit()]
        while self._peek().kind in _UNIT_START:
            units.append(self._unit())
        self._expect(TokenType.END_CHARSET)
        return Charset.from_units(units)

    def _unit(self) -> Unit:
        kind = self._peek().kind
        if kind is TokenType.CHAR:
            low = chr(self._advance().value & 0xFF)
            if self._peek().kind is TokenType.MINUS:
                self._advance()
                high = chr(self._expect(TokenType.CHAR).value & 0xFF)
                return Unit(Kind.RANGE, False, Range(low, high))
            return Unit(Kind.CHAR, False, low)
        if kind is TokenType.BEGIN_CHARSET:
            return Unit(Kind.CHARSET, False, self._charset())
        if kind is TokenType.NOT:
            self._advance()
            inner = self._peek().kind
            if inner is TokenType.CHAR:
                return Unit(Kind.CHAR, True, chr(self._advance().value & 0xFF))
            if inner is TokenType.BEGIN_CHARSET:
                return Unit(Kind.CHARSET, True, self._charset())
            raise self._unexpected("a character or charset after NOT")
        raise self._unexpected("a character, range or charset")

    def _group(self) -> Group:
        self._expect(TokenType.BEGIN_GROUP)
        regexp = self._regexp()
        self._expect(TokenType.END_GROUP)
        return Group(regexp)

    def _quantifier(self) -> Quantifier:
        token = self._advance()
        simple = _SIMPLE_QUANTIFIERS.get(token.kind)
        if simple is not None:
            return simple
        low = self._expect(TokenType.NUMBER).value
        high = low
        if self._peek().kind is TokenType.COMMA:
            self._advance()
            high = self._expect(TokenType.NUMBER).value
        self._expect(TokenType.END_QUANTIFIER)
        return Quantifier(low & _QUANTIFIER_MASK, high & _QUANTIFIER_MASK)


def produce(tokens: Iterable[Terminal]) -> Regexp:
    """Build the branches of a pattern from its tokens, ending in a TERMINATOR."""
    return _Parser(tokens).parse()


def parse(pattern: Union[str, bytes]) -> Regexp:
    """Tokenize and parse a pattern into its list of branches."""
    return produce(tokenize(pattern))