"""Syntax-tree node types of a parsed pattern and charset helpers."""

from __future__ import annotations

import copy
import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

__all__ = [
    "Kind",
    "Range",
    "Quantifier",
    "CharsetPart",
    "Charset",
    "Group",
    "Element",
    "Quantified",
    "Unit",
    "Branch",
    "Regexp",
    "update_ranges",
    "extend_unique",
]


class Kind(enum.Enum):
    """What an element or a charset unit holds."""

    CHAR = "CHAR"
    RANGE = "Range"
    SEQUENCE = "Sequence"
    CHARSET = "Charset"
    GROUP = "Group"
    QUANTIFIED = "Quantified"


@dataclass
class Range:
    """An inclusive character range such as ``a-z``."""

    min: str
    max: str


@dataclass(frozen=True)
class Quantifier:
    """Repetition bounds; a ``max`` of 0 means no upper bound."""

    min: int
    max: int


def update_ranges(ranges: list[Range], new: Range) -> None:
    """Merge ``new`` into the first range it overlaps, else append it."""
    for existing in ranges:
        if existing.min < new.min < existing.max:
            existing.max = max(existing.max, new.max)
            return
        if new.min < existing.min < new.max:
            existing.min = min(existing.min, new.min)
            return
    ranges.append(copy.copy(new))


def extend_unique(target: list, items: Iterable) -> int:
    """Append copies of the items not already in ``target``; return how many.

    Items are checked only against what ``target`` held before the call.
    """
    existing = list(target)
    added = [copy.copy(item) for item in items if item not in existing]
    target.extend(added)
    return len(added)


@dataclass
class CharsetPart:
    """Single characters and ranges of one side (normal or inverse) of a charset."""

    plains: list[str] = field(default_factory=list)
    ranges: list[Range] = field(default_factory=list)

    def add_plain(self, char: str) -> bool:
        """Add a character unless present; return whether it was added."""
        return extend_unique(self.plains, [char]) == 1

    def add_range(self, new: Range) -> None:
        update_ranges(self.ranges, new)

    def merge(self, other: CharsetPart) -> None:
        """Add the characters and ranges of ``other`` that are not yet here."""
        extend_unique(self.plains, other.plains)
        extend_unique(self.ranges, other.ranges)


@dataclass
class Charset:
    """A bracketed character set with its normal and inverse parts."""

    normal: CharsetPart = field(default_factory=CharsetPart)
    inverse: CharsetPart = field(default_factory=CharsetPart)

    def part(self, inverse: bool) -> CharsetPart:
        return self.inverse if inverse else self.normal

    @classmethod
    def from_units(cls, units: Iterable[Unit]) -> Charset:
        """Build a charset from the units written between its brackets."""
        charset = cls()
        for unit in units:
            if unit.kind is Kind.CHARSET:
                nested = unit.target
                charset.part(unit.inverse).merge(nested.normal)
                charset.part(not unit.inverse).merge(nested.inverse)
            elif unit.kind is Kind.CHAR:
                charset.part(unit.inverse).add_plain(unit.target)
            elif unit.kind is Kind.RANGE:
                charset.part(unit.inverse).add_range(unit.target)
            else:
                raise ValueError(f"unit of kind {unit.kind.name} cannot be in a charset")
        return charset


@dataclass
class Unit:
    """One item inside a charset: a character, a range or a nested charset."""

    kind: Kind
    inverse: bool
    target: Union[str, Range, Charset]


@dataclass
class Group:
    """A parenthesised sub-expression."""

    regexp: list[list[Element]] = field(default_factory=list)


@dataclass
class Element:
    """One object of a branch: a sequence, charset, group, quantified or char."""

    kind: Kind
    inverse: bool
    target: Union[str, Charset, Group, Quantified]


@dataclass
class Quantified:
    """An element with a repetition quantifier."""

    quantifier: Quantifier
    element: Element


Branch = list[Element]
Regexp = list[Branch]