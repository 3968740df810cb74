"""Ordered keys used to index the system's dictionaries."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass


class ComparisonRes(enum.Enum):
    """Result of comparing two ordered keys."""

    LESSER = 0
    EQUAL = 1
    GREATER = 2


class OrderedKey(ABC):
    """A key with a total order, usable in an ordered dictionary."""

    @abstractmethod
    def compare(self, other: OrderedKey) -> ComparisonRes:
        """Compare this key with another key of the same kind."""

    def equals(self, other: OrderedKey) -> bool:
        """Return True when ``other`` compares equal to this key."""
        if not isinstance(other, OrderedKey):
            raise TypeError("an OrderedKey was expected")
        return self.compare(other) is ComparisonRes.EQUAL


@dataclass(frozen=True)
class IntegerKey(OrderedKey):
    """Integer key.

    ``compare`` answers GREATER when the other key holds the larger number,
    so integer-keyed dictionaries iterate from the largest key down.
    """

    value: int

    def compare(self, other: OrderedKey) -> ComparisonRes:
        if not isinstance(other, IntegerKey):
            raise TypeError("invalid key: an IntegerKey was expected")
        if other.value == self.value:
            return ComparisonRes.EQUAL
        if other.value > self.value:
            return ComparisonRes.GREATER
        return ComparisonRes.LESSER


@dataclass(frozen=True)
class StringKey(OrderedKey):
    """String key.

    ``compare`` answers GREATER when this key sorts after the other one,
    so string-keyed dictionaries iterate in ascending order.
    """

    value: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("a StringKey needs a str value")

    def compare(self, other: OrderedKey) -> ComparisonRes:
        if not isinstance(other, StringKey):
            raise TypeError("invalid key: a StringKey was expected")
        if self.value == other.value:
            return ComparisonRes.EQUAL
        if self.value > other.value:
            return ComparisonRes.GREATER
        return ComparisonRes.LESSER