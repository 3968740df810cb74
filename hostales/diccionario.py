"""Dictionary ordered by ``OrderedKey`` keys."""

from __future__ import annotations

from typing import Any, Iterator

from hostales.claves import ComparisonRes, IntegerKey, OrderedKey, StringKey


def _as_key(key: Any) -> OrderedKey:
    if isinstance(key, OrderedKey):
        return key
    if isinstance(key, bool):
        raise TypeError("an OrderedKey was expected")
    if isinstance(key, int):
        return IntegerKey(key)
    if isinstance(key, str):
        return StringKey(key)
    raise TypeError("an OrderedKey was expected")


class OrderedDictionary:
    """Mapping from ordered keys to values, iterated in key order.

    An entry ``a`` comes before ``b`` when ``a.compare(b)`` is LESSER.
    Plain ``int`` and ``str`` keys are wrapped in ``IntegerKey`` and
    ``StringKey``.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[OrderedKey, Any]] = []

    def _locate(self, key: OrderedKey) -> tuple[int, bool]:
        lo, hi = 0, len(self._entries)
        while lo < hi:
            mid = (lo + hi) // 2
            result = key.compare(self._entries[mid][0])
            if result is ComparisonRes.EQUAL:
                return mid, True
            if result is ComparisonRes.LESSER:
                hi = mid
            else:
                lo = mid + 1
        return lo, False

    def add(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ordered = _as_key(key)
        if value is None:
            raise ValueError("value is None")
        index, found = self._locate(ordered)
        if found:
            self._entries[index] = (self._entries[index][0], value)
        else:
            self._entries.insert(index, (ordered, value))

    def member(self, key: Any) -> bool:
        """Return True if there is a value stored under ``key``."""
        return self.find(key) is not None

    def remove(self, key: Any) -> None:
        """Remove the entry for ``key``; do nothing if there is none."""
        index, found = self._locate(_as_key(key))
        if found:
            del self._entries[index]

    def find(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        index, found = self._locate(_as_key(key))
        return self._entries[index][1] if found else None

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in key order."""
        return iter([value for _, value in self._entries])

    def __reversed__(self) -> Iterator[Any]:
        """Iterate over the values in reverse key order."""
        return iter([value for _, value in reversed(self._entries)])

    def get_max(self) -> Any:
        """Value at the last position of the order."""
        if not self._entries:
            raise IndexError("the dictionary is empty")
        return self._entries[-1][1]

    def get_min(self) -> Any:
        """Value at the first position of the order."""
        if not self._entries:
            raise IndexError("the dictionary is empty")
        return self._entries[0][1]