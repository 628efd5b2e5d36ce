"""Sorted employee roster for a single department.

INVARIANT: ``names`` is non-decreasing in ``str`` order after every
insertion. Order is kept incrementally, the list is never re-sorted.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator


class Department:
    """One department's employees, kept in sorted order."""

    __slots__ = ("_names",)

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: list[str] = []
        for name in names:
            self.insert(name)

    def insert(self, employee: str) -> int:
        """Insert *employee* at the first position not less than it.

        Returns the index the name was placed at.
        """
        index = bisect_left(self._names, employee)
        self._names.insert(index, employee)
        return index

    @property
    def names(self) -> tuple[str, ...]:
        """Snapshot of the roster in sorted order."""
        return tuple(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, employee: object) -> bool:
        return employee in self._names

    def __repr__(self) -> str:
        return f"Department({self._names!r})"
