from __future__ import annotations

"""Symbolic label names for generated test cases.

Every case gets a *call number*; all of its labels are derived from that
number, so labels stay unique as long as no call number is handed out
twice.  There is no upper bound on the call number.
"""

from typing import NamedTuple

ROLES: tuple[str, ...] = ("arg1", "arg2", "exp", "start", "end")
"""Label suffixes, in the order they appear in :class:`LabelSet`."""


def label(index: int, role: str) -> str:
    """Return the label for *role* in call number *index*: ``call3_exp``."""
    if index < 0:
        raise ValueError(f"call number must be non-negative, got {index}")
    if role not in ROLES:
        raise ValueError(f"unknown label role: {role!r}")
    return f"call{index}_{role}"


class LabelSet(NamedTuple):
    index: int
    arg1: str
    arg2: str
    exp: str
    start: str
    end: str

    @classmethod
    def for_call(cls, index: int) -> LabelSet:
        return cls(index, *(label(index, role) for role in ROLES))


class LabelAllocator:
    """Hands out one :class:`LabelSet` per emitted case, numbered from 0."""

    def __init__(self) -> None:
        self._next: int = 0

    @property
    def count(self) -> int:
        """Number of label sets allocated so far."""
        return self._next

    def allocate(self) -> LabelSet:
        labels = LabelSet.for_call(self._next)
        self._next += 1
        return labels
