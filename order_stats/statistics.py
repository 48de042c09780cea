#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Counting attribute values and turning the counts into a report."""

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
import threading


class ConcurrentCounter:
    """
    A :class:`collections.Counter` that can be incremented from several
    threads at the same time. The lock is internal; callers only ever see
    :meth:`increment` and :meth:`update`.

    Reading the counts is only safe once all writers have finished.
    """
    def __init__(self, values: Iterable[str] = ()):
        self._counts = Counter()
        self._lock = threading.Lock()
        self.update(values)

    def increment(self, value: str):
        """Adds _value_ with count 1, or increases its count by one."""
        with self._lock:
            self._counts[value] += 1

    def update(self, values: Iterable[str]):
        """Increments the count of each element of _values_."""
        values = list(values)
        if values:
            with self._lock:
                self._counts.update(values)

    def __getitem__(self, value: str) -> int:
        return self._counts[value]

    def __contains__(self, value: str) -> bool:
        return value in self._counts

    def __len__(self):
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def items(self):
        return self._counts.items()

    def as_dict(self) -> dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def __repr__(self):
        return f'ConcurrentCounter({dict(self._counts)!r})'


@dataclass(frozen=True)
class ReportEntry:
    """The number of times a value occurred."""
    value: str
    count: int


def build_report(counter: ConcurrentCounter) -> list[ReportEntry]:
    """
    Lists the values in _counter_ in descending order of their counts. Values
    with the same count are listed alphabetically.
    """
    return [ReportEntry(value, count) for value, count
            in sorted(counter.items(), key=lambda kv: (-kv[1], kv[0]))]
