"""Discrete signals: finite sequences of samples."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from sinalsim.chart import Chart


class Signal:
    """An immutable, non-empty sequence of float samples."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float]) -> None:
        self._values = tuple(float(value) for value in values)
        if not self._values:
            raise ValueError("length must be greater than zero")

    @classmethod
    def constant(cls, value: float, length: int) -> Signal:
        """Build a signal holding ``value`` in each of ``length`` samples."""
        if length <= 0:
            raise ValueError("length must be greater than zero")
        return cls([value] * length)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signal):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Signal({list(self._values)!r})"

    def values(self) -> list[float]:
        """Return a copy of the samples as a list."""
        return list(self._values)

    def plot(self, title: str, file: TextIO | None = None) -> None:
        """Draw the signal as a text chart followed by a blank line."""
        out = file if file is not None else sys.stdout
        Chart(title, self._values).plot(out)
        out.write("\n")

    def dump(self, limit: int | None = None, file: TextIO | None = None) -> None:
        """Write the first ``limit`` samples (all by default), one per line."""
        count = len(self._values) if limit is None else limit
        if not 0 <= count <= len(self._values):
            raise ValueError(f"limit must be between 0 and {len(self._values)}")
        out = file if file is not None else sys.stdout
        for index, value in enumerate(self._values[:count]):
            out.write(f"{index}- {value:g}\n")
        out.write("--\n")