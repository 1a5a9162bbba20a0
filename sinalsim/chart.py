"""Text charts of sampled signals for the terminal."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

ROWS = 16
MAX_Y = 10
MAX_X = 61
LEFT_BORDER = 10
RIGHT_BORDER = 5
UPPER_POINT = "'"
LOWER_POINT = "."
GAP_X = 6
GAP_Y = 5
SCALE_Y = MAX_Y / (ROWS - 1)


class Chart:
    """A fixed-size text plot of at most ``MAX_X`` samples between 0 and ``MAX_Y``."""

    def __init__(self, title: str, values: Iterable[float]) -> None:
        self.title = str(title)
        self.values = tuple(float(value) for value in values)
        if not self.values:
            raise ValueError("length must be greater than zero")
        self.columns = min(len(self.values), MAX_X)

    def _header(self) -> str:
        return " " * LEFT_BORDER + "^     " + self.title

    def _left_margins(self) -> list[str]:
        margins = [" " * LEFT_BORDER] * ROWS
        for row in range(0, ROWS, GAP_Y):
            margins[row] = " " * (LEFT_BORDER - 6) + f"{row * SCALE_Y:5.1f}_"
        return margins

    def _grid(self) -> list[str]:
        grid = [["|"] + [" "] * (self.columns - 1) for _ in range(ROWS)]
        grid[0] = ["_"] * self.columns
        for column, value in enumerate(self.values[: self.columns]):
            if value <= 0:
                grid[0][column] = LOWER_POINT
            elif value >= SCALE_Y * (ROWS - 1):
                grid[ROWS - 1][column] = UPPER_POINT
            else:
                below = int(value / SCALE_Y)
                above = int(value / SCALE_Y + 0.5)
                grid[below][column] = LOWER_POINT if above == below else UPPER_POINT
        return ["".join(row) for row in grid]

    @staticmethod
    def _right_margins() -> list[str]:
        margins = [" " * RIGHT_BORDER] * ROWS
        margins[0] = "___>" + " " * (RIGHT_BORDER - 4)
        return margins

    def _axis(self) -> list[str]:
        ticks = [" "] * (self.columns + 1)
        labels = [" "] * (self.columns + 1)
        for column in range(0, self.columns, GAP_X):
            labels[column : column + 2] = f"{column:02d}"[:2]
            ticks[column] = "|"
        prefix = " " * LEFT_BORDER
        return [prefix + "".join(ticks), prefix + "".join(labels)]

    def render(self) -> str:
        """Return the whole chart as text, one newline after every line."""
        lines = [self._header()]
        body = zip(self._left_margins(), self._grid(), self._right_margins())
        lines.extend(left + middle + right for left, middle, right in reversed(list(body)))
        lines.extend(self._axis())
        return "".join(line + "\n" for line in lines)

    def plot(self, file: TextIO | None = None) -> None:
        """Write the chart to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.render())