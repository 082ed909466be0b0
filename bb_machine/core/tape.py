"""
{#!filepath: bb_machine/core/tape.py}

Tape: bi-infinite tape over a finite growable buffer.

Coordinates:
- position : logical (absolute) tape position, any int
- index    : buffer index, 0 <= index < len(tape)

    index = position + bias

Invariants:
- Every index in [0, len) holds a valid symbol; new cells are blank.
- The buffer only grows. Prepending k cells adds k to bias, so a position
  keeps naming the same cell across any growth.
- The origin (position 0) is materialized as soon as anything is.
"""
from __future__ import annotations

from typing import Iterable, List, Tuple


class Tape:

    __slots__ = ("_cells", "_bias", "blank")

    def __init__(self, blank, cells: Iterable = ()):
        self.blank = blank
        self._cells: List = list(cells)
        self._bias = 0

    # --------------------------------------------------
    # Buffer-index access (what the rule sees through ctx.tape)
    # --------------------------------------------------
    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int):
        return self._cells[self._check(index)]

    def __setitem__(self, index: int, symbol) -> None:
        self._cells[self._check(index)] = symbol

    def _check(self, index: int) -> int:
        # no wrap-around: -1 is left of the tape, not the last cell
        if index < 0:
            raise IndexError(f"tape index out of range: {index}")
        return index

    def __iter__(self):
        return iter(self._cells)

    def __repr__(self) -> str:
        return f"Tape(bias={self._bias}, cells={self._cells!r})"

    @property
    def bias(self) -> int:
        return self._bias

    def cells(self) -> Tuple:
        """Read-only snapshot of the materialized cells, leftmost first."""
        return tuple(self._cells)

    def index_of(self, position: int) -> int:
        return position + self._bias

    def position_of(self, index: int) -> int:
        return index - self._bias

    def covers(self, position: int) -> bool:
        return 0 <= position + self._bias < len(self._cells)

    # --------------------------------------------------
    # Growth
    # --------------------------------------------------
    def expand_to_cover(self, position: int) -> int:
        """
        Grow the buffer minimally so `position` is addressable.

        Returns the number of cells added (0 if already covered).
        An empty tape also materializes the origin, so covering -2 on an
        empty tape yields the three cells -2, -1, 0.
        """
        if not self._cells:
            lo = min(position, 0)
            hi = max(position, 0)
            self._cells = [self.blank] * (hi - lo + 1)
            self._bias = -lo
            return len(self._cells)

        index = position + self._bias

        if index < 0:
            # 🔒 prepend: shift every existing index by -index
            grow = -index
            self._cells[0:0] = [self.blank] * grow
            self._bias += grow
            return grow

        if index >= len(self._cells):
            grow = index - len(self._cells) + 1
            self._cells.extend([self.blank] * grow)
            return grow

        return 0

    # --------------------------------------------------
    # Position-based access
    # --------------------------------------------------
    def read(self, position: int):
        self.expand_to_cover(position)
        return self._cells[position + self._bias]

    def write(self, position: int, symbol) -> None:
        self.expand_to_cover(position)
        self._cells[position + self._bias] = symbol

    def count(self, symbol) -> int:
        return sum(1 for c in self._cells if c == symbol)
