"""
{#!filepath: bb_machine/core/context.py}

Ctx: per-step execution context (FROZEN)

Contract:
- Built by TuringMachine.step() for exactly one rule invocation.
- Owns no state; every read/write goes straight to the machine.
- Any use after the step returns raises ContextExpiredError.
- read_at / move_head_by never index out of range: the tape is grown first.

Coordinates follow Tape: `position` is logical, `head` is the buffer index.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from bb_machine.core.tape import Tape
from bb_machine.utils.errors import ContextExpiredError

if TYPE_CHECKING:
    from bb_machine.core.machine import TuringMachine


class Ctx:

    __slots__ = ("_machine", "_live")

    def __init__(self, machine: "TuringMachine"):
        self._machine = machine
        self._live = True

    def _m(self) -> "TuringMachine":
        if not self._live:
            raise ContextExpiredError("context used outside of its step")
        return self._machine

    def expire(self) -> None:
        self._live = False

    @property
    def live(self) -> bool:
        return self._live

    # --------------------------------------------------
    # Direct access
    # --------------------------------------------------
    @property
    def tape(self) -> Tape:
        return self._m()._tape

    @property
    def state(self):
        return self._m()._state

    @state.setter
    def state(self, value) -> None:
        self._m()._state = value

    @property
    def position(self) -> int:
        return self._m()._position

    @position.setter
    def position(self, value: int) -> None:
        m = self._m()
        m._position = int(value)
        m._tape.expand_to_cover(m._position)

    @property
    def head(self) -> int:
        m = self._m()
        return m._tape.index_of(m._position)

    @head.setter
    def head(self, index: int) -> None:
        # 越界 index 先补齐该格，赋值后 ctx.head 总是合法 index
        m = self._m()
        m._position = m._tape.position_of(int(index))
        m._tape.expand_to_cover(m._position)

    @property
    def symbol(self):
        """Symbol under the head."""
        m = self._m()
        return m._tape.read(m._position)

    @symbol.setter
    def symbol(self, value) -> None:
        m = self._m()
        m._tape.write(m._position, value)

    # --------------------------------------------------
    # Safe tape operations
    # --------------------------------------------------
    def expand_to_cover(self, position: int) -> int:
        """Grow the tape so `position` is addressable; returns cells added."""
        return self._m()._tape.expand_to_cover(position)

    def read_at(self, position: int):
        """Symbol at logical `position`, blank for cells never written."""
        return self._m()._tape.read(position)

    def move_head_by(self, delta: int) -> int:
        """
        Move the head by a signed delta and return the new buffer index.

        The target cell is materialized before the head lands on it, so a
        move past the left end puts the head on the new leftmost cell
        (index 0) and keeps pointing at the same logical position.
        """
        m = self._m()
        candidate = m._position + int(delta)
        m._tape.expand_to_cover(candidate)
        m._position = candidate
        return m._tape.index_of(candidate)
