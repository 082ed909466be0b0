"""
{#!filepath: bb_machine/rules/table.py}

Table-driven transition rule.

    (state, symbol) -> Transition(write, move, next_state)

Contract:
- Lookup is a plain dict hit; no branching on state or symbol.
- An unmapped pair fails fast with TransitionCoverageError.
  The machine state is left untouched when that happens.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from bb_machine.core.context import Ctx
from bb_machine.utils.errors import TransitionCoverageError


class Direction(Enum):
    LEFT = -1
    STAY = 0
    RIGHT = 1


@dataclass(frozen=True, slots=True)
class Transition:
    write: object
    move: Direction
    next_state: object


Key = Tuple[object, object]


class TransitionTable:

    def __init__(self, entries: Union[Mapping[Key, Transition], Iterable[Tuple[Key, Transition]]] = ()):
        items = entries.items() if isinstance(entries, Mapping) else entries
        self._table: Dict[Key, Transition] = {
            (state, symbol): fx for (state, symbol), fx in items
        }

    def get(self, state, symbol) -> Optional[Transition]:
        return self._table.get((state, symbol))

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key) -> bool:
        return key in self._table

    def __iter__(self):
        return iter(self._table.items())

    def __repr__(self) -> str:
        return f"TransitionTable({len(self._table)} entries)"

    def __call__(self, ctx: Ctx) -> None:
        state = ctx.state
        symbol = ctx.symbol

        fx = self._table.get((state, symbol))
        if fx is None:
            raise TransitionCoverageError(state, symbol)

        ctx.symbol = fx.write
        ctx.move_head_by(fx.move.value)
        ctx.state = fx.next_state
