"""
{#!filepath: bb_machine/rules/program.py}

Standard compact program notation (busy beaver style):

    "1RB1LB_1LA1RZ"

- one section per state, separated by "_"; sections name states A, B, C, ...
- one 3-char action per read symbol: <write digit><L|R><next state letter>
- "---" leaves the transition undefined (the table fails fast on it)
- a next-state letter outside the declared states is a halting state

Alphabets are generated per program:
- State  : declared letters + referenced halting letters, initial = "A"
- Symbol : S0 .. S{k-1}, blank = S0
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from string import ascii_uppercase
from typing import Iterable, List, Optional

from bb_machine.config.machine_config import MachineConfig
from bb_machine.core.alphabet import StateAlphabet, SymbolAlphabet, state_alphabet, symbol_alphabet
from bb_machine.core.machine import TuringMachine
from bb_machine.rules.table import Direction, Transition, TransitionTable
from bb_machine.utils.errors import ProgramSyntaxError

_DIRECTIONS = {"L": Direction.LEFT, "R": Direction.RIGHT}
_UNDEFINED = "---"
_FALLBACK_HALT = "Z"


@dataclass(frozen=True)
class Program:
    text: str
    states: type
    symbols: type
    table: TransitionTable

    def machine(self, tape: Iterable = (), config: Optional[MachineConfig] = None) -> TuringMachine:
        return TuringMachine(
            states=self.states,
            symbols=self.symbols,
            rule=self.table,
            tape=tape,
            config=config,
        )


def _split(text: str) -> List[List[str]]:
    sections = text.strip().split("_")
    if not sections or not sections[0]:
        raise ProgramSyntaxError("empty program")
    if len(sections) > len(ascii_uppercase):
        raise ProgramSyntaxError(f"too many states: {len(sections)}")

    width = len(sections[0])
    out = []
    for i, section in enumerate(sections):
        if len(section) != width or width % 3 != 0:
            raise ProgramSyntaxError(
                f"section {i} {section!r}: every section needs the same number of 3-char actions"
            )
        out.append([section[j: j + 3] for j in range(0, width, 3)])
    return out


def parse_program(text: str) -> Program:
    sections = _split(text)
    n_states = len(sections)
    n_symbols = len(sections[0])

    declared = list(ascii_uppercase[:n_states])
    halting: List[str] = []

    raw = []
    for si, actions in enumerate(sections):
        for sym, action in enumerate(actions):
            if action == _UNDEFINED:
                continue

            write, move, nxt = action
            if not write.isdigit() or int(write) >= n_symbols:
                raise ProgramSyntaxError(f"bad write symbol in {action!r}")
            if move not in _DIRECTIONS:
                raise ProgramSyntaxError(f"bad direction in {action!r}")
            if nxt not in ascii_uppercase:
                raise ProgramSyntaxError(f"bad next state in {action!r}")

            if nxt not in declared and nxt not in halting:
                halting.append(nxt)
            raw.append((declared[si], sym, int(write), _DIRECTIONS[move], nxt))

    if not halting:
        if _FALLBACK_HALT in declared:
            raise ProgramSyntaxError("no halting state")
        halting.append(_FALLBACK_HALT)

    State = state_alphabet(initial="A", halt=halting)(
        Enum("State", declared + sorted(halting), type=StateAlphabet)
    )
    Symbol = symbol_alphabet(blank="S0")(
        Enum("Symbol", [(f"S{i}", i) for i in range(n_symbols)], type=SymbolAlphabet)
    )

    table = TransitionTable(
        ((State[s], Symbol(sym)), Transition(write=Symbol(w), move=d, next_state=State[nxt]))
        for s, sym, w, d, nxt in raw
    )
    return Program(text=text.strip(), states=State, symbols=Symbol, table=table)
