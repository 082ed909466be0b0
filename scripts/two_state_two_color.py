#!/usr/bin/env python3
"""
2-state 2-color busy beaver, written as a hand-coded rule.

    A, 0 -> 1 R B
    A, 1 -> 1 L B
    B, 0 -> 1 L A
    B, 1 -> 0 L HALT

python scripts/two_state_two_color.py
python scripts/two_state_two_color.py --random-tape 16 --seed 7
"""
from __future__ import annotations

import argparse
import random
from enum import Enum, auto

from bb_machine import (
    Ctx,
    StateAlphabet,
    SymbolAlphabet,
    TuringMachine,
    state_alphabet,
    symbol_alphabet,
)


@state_alphabet(initial="A", halt="HALT")
class State(StateAlphabet, Enum):
    A = auto()
    B = auto()
    HALT = auto()


@symbol_alphabet(blank="ZERO")
class Symbol(SymbolAlphabet, Enum):
    ZERO = auto()
    ONE = auto()


def transition(ctx: Ctx) -> None:
    state, symbol = ctx.state, ctx.symbol

    if state is State.A and symbol is Symbol.ZERO:
        ctx.symbol = Symbol.ONE
        ctx.move_head_by(1)
        ctx.state = State.B
    elif state is State.A and symbol is Symbol.ONE:
        ctx.symbol = Symbol.ONE
        ctx.move_head_by(-1)
        ctx.state = State.B
    elif state is State.B and symbol is Symbol.ZERO:
        ctx.symbol = Symbol.ONE
        ctx.move_head_by(-1)
        ctx.state = State.A
    elif state is State.B and symbol is Symbol.ONE:
        ctx.symbol = Symbol.ZERO
        ctx.move_head_by(-1)
        ctx.state = State.HALT
    # HALT: no-op


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the 2-state 2-color busy beaver")
    parser.add_argument("--random-tape", type=int, default=0, help="随机初始纸带长度（默认空纸带）")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-steps", type=int, default=None)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    tape = [rng.choice(list(Symbol)) for _ in range(args.random_tape)]

    machine = TuringMachine(states=State, symbols=Symbol, rule=transition, tape=tape)
    machine.run(max_steps=args.max_steps)

    print(f"Steps: {machine.total_steps()}")
    print(f"Non-zeros count: {machine.count(Symbol.ONE)}")


if __name__ == "__main__":
    main()
