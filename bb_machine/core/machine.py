"""
{#!filepath: bb_machine/core/machine.py}

TuringMachine: single-tape step loop (FINAL / FROZEN)

Semantics:
- state starts at states.initial(); head starts at position 0.
- step() builds one Ctx, calls the rule exactly once, then counts the step.
- run() steps until state.is_halt() is True.

Invariants:
- steps increases by exactly 1 per completed step().
- 0 <= head < len(tape) before and after every step.
- The rule is the only thing that changes symbol, state or head.

The engine does not validate rule coverage and does not detect
non-termination: a rule that never reaches a halting state makes run()
block forever unless a step budget is given.
"""
from __future__ import annotations

from time import perf_counter
from typing import Callable, Iterable, Optional, Tuple

from bb_machine.config.machine_config import MachineConfig
from bb_machine.core.context import Ctx
from bb_machine.core.tape import Tape
from bb_machine.utils.errors import StepBudgetExceeded
from bb_machine.utils.logger import logs

TransitionRule = Callable[[Ctx], None]


class TuringMachine:

    def __init__(
        self,
        *,
        states,
        symbols,
        rule: TransitionRule,
        tape: Iterable = (),
        config: Optional[MachineConfig] = None,
    ):
        self.states = states
        self.symbols = symbols
        self.config = config if config is not None else MachineConfig()

        self._rule = rule
        self._tape = Tape(symbols.blank(), tape)
        self._position = 0
        self._state = states.initial()
        self._steps = 0

    # --------------------------------------------------
    # Step loop
    # --------------------------------------------------
    def step(self) -> None:
        # 当前格必须已物化（rule 上一步可能直接改写了 head）
        self._tape.expand_to_cover(self._position)

        ctx = Ctx(self)
        try:
            self._rule(ctx)
        finally:
            ctx.expire()

        self._steps += 1
        self._tape.expand_to_cover(self._position)

    def run(self, max_steps: Optional[int] = None) -> int:
        """
        Step until halted and return the total step count.

        max_steps caps the machine's total step count (falls back to
        config.max_steps); None means no cap.
        """
        budget = max_steps if max_steps is not None else self.config.max_steps
        log_every = self.config.log_every

        logs.info(
            f"[Machine] run start state={self._state} steps={self._steps} "
            f"tape_len={len(self._tape)} budget={budget}"
        )
        start = perf_counter()

        while not self._state.is_halt():
            if budget is not None and self._steps >= budget:
                logs.warning(f"[Machine] step budget exhausted budget={budget} state={self._state}")
                raise StepBudgetExceeded(budget)

            self.step()

            if log_every and self._steps % log_every == 0:
                logs.info(
                    f"[Progress] steps={self._steps} state={self._state} "
                    f"tape_len={len(self._tape)} elapsed={perf_counter() - start:.2f}s"
                )

        logs.info(
            f"[Machine] halted state={self._state} steps={self._steps} "
            f"tape_len={len(self._tape)} took={perf_counter() - start:.4f}s"
        )
        return self._steps

    # --------------------------------------------------
    # Observation
    # --------------------------------------------------
    @property
    def tape(self) -> Tuple:
        return self._tape.cells()

    @property
    def steps(self) -> int:
        return self._steps

    def total_steps(self) -> int:
        return self._steps

    @property
    def state(self):
        return self._state

    @property
    def is_halted(self) -> bool:
        return self._state.is_halt()

    @property
    def position(self) -> int:
        return self._position

    @property
    def head(self) -> int:
        return self._tape.index_of(self._position)

    def count(self, symbol) -> int:
        return self._tape.count(symbol)

    def count_non_blank(self) -> int:
        blank = self._tape.blank
        return sum(1 for c in self._tape if c != blank)
