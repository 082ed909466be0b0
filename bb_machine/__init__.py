#!filepath: bb_machine/__init__.py
"""
bb_machine: generic single-tape Turing machine engine.

    from enum import Enum, auto
    from bb_machine import StateAlphabet, SymbolAlphabet, state_alphabet, symbol_alphabet, TuringMachine

The engine is parameterized by a state alphabet, a symbol alphabet and a
transition rule (any callable taking a Ctx).
"""
from .utils.logger import Logging, init_logging, logs
from .utils.errors import (
    MachineError,
    AlphabetConfigError,
    TransitionCoverageError,
    ContextExpiredError,
    StepBudgetExceeded,
    ProgramSyntaxError,
)
from .config import AppConfig, LogConfig, MachineConfig
from .core import (
    StateAlphabet,
    SymbolAlphabet,
    state_alphabet,
    symbol_alphabet,
    Tape,
    Ctx,
    TuringMachine,
    TransitionRule,
)
from .rules import Direction, Transition, TransitionTable, Program, parse_program

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "MachineError", "AlphabetConfigError", "TransitionCoverageError",
    "ContextExpiredError", "StepBudgetExceeded", "ProgramSyntaxError",
    "AppConfig", "LogConfig", "MachineConfig",
    "StateAlphabet", "SymbolAlphabet", "state_alphabet", "symbol_alphabet",
    "Tape", "Ctx", "TuringMachine", "TransitionRule",
    "Direction", "Transition", "TransitionTable", "Program", "parse_program",
]
