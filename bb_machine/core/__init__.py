"""
Engine core.

Layers (each depends only on the one below):
- alphabet : WHAT a state / symbol must offer
- context  : HOW the rule touches tape, head and state for one step
- machine  : WHEN steps happen and when the run stops
"""
from .alphabet import StateAlphabet, SymbolAlphabet, state_alphabet, symbol_alphabet
from .tape import Tape
from .context import Ctx
from .machine import TuringMachine, TransitionRule

__all__ = [
    "StateAlphabet", "SymbolAlphabet",
    "state_alphabet", "symbol_alphabet",
    "Tape",
    "Ctx",
    "TuringMachine", "TransitionRule",
]
