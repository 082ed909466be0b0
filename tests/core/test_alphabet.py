#!filepath: tests/core/test_alphabet.py
from __future__ import annotations

from enum import Enum, auto

import pytest

from bb_machine import (
    AlphabetConfigError,
    StateAlphabet,
    SymbolAlphabet,
    state_alphabet,
    symbol_alphabet,
)
from tests.machines import State, Symbol


# =============================================================================
# Declared alphabets
# =============================================================================

def test_state_initial_and_halt():
    assert State.initial() is State.A
    assert State.HALT.is_halt()
    assert not State.A.is_halt()
    assert not State.B.is_halt()


def test_symbol_blank():
    assert Symbol.blank() is Symbol.ZERO
    assert Symbol.ONE != Symbol.ZERO


def test_multiple_halt_states():
    @state_alphabet(initial="RUN", halt=("ACCEPT", "REJECT"))
    class Q(StateAlphabet, Enum):
        RUN = auto()
        ACCEPT = auto()
        REJECT = auto()

    assert Q.ACCEPT.is_halt()
    assert Q.REJECT.is_halt()
    assert not Q.RUN.is_halt()


def test_hand_written_alphabet():
    class Light(StateAlphabet):
        def __init__(self, on: bool):
            self.on = on

        @classmethod
        def initial(cls):
            return cls(True)

        def is_halt(self) -> bool:
            return not self.on

    assert Light.initial().on is True
    assert Light(False).is_halt()


def test_undeclared_alphabet_raises():
    class Bare(StateAlphabet, Enum):
        X = auto()

    class BareSym(SymbolAlphabet, Enum):
        X = auto()

    with pytest.raises(NotImplementedError):
        Bare.initial()
    with pytest.raises(NotImplementedError):
        BareSym.blank()


# =============================================================================
# Declaration errors
# =============================================================================

def test_initial_cannot_be_halt():
    with pytest.raises(AlphabetConfigError, match="both initial and halt"):
        @state_alphabet(initial="A", halt="A")
        class Q(StateAlphabet, Enum):
            A = auto()
            B = auto()


def test_halt_required():
    with pytest.raises(AlphabetConfigError, match="at least one halt"):
        @state_alphabet(initial="A", halt=())
        class Q(StateAlphabet, Enum):
            A = auto()


def test_exactly_one_initial():
    with pytest.raises(AlphabetConfigError, match="exactly one initial"):
        @state_alphabet(initial=("A", "B"), halt="H")
        class Q(StateAlphabet, Enum):
            A = auto()
            B = auto()
            H = auto()


def test_unknown_member():
    with pytest.raises(AlphabetConfigError, match="unknown halt member"):
        @state_alphabet(initial="A", halt="STOP")
        class Q(StateAlphabet, Enum):
            A = auto()

    with pytest.raises(AlphabetConfigError, match="unknown blank member"):
        @symbol_alphabet(blank="SPACE")
        class S(SymbolAlphabet, Enum):
            X = auto()


def test_blank_must_be_single_name():
    with pytest.raises(AlphabetConfigError, match="exactly one blank"):
        @symbol_alphabet(blank=None)
        class S(SymbolAlphabet, Enum):
            X = auto()


def test_requires_enum():
    with pytest.raises(AlphabetConfigError, match="only be declared on an Enum"):
        @symbol_alphabet(blank="X")
        class S(SymbolAlphabet):
            X = 1


def test_requires_mixin():
    with pytest.raises(AlphabetConfigError, match="must mix in StateAlphabet"):
        @state_alphabet(initial="A", halt="H")
        class Q(Enum):
            A = auto()
            H = auto()
