"""
{#!filepath: bb_machine/core/alphabet.py}

Capability contracts (FROZEN)

StateAlphabet:
- initial()  -> canonical initial control state
- is_halt()  -> True for halting control states

SymbolAlphabet:
- blank()    -> canonical blank symbol (fills unwritten cells)
- ==         -> value equality

The engine only ever calls these methods. It never inspects the concrete
type, and it never checks the initial/halting/blank designations at runtime:
that happens once, when the alphabet is declared.

Declaring an alphabet:

    @state_alphabet(initial="A", halt="HALT")
    class State(StateAlphabet, Enum):
        A = auto()
        B = auto()
        HALT = auto()

    @symbol_alphabet(blank="ZERO")
    class Symbol(SymbolAlphabet, Enum):
        ZERO = auto()
        ONE = auto()

Hand-written implementations that override initial()/is_halt()/blank()
directly are equally valid.
"""
from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterable, Union

from bb_machine.utils.errors import AlphabetConfigError


class StateAlphabet:
    __initial__: "StateAlphabet"
    __halting__: FrozenSet["StateAlphabet"] = frozenset()

    # default body, not a stub: ABCMeta cannot be combined with EnumType
    @classmethod
    def initial(cls):
        try:
            return cls.__initial__
        except AttributeError:
            raise NotImplementedError(
                f"{cls.__name__} has no initial state; use @state_alphabet or override initial()"
            ) from None

    def is_halt(self) -> bool:
        return self in type(self).__halting__


class SymbolAlphabet:
    __blank__: "SymbolAlphabet"

    # default body, not a stub: ABCMeta cannot be combined with EnumType
    @classmethod
    def blank(cls):
        try:
            return cls.__blank__
        except AttributeError:
            raise NotImplementedError(
                f"{cls.__name__} has no blank symbol; use @symbol_alphabet or override blank()"
            ) from None


# ------------------------------------------------------------------
# Declaration decorators
# ------------------------------------------------------------------
def _require_enum(cls, contract: type) -> None:
    if not (isinstance(cls, type) and issubclass(cls, Enum)):
        raise AlphabetConfigError(f"{contract.__name__} can only be declared on an Enum, got {cls!r}")
    if not issubclass(cls, contract):
        raise AlphabetConfigError(f"{cls.__name__} must mix in {contract.__name__}")
    if len(cls) == 0:
        raise AlphabetConfigError(f"{cls.__name__} has no members")


def _member(cls, name, role: str):
    if not isinstance(name, str):
        raise AlphabetConfigError(
            f"{cls.__name__}: exactly one {role} member must be named, got {name!r}"
        )
    try:
        return cls[name]
    except KeyError:
        raise AlphabetConfigError(f"{cls.__name__}: unknown {role} member {name!r}") from None


def state_alphabet(*, initial: str, halt: Union[str, Iterable[str]]):
    """
    Mark an Enum as a StateAlphabet.

    - exactly one initial member
    - at least one halting member
    - the initial member must not be halting
    """
    halt_names = (halt,) if isinstance(halt, str) else tuple(halt)

    def _wrap(cls):
        _require_enum(cls, StateAlphabet)

        initial_member = _member(cls, initial, "initial")
        halting = frozenset(_member(cls, n, "halt") for n in halt_names)

        if not halting:
            raise AlphabetConfigError(f"{cls.__name__}: at least one halt member is required")
        if initial_member in halting:
            raise AlphabetConfigError(
                f"{cls.__name__}.{initial_member.name} cannot be both initial and halt"
            )

        cls.__initial__ = initial_member
        cls.__halting__ = halting
        return cls

    return _wrap


def symbol_alphabet(*, blank: str):
    """
    Mark an Enum as a SymbolAlphabet with exactly one blank member.
    """

    def _wrap(cls):
        _require_enum(cls, SymbolAlphabet)
        cls.__blank__ = _member(cls, blank, "blank")
        return cls

    return _wrap
