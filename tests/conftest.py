# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from bb_machine import Ctx, TuringMachine
from tests.machines import State, Symbol, noop_rule


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture
def make_machine():
    """
    Usage:
        m = make_machine()
        m = make_machine(tape=[Symbol.ONE], rule=my_rule)
    """

    def _make(tape=(), rule=noop_rule, config=None) -> TuringMachine:
        return TuringMachine(states=State, symbols=Symbol, rule=rule, tape=tape, config=config)

    return _make


@pytest.fixture
def make_ctx(make_machine):
    """
    A live Ctx bound to a fresh machine, outside of any step.
    """

    def _make(tape=()):
        m = make_machine(tape=tape)
        return m, Ctx(m)

    return _make
