# bb_machine/utils/errors.py


class MachineError(RuntimeError):
    """
    Base class for every error raised by bb_machine.
    """


class AlphabetConfigError(MachineError):
    """
    Raised when a state/symbol alphabet is declared with the wrong
    initial / halting / blank designations.

    Happens at class-definition time, never inside the step loop.
    """


class TransitionCoverageError(MachineError):
    """
    Raised by a table-driven rule for a (state, symbol) pair it has no entry for.
    """

    def __init__(self, state, symbol):
        self.state = state
        self.symbol = symbol
        super().__init__(f"no transition for state={state!r} symbol={symbol!r}")


class ContextExpiredError(MachineError):
    """
    Raised when a Ctx is used after the step it was built for has returned.
    """


class StepBudgetExceeded(MachineError):
    """
    Raised by TuringMachine.run(max_steps=...) when the budget runs out before halting.
    """

    def __init__(self, max_steps: int):
        self.max_steps = max_steps
        super().__init__(f"machine did not halt within {max_steps} steps")


class ProgramSyntaxError(MachineError, ValueError):
    """
    Raised for malformed program text (e.g. "1RB1LB_1LA1RZ").
    """
