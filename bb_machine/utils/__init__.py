from .logger import Logging, init_logging, logs
from .errors import (
    MachineError,
    AlphabetConfigError,
    TransitionCoverageError,
    ContextExpiredError,
    StepBudgetExceeded,
    ProgramSyntaxError,
)

__all__ = [
    "Logging", "init_logging", "logs",
    "MachineError",
    "AlphabetConfigError",
    "TransitionCoverageError",
    "ContextExpiredError",
    "StepBudgetExceeded",
    "ProgramSyntaxError",
]
