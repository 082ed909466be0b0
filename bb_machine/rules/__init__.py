from .table import Direction, Transition, TransitionTable
from .program import Program, parse_program

__all__ = ["Direction", "Transition", "TransitionTable", "Program", "parse_program"]
