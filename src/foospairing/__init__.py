"""Foos Pairing: fair match generation for foosball tournaments."""

from foospairing.exceptions import (
    FoosPairingException,
    InvalidPlayerCount,
    NoFeasibleSolution,
)
from foospairing.models import ConfrontationMatrix, SolveResult, SolverConfig
from foospairing.pairing import MatchSolver, solve

__version__ = "0.1.0"

__all__ = [
    "ConfrontationMatrix",
    "FoosPairingException",
    "InvalidPlayerCount",
    "MatchSolver",
    "NoFeasibleSolution",
    "SolveResult",
    "SolverConfig",
    "solve",
]
