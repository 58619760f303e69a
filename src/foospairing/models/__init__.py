"""Data models for Foos Pairing."""

from foospairing.models.confrontation_matrix import ConfrontationMatrix, player_pair
from foospairing.models.solve_result import SolveResult
from foospairing.models.solver_config import SolverConfig

__all__ = ["ConfrontationMatrix", "SolveResult", "SolverConfig", "player_pair"]
