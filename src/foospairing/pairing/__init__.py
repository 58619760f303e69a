"""Match pairing algorithms."""

from foospairing.pairing.fitness import match_score, swap_diff, total_score
from foospairing.pairing.local_search import LocalSearchOptimizer
from foospairing.pairing.partitioner import RandomPartitioner
from foospairing.pairing.score_table import pair_reward
from foospairing.pairing.solver import MatchSolver, solve

__all__ = [
    "LocalSearchOptimizer",
    "MatchSolver",
    "RandomPartitioner",
    "match_score",
    "pair_reward",
    "solve",
    "swap_diff",
    "total_score",
]
