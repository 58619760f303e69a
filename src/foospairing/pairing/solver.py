"""Fair match solver.

Splits the players of a round into matches of four so that, across the
history of the tournament, no two players meet much more often than any
other two. Random partitions are climbed to a local optimum with single
player swaps, and the best of several restarts is kept.
"""

# Foos Pairing
# Copyright (C) 2025  Foos Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
import time
from typing import Optional, Sequence

from foospairing.constants import GROUP_SIZE
from foospairing.exceptions import InvalidPlayerCount
from foospairing.models.confrontation_matrix import ConfrontationMatrix
from foospairing.models.solve_result import SolveResult
from foospairing.models.solver_config import SolverConfig
from foospairing.pairing.fitness import apply_round, total_score
from foospairing.pairing.local_search import LocalSearchOptimizer
from foospairing.pairing.partitioner import RandomPartitioner
from foospairing.type_hints import PlayerId
from foospairing.utils import setup_logger

logger = setup_logger(__name__)


class MatchSolver:
    """Generates fair match combinations for a round.

    The history matrix given here is never modified; every restart works on
    its own copy.
    """

    def __init__(
        self,
        one2one: ConfrontationMatrix,
        config: Optional[SolverConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """
        Parameters
        ----------
            one2one: how many times each pair of players has met so far
            config: solver limits, defaults to ``SolverConfig()``
            rng: random source; takes precedence over ``seed``
            seed: seed for a private random source, for reproducible runs
        """
        self.one2one = one2one
        self.config = config if config is not None else SolverConfig()
        if rng is not None:
            self.random = rng
        else:
            self.random = random.Random(seed) if seed is not None else random.Random()
        self.partitioner = RandomPartitioner(self.random, self.config.shuffle_attempts)

    def solve(self, player_list: Sequence[PlayerId]) -> SolveResult:
        """Search for the fairest grouping of ``player_list`` into matches.

        Raises
        ------
        InvalidPlayerCount
            If the number of players is not a multiple of 4.
        NoFeasibleSolution
            If no grouping without repeated players could be found.
        """
        if len(player_list) % GROUP_SIZE != 0:
            raise InvalidPlayerCount(len(player_list))

        deadline = None
        if self.config.time_limit is not None:
            deadline = time.perf_counter() + self.config.time_limit
        optimizer = LocalSearchOptimizer(
            self.random, max_iterations=self.config.max_iterations, deadline=deadline
        )

        best: Optional[SolveResult] = None
        attempts = 0
        while attempts < self.config.max_attempts:
            attempts += 1
            solution = self.partitioner.partition(player_list)
            one2one = apply_round(self.one2one, solution)
            score = total_score(solution, one2one)
            if best is None:
                logger.debug("Initial random solution with score %s", score)
            else:
                logger.debug("Shuffling for a new random solution (attempt %s)", attempts)

            solution, score, one2one = optimizer.optimize(solution, one2one, score)

            if best is None or score > best.score:
                best = SolveResult(partition=solution, score=score, matrix=one2one)
                logger.debug("Found a better solution (score %s)", score)

            if deadline is not None and time.perf_counter() >= deadline:
                logger.info(
                    "Time limit of %ss reached after %s restarts",
                    self.config.time_limit,
                    attempts,
                )
                break

        best.attempts = attempts
        logger.debug("Score for the best solution is %s", best.score)
        return best


def solve(
    player_list: Sequence[PlayerId],
    history_matrix: Optional[ConfrontationMatrix] = None,
    config: Optional[SolverConfig] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> SolveResult:
    """Group ``player_list`` into fair matches given the confrontation history.

    Shortcut for ``MatchSolver(history_matrix, ...).solve(player_list)``; an
    omitted history means nobody has played yet.
    """
    if history_matrix is None:
        history_matrix = ConfrontationMatrix()
    return MatchSolver(history_matrix, config=config, rng=rng, seed=seed).solve(
        player_list
    )
