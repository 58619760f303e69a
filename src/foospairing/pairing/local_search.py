"""First-improvement hill climbing over single player swaps."""

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
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from foospairing.models.confrontation_matrix import ConfrontationMatrix
from foospairing.pairing.fitness import match_score, swap_diff
from foospairing.type_hints import MatrixDiff, Partition, PlayerId
from foospairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class Swap:
    """An improving exchange of two players between two groups."""

    group1: int
    position1: int
    group2: int
    position2: int
    score: int
    diff: MatrixDiff


def _shuffled(values: Iterable[int], rng: random.Random) -> List[int]:
    values = list(values)
    rng.shuffle(values)
    return values


class LocalSearchOptimizer:
    """Climbs from a partition to a local maximum of the total score.

    Candidate swaps are visited in random order and the first one that
    strictly improves the score is taken, not the best one.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_iterations: Optional[int] = None,
        deadline: Optional[float] = None,
    ):
        """
        Parameters
        ----------
            rng: random source deciding the visiting order
            max_iterations: stop after this many accepted swaps
            deadline: ``time.perf_counter()`` value after which to stop
        """
        self.random = rng if rng is not None else random.Random()
        self.max_iterations = max_iterations
        self.deadline = deadline

    def find_improving_swap(
        self, partition: Partition, matrix: ConfrontationMatrix, score: int
    ) -> Optional[Swap]:
        """Return the first swap found that beats ``score``, or None at a local maximum.

        Only groups holding one of the two swapped players are rescored,
        since every pair in the diff includes one of them. With distinct
        ids those are just the two groups involved; a repeated id also
        brings in the other groups it sits in.
        """
        nmatches = len(partition)
        group_scores = [match_score(group, matrix) for group in partition]
        locations: Dict[PlayerId, List[int]] = {}
        for m, group in enumerate(partition):
            for player in group:
                locations.setdefault(player, []).append(m)

        for match1 in _shuffled(range(nmatches), self.random):
            orig_match1 = partition[match1]
            others = [m for m in range(nmatches) if m != match1]
            for match2 in _shuffled(others, self.random):
                orig_match2 = partition[match2]
                base = group_scores[match1] + group_scores[match2]
                for position1 in _shuffled(range(len(orig_match1)), self.random):
                    player1 = orig_match1[position1]
                    if player1 in orig_match2:
                        continue
                    for position2 in _shuffled(range(len(orig_match2)), self.random):
                        player2 = orig_match2[position2]
                        if player2 in orig_match1:
                            continue
                        new_match1 = list(orig_match1)
                        new_match2 = list(orig_match2)
                        new_match1[position1] = player2
                        new_match2[position2] = player1

                        diff = swap_diff(orig_match1, position1, orig_match2, position2)
                        new_score = (
                            score
                            - base
                            + match_score(new_match1, matrix, diff)
                            + match_score(new_match2, matrix, diff)
                        )
                        bystanders = set(locations[player1] + locations[player2])
                        bystanders -= {match1, match2}
                        for m in bystanders:
                            new_score += (
                                match_score(partition[m], matrix, diff) - group_scores[m]
                            )
                        if new_score > score:
                            return Swap(match1, position1, match2, position2, new_score, diff)
        return None

    def optimize(
        self, partition: Partition, matrix: ConfrontationMatrix, score: int
    ) -> Tuple[Partition, int, ConfrontationMatrix]:
        """Apply improving swaps to ``partition`` and ``matrix`` in place until none is left.

        ``matrix`` must already hold the confrontations implied by
        ``partition`` and ``score`` must be its total score.
        """
        if len(partition) < 2:
            return partition, score, matrix

        iterations = 0
        while True:
            if self.max_iterations is not None and iterations >= self.max_iterations:
                logger.debug("Stopped after %s swaps (iteration cap)", iterations)
                break
            if self.deadline is not None and time.perf_counter() >= self.deadline:
                logger.debug("Stopped after %s swaps (time limit)", iterations)
                break

            swap = self.find_improving_swap(partition, matrix, score)
            if swap is None:
                logger.debug("No better neighbour, found a local maximum (score %s)", score)
                break

            group1 = partition[swap.group1]
            group2 = partition[swap.group2]
            group1[swap.position1], group2[swap.position2] = (
                group2[swap.position2],
                group1[swap.position1],
            )
            matrix.apply_diff(swap.diff)
            score = swap.score
            iterations += 1

        return partition, score, matrix
