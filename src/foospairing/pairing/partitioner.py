"""Random grouping of a round's players into matches."""

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
from typing import Optional, Sequence

from foospairing.constants import DEFAULT_SHUFFLE_ATTEMPTS, GROUP_SIZE
from foospairing.exceptions import InvalidPlayerCount, NoFeasibleSolution
from foospairing.type_hints import Partition, PlayerId
from foospairing.utils import setup_logger

logger = setup_logger(__name__)


def split_into_groups(players: Sequence[PlayerId]) -> Partition:
    """Slice a flat player list into consecutive groups of four."""
    return [
        list(players[start : start + GROUP_SIZE])
        for start in range(0, len(players), GROUP_SIZE)
    ]


def has_repeated_player(partition: Partition) -> bool:
    """Return True if any group holds the same player twice."""
    return any(len(set(group)) < len(group) for group in partition)


class RandomPartitioner:
    """Builds random partitions with no repeated player inside a group.

    With distinct player ids the first shuffle is always valid; the attempt
    budget only matters when the caller passes repeated ids.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = DEFAULT_SHUFFLE_ATTEMPTS,
    ):
        self.random = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts

    def partition(self, player_list: Sequence[PlayerId]) -> Partition:
        """Shuffle and slice ``player_list`` until no group repeats a player.

        Raises
        ------
        InvalidPlayerCount
            If the list cannot be split into groups of four.
        NoFeasibleSolution
            If every shuffle within the attempt budget repeated a player.
        """
        if len(player_list) % GROUP_SIZE != 0:
            raise InvalidPlayerCount(len(player_list))

        solution = list(player_list)
        for _ in range(self.max_attempts):
            self.random.shuffle(solution)
            partition = split_into_groups(solution)
            if not has_repeated_player(partition):
                return partition

        logger.warning(
            "No valid random partition of %s players after %s shuffles",
            len(player_list),
            self.max_attempts,
        )
        raise NoFeasibleSolution(self.max_attempts)
