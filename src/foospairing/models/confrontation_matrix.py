"""Confrontation history between pairs of players."""

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

from dataclasses import dataclass, field
from itertools import combinations
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from foospairing.type_hints import Group, MatrixDiff, PlayerId, PlayerPair


def player_pair(player1_id: PlayerId, player2_id: PlayerId) -> PlayerPair:
    """Return the unordered key for two distinct players."""
    if player1_id == player2_id:
        raise ValueError(f"A player cannot confront itself: {player1_id!r}")
    return frozenset((player1_id, player2_id))


@dataclass
class ConfrontationMatrix:
    """
    Tracks how many times each pair of players has shared a match.

    Teammates and opponents both count: any two players at the same table
    have "faced each other". The matrix is symmetric by construction since
    pairs are stored unordered, and pairs that never met are simply absent.

    Attributes
    ----------
    counts : dict of frozenset to int
        Mapping of unordered player pairs to their number of confrontations.
        Only strictly positive counts are stored.
    """

    counts: Dict[PlayerPair, int] = field(default_factory=dict)

    def get(self, player1_id: PlayerId, player2_id: PlayerId) -> int:
        """Return how many times two players have met, 0 if never."""
        return self.counts.get(player_pair(player1_id, player2_id), 0)

    def increment(self, player1_id: PlayerId, player2_id: PlayerId, amount: int = 1) -> None:
        """Record ``amount`` more confrontations between two players."""
        self._add(player_pair(player1_id, player2_id), amount)

    def decrement(self, player1_id: PlayerId, player2_id: PlayerId, amount: int = 1) -> None:
        """Remove ``amount`` confrontations between two players."""
        self._add(player_pair(player1_id, player2_id), -amount)

    def _add(self, pair: PlayerPair, amount: int) -> None:
        count = self.counts.get(pair, 0) + amount
        if count < 0:
            raise ValueError(
                f"Confrontation count for {sorted(pair, key=repr)} would become {count}"
            )
        if count:
            self.counts[pair] = count
        else:
            self.counts.pop(pair, None)

    def apply_group(self, group: Group) -> None:
        """Record one confrontation for every pair of players in ``group``."""
        for player1_id, player2_id in combinations(group, 2):
            self.increment(player1_id, player2_id)

    def apply_diff(self, diff: MatrixDiff) -> None:
        """Fold a temporary adjustment permanently into the matrix."""
        for pair, amount in diff.items():
            if amount:
                self._add(pair, amount)

    def deep_copy(self) -> "ConfrontationMatrix":
        """Return an independent copy; counts are ints so a dict copy suffices."""
        return ConfrontationMatrix(counts=dict(self.counts))

    def pairs(self) -> Iterator[Tuple[PlayerPair, int]]:
        """Iterate over every pair that has met at least once."""
        return iter(self.counts.items())

    def players(self) -> List[PlayerId]:
        """Return every player appearing in at least one confrontation."""
        seen: Dict[PlayerId, None] = {}
        for pair in self.counts:
            for player_id in pair:
                seen.setdefault(player_id, None)
        return list(seen)

    def total(self) -> int:
        """Return the sum of all confrontation counts."""
        return sum(self.counts.values())

    def __len__(self) -> int:
        return len(self.counts)

    @classmethod
    def from_matches(
        cls,
        matches: Iterable[Group],
        base: Optional["ConfrontationMatrix"] = None,
    ) -> "ConfrontationMatrix":
        """Build a matrix from past matches, each given as its list of players.

        Parameters
        ----------
        matches : iterable of list
            Players of every past match. Singles matches (2 players) are
            accepted as well as doubles.
        base : ConfrontationMatrix, optional
            History to start from; it is copied, not modified.
        """
        matrix = base.deep_copy() if base is not None else cls()
        for players in matches:
            matrix.apply_group(list(players))
        return matrix

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the matrix to dictionary."""
        return {
            "confrontations": [
                [*sorted(pair, key=repr), count] for pair, count in self.counts.items()
            ]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfrontationMatrix":
        """Deserialize the matrix from dictionary.

        Repeated pairs are added together.
        """
        matrix = cls()
        for player1_id, player2_id, count in data.get("confrontations", []):
            if count < 0:
                raise ValueError(
                    f"Negative confrontation count for {player1_id!r}/{player2_id!r}"
                )
            matrix.increment(player1_id, player2_id, int(count))
        return matrix
