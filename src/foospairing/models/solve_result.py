"""SolveResult data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from foospairing.models.confrontation_matrix import ConfrontationMatrix
from foospairing.type_hints import Partition


@dataclass
class SolveResult:
    """Best grouping found for a round.

    ``matrix`` is the pre-round history plus one confrontation for every
    pair of players sharing a group in ``partition``.
    """

    partition: Partition
    score: int
    matrix: ConfrontationMatrix
    attempts: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the result to dictionary."""
        return {
            "partition": [list(group) for group in self.partition],
            "score": self.score,
            "matrix": self.matrix.to_dict(),
            "attempts": self.attempts,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolveResult":
        """Deserialize the result from dictionary."""
        return cls(
            partition=[list(group) for group in data["partition"]],
            score=data["score"],
            matrix=ConfrontationMatrix.from_dict(data.get("matrix", {})),
            attempts=data.get("attempts", 0),
        )


#  LocalWords:  SolveResult
