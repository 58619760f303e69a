"""SolverConfig data class."""

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
from typing import Any, Dict, Optional

from foospairing.constants import DEFAULT_MAX_ATTEMPTS, DEFAULT_SHUFFLE_ATTEMPTS
from foospairing.exceptions import InvalidConfigurationException


@dataclass
class SolverConfig:
    """Tunable limits of the match solver.

    Attributes
    ----------
    max_attempts : int
        Number of random restarts, each climbed to a local maximum.
    shuffle_attempts : int
        Shuffles tried to find a partition with no repeated player in a group.
    max_iterations : int, optional
        Cap on accepted swaps per local search. None climbs until a local
        maximum is reached.
    time_limit : float, optional
        Wall-clock budget in seconds for a whole solve. When it runs out the
        current climb stops and no further restarts begin; at least one
        restart always runs. None means no limit.
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    shuffle_attempts: int = DEFAULT_SHUFFLE_ATTEMPTS
    max_iterations: Optional[int] = None
    time_limit: Optional[float] = None

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise InvalidConfigurationException(
                f"max_attempts must be at least 1, got {self.max_attempts}"
            )
        if self.shuffle_attempts < 1:
            raise InvalidConfigurationException(
                f"shuffle_attempts must be at least 1, got {self.shuffle_attempts}"
            )
        if self.max_iterations is not None and self.max_iterations < 0:
            raise InvalidConfigurationException(
                f"max_iterations cannot be negative, got {self.max_iterations}"
            )
        if self.time_limit is not None and self.time_limit <= 0:
            raise InvalidConfigurationException(
                f"time_limit must be positive, got {self.time_limit}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "max_attempts": self.max_attempts,
            "shuffle_attempts": self.shuffle_attempts,
            "max_iterations": self.max_iterations,
            "time_limit": self.time_limit,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolverConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            max_attempts=data.get("max_attempts", DEFAULT_MAX_ATTEMPTS),
            shuffle_attempts=data.get("shuffle_attempts", DEFAULT_SHUFFLE_ATTEMPTS),
            max_iterations=data.get("max_iterations"),
            time_limit=data.get("time_limit"),
        )
