"""Exceptions for use in Foos Pairing"""

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


# ========== Base Application Exception ==========


class FoosPairingException(Exception):
    """Base exception for all Foos Pairing errors.

    All custom exceptions in the library should inherit from this class.
    This enables catching all library-specific errors with a single except clause.
    """

    pass


# ========== Solver Exceptions ==========


class SolverException(FoosPairingException):
    """Base exception for match solver errors."""

    pass


class InvalidPlayerCount(SolverException):
    """Raised when the players of a round cannot be split into groups of four."""

    def __init__(self, player_count: int):
        self.player_count = player_count
        super().__init__(
            f"The list of players to solve is not a multiple of 4 ({player_count} players)"
        )


class NoFeasibleSolution(SolverException):
    """Raised when no grouping without repeated players could be found.

    Only reachable when the player list contains repeated ids; callers should
    treat it as an input validation failure rather than retry.
    """

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(
            f"No possible solution with this combination of players "
            f"after {attempts} shuffles"
        )


# ========== Configuration Exceptions ==========


class ConfigurationException(FoosPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
