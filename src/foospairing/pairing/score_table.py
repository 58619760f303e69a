"""Reward of a pair of players by how often they have met."""

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

from foospairing.constants import SCORES_NPLAYED


def pair_reward(confrontations: int) -> int:
    """Return the reward for a pair that will have met ``confrontations`` times.

    Rare pairings are worth far more than frequent ones. A count of 0 (the
    pair does not meet this round and never has) and counts of 7 or more
    are worth 0.
    """
    return SCORES_NPLAYED.get(confrontations, 0)
