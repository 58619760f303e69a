"""Fitness of a round's grouping against the confrontation history."""

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

from itertools import combinations
from typing import Optional, Sequence

from foospairing.models.confrontation_matrix import ConfrontationMatrix
from foospairing.pairing.score_table import pair_reward
from foospairing.type_hints import Group, MatrixDiff, Partition


def match_score(
    group: Group,
    matrix: ConfrontationMatrix,
    diff: Optional[MatrixDiff] = None,
) -> int:
    """
    Score one match from the confrontation counts of its six pairs.

    Parameters
    ----------
        group: the four players of the match
        matrix: trial matrix, already holding this round's confrontations
        diff: temporary adjustments added on top of ``matrix``, used to score
            a neighbour without touching the matrix
    """
    score = 0
    for player1_id, player2_id in combinations(group, 2):
        confrontations = matrix.get(player1_id, player2_id)
        if diff:
            confrontations += diff.get(frozenset((player1_id, player2_id)), 0)
        score += pair_reward(confrontations)
    return score


def total_score(
    partition: Sequence[Group],
    matrix: ConfrontationMatrix,
    diff: Optional[MatrixDiff] = None,
) -> int:
    """Sum ``match_score`` over every group of the partition."""
    return sum(match_score(group, matrix, diff) for group in partition)


def apply_round(matrix: ConfrontationMatrix, partition: Partition) -> ConfrontationMatrix:
    """Return a copy of ``matrix`` with one confrontation per pair of every group."""
    trial = matrix.deep_copy()
    for group in partition:
        trial.apply_group(group)
    return trial


def swap_diff(group1: Group, position1: int, group2: Group, position2: int) -> MatrixDiff:
    """
    Confrontation changes caused by swapping ``group1[position1]`` with
    ``group2[position2]``.

    The moved players lose one confrontation with each of their three former
    group-mates and gain one with each of their three new ones, so the
    result touches twelve pairs. Neither player may already be in the other
    group.
    """
    player1 = group1[position1]
    player2 = group2[position2]
    diff: MatrixDiff = {}

    def _add(player, rival, amount):
        pair = frozenset((player, rival))
        diff[pair] = diff.get(pair, 0) + amount

    for r in range(len(group1)):
        if r != position1:
            rival = group1[r]
            _add(player1, rival, -1)
            _add(player2, rival, 1)
    for r in range(len(group2)):
        if r != position2:
            rival = group2[r]
            _add(player2, rival, -1)
            _add(player1, rival, 1)
    return diff
