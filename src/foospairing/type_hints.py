"""Type hints used in Foos Pairing."""

from typing import Dict, FrozenSet, Hashable, List, Tuple

# Opaque player identifier, usually the database id
PlayerId = Hashable
# Players to be grouped for one round
PlayerList = List[PlayerId]
# Four players sharing one table
Group = List[PlayerId]
# All groups for one round
Partition = List[Group]
# Unordered pair of players
PlayerPair = FrozenSet[PlayerId]
# Temporary confrontation adjustments evaluated during local search
MatrixDiff = Dict[PlayerPair, int]
# A (player, player, count) row of a serialized matrix
MatrixEntry = Tuple[PlayerId, PlayerId, int]

#  LocalWords:  MatrixDiff PlayerPair
