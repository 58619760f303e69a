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

# --- Constants ---

# Players per foosball match (two teams of two)
GROUP_SIZE = 4

# Reward for a pair by how many times it has met, counting this round.
# Counts not listed (0 and anything from 7 up) are worth nothing.
SCORES_NPLAYED = {
    0: 0,
    1: 1000,
    2: 600,
    3: 400,
    4: 300,
    5: 200,
    6: 100,
}

# Solver limits
DEFAULT_MAX_ATTEMPTS = 20  # random restarts per solve
DEFAULT_SHUFFLE_ATTEMPTS = 500000  # shuffles tried for one valid partition

# Environment variable naming a folder for the rotating log file
LOG_DIR_ENV_VAR = "FOOSPAIRING_LOG_DIR"
LOG_FILE_NAME = "foos-pairing.log"
