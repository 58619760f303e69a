"""Logging utilities."""

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


import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from foospairing.constants import LOG_DIR_ENV_VAR, LOG_FILE_NAME

# the logger format used
LOG_FMT = "LVL: %(levelname)s | FILE PATH: %(pathname)s | FUN: %(funcName)s | msg: %(message)s | ln#:%(lineno)d"


def _create_file_handler(
    log_folder: str, log_formatter: logging.Formatter
) -> Optional[RotatingFileHandler]:
    """Create a rotating file handler in ``log_folder``, or None if it is not writable."""
    try:
        os.makedirs(log_folder, exist_ok=True)
        log_path = os.path.join(log_folder, LOG_FILE_NAME)
        # Use RotatingFileHandler to prevent unbounded log growth
        file_handler = RotatingFileHandler(
            log_path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
    except OSError:
        return None
    file_handler.setFormatter(log_formatter)
    return file_handler


# --- Logging Setup ---
def setup_logger(logger_name: str) -> logging.Logger:
    """Set up loger for a python module.

    Sets up a console handler, and a file handler when the
    ``FOOSPAIRING_LOG_DIR`` environment variable names a folder.

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the created logger
    """
    lgr = logging.getLogger(name=logger_name)
    lgr.setLevel(logging.INFO)  # Set minimum level
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
    # formatter
    log_formatter = logging.Formatter(LOG_FMT)

    # Console Handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(logging.INFO)
    lgr.addHandler(console_handler)

    # File Handler, opt-in
    log_folder = os.environ.get(LOG_DIR_ENV_VAR)
    if log_folder:
        file_handler = _create_file_handler(log_folder, log_formatter)
        if file_handler:
            lgr.addHandler(file_handler)
        else:
            lgr.warning("Could not open log folder %s, logging to console only", log_folder)

    lgr.debug("logger %s initialized", logger_name)
    return lgr


def set_verbose(verbose: bool = True) -> None:
    """Switch every Foos Pairing logger and handler to DEBUG (or back to INFO)."""
    level = logging.DEBUG if verbose else logging.INFO
    for name, lgr in logging.Logger.manager.loggerDict.items():
        if not name.startswith("foospairing") or not isinstance(lgr, logging.Logger):
            continue
        lgr.setLevel(level)
        for handler in lgr.handlers:
            handler.setLevel(level)
