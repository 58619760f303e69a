"""Shared utilities for Foos Pairing."""

from foospairing.utils.logging import LOG_FMT, set_verbose, setup_logger

__all__ = ["LOG_FMT", "set_verbose", "setup_logger"]
