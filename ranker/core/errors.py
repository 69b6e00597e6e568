"""
errors.py - Exception types raised by ranker

The ranking engine itself never raises for bad decision records; it skips
them. These are raised at the edges: loading sessions, reading config and
validating a decision before the host stores it.
"""


class RankerError(Exception):
    """Base class for every error raised by ranker."""


class InvalidDecisionError(RankerError):
    """A decision whose winner is not one of its two items, or a self-pair."""


class SessionFormatError(RankerError):
    """A session file that cannot be turned into items and decisions."""


class ConfigError(RankerError):
    """A ranking config file with unknown keys or bad values."""
