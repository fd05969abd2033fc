"""
Exceptions raised by the Rang engine.

- IllegalActionError: an action broke the rules (wrong turn, bad bid, revoke...).
  The game state is left untouched.
- InvariantError: the engine reached a state that should be impossible.
- ConfigError: invalid configuration values.
"""
from __future__ import annotations


class RangError(Exception):
    """Base class for all engine errors."""


class IllegalActionError(RangError, ValueError):
    """A submitted bid, trump choice or card play was rejected."""


class InvariantError(RangError, RuntimeError):
    """Internal consistency check failed (programming error upstream)."""


class ConfigError(RangError, ValueError):
    """Configuration could not be loaded or is out of range."""


__all__ = ["RangError", "IllegalActionError", "InvariantError", "ConfigError"]
