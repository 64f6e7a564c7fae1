"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from TwlintUserError.

Programming errors and bugs should NOT inherit from TwlintUserError;
they propagate with full tracebacks.
"""

from __future__ import annotations


class TwlintUserError(Exception):
    """
    Base class for all user-facing errors in twlint.

    These errors indicate problems that the user can fix:
    configuration issues, unreadable or unsupported files, etc.
    """
    pass


class ConfigError(TwlintUserError):
    """Invalid or unreadable configuration file."""
    pass


class UnsupportedFileError(TwlintUserError):
    """File extension without a known grammar."""
    pass


__all__ = ["TwlintUserError", "ConfigError", "UnsupportedFileError"]
