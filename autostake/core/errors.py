"""Base exception class for all autostake-specific errors."""


class AutostakeError(Exception):
    """Base class for all autostake errors.

    Whether a failed attempt is retried is decided by the runner's
    ``force_fail`` flag, never by the exception type.
    """
