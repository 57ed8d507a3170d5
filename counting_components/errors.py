"""
Exception hierarchy for counting_components.

Input errors (InvalidEncoding, OutOfRangeStrand) are raised at the call
that received the bad value. InconsistentTransition marks a broken
invariant inside the tracer and is never recovered from.
"""

from typing import Any, Optional


class CountingComponentsError(Exception):
    """Base class for every error raised by this package."""


class InvalidEncoding(CountingComponentsError, ValueError):
    """Malformed permutation, flip set or strand."""


class OutOfRangeStrand(CountingComponentsError, IndexError):
    """A strand or address that does not exist for the current (m, n, k)."""

    def __init__(self, message: str, strand: Optional[Any] = None):
        super().__init__(message)
        self.strand = strand


class InconsistentTransition(CountingComponentsError, RuntimeError):
    """A traced cycle failed to close on its starting strand."""

    def __init__(self, message: str, start: Optional[Any] = None, at: Optional[Any] = None):
        super().__init__(message)
        self.start = start
        self.at = at
