"""
Error types.

The scoring core only knows two failure kinds:
- `InvalidInputError`: the payload did not narrow to `SwimInputs` (caller fixes and resends)
- `InternalFaultError`: something unexpected broke during scoring (reported generically)

`UpstreamError` covers the ingestion clients (Open-Meteo down or returning an odd shape).
"""

from __future__ import annotations


class SwimScoreError(Exception):
    """Base class for all SwimScore errors."""


class InvalidInputError(SwimScoreError, ValueError):
    """Raised when a request payload fails input validation."""


class InternalFaultError(SwimScoreError, RuntimeError):
    """Raised when scoring fails for a payload that passed validation."""


class UpstreamError(SwimScoreError):
    """Raised when an external weather service fails or returns an unexpected shape."""
