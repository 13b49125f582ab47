"""Custom exception hierarchy for ocibucket.

All library-specific exceptions inherit from ``OciBucketError`` so consumers
can catch ``except OciBucketError`` to handle any ocibucket failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ocibucket.models import ErrorKind


class OciBucketError(Exception):
    """Base exception for all ocibucket errors."""


class ConfigError(OciBucketError):
    """Raised when a required setting (bucket name, namespace) is missing."""


class InteractiveModeRequiredError(OciBucketError):
    """Raised when interactive input is needed but disabled."""


class ObjectStoreError(OciBucketError):
    """Raised by ``Failure.raise_for_failure`` for callers preferring exceptions."""

    def __init__(self, kind: ErrorKind, reason: str, detail: str = "") -> None:
        """Store the error kind and raw diagnostic text."""
        self.kind = kind
        self.reason = reason
        self.detail = detail
        super().__init__(reason)
