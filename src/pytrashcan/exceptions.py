"""Custom exception hierarchy for pytrashcan.

State transitions never raise: failures inside a dispatch are surfaced via
the owning domain's ``error`` field.  These exceptions are raised only at
the library seams (configuration, transition construction, persistence).
"""

from __future__ import annotations


class TrashcanError(Exception):
    """Base exception for all pytrashcan errors."""


class TrashcanConfigError(TrashcanError):
    """Invalid or missing configuration."""


class TrashcanDispatchError(TrashcanError):
    """Unknown domain or transition name."""

    def __init__(
        self,
        message: str,
        *,
        domain: str = "",
        action: str = "",
    ) -> None:
        self.domain = domain
        self.action = action
        super().__init__(message)


class TrashcanSnapshotError(TrashcanError):
    """A persisted snapshot could not be read or does not match the state shape."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)
