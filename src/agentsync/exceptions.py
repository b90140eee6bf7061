"""AgentSync exception hierarchy.

All public exceptions inherit from AgentSyncError, giving callers a single
base class to catch when they want to handle any AgentSync-specific failure
without swallowing unrelated errors. Filesystem failures are not wrapped:
they surface as the ``OSError`` raised by the failing call.
"""


class AgentSyncError(Exception):
    """Base exception for all AgentSync errors."""


class DriverError(AgentSyncError):
    """Raised when the driver registry is misused.

    Covers duplicate registrations and factories that do not produce
    an ``AgentDriver``.
    """


class UnknownDriverError(DriverError, KeyError):
    """Raised when a driver key is not present in the registry."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown agent driver: {self.key!r}"


class LockfileError(AgentSyncError):
    """Raised when an existing lockfile cannot be read.

    A missing lockfile is not an error. This covers invalid JSON and
    documents whose top level is not an object.
    """


class ResourceError(AgentSyncError):
    """Raised when a packaged resource is referenced but unusable.

    Covers resource paths that exist but are not regular files.
    """
