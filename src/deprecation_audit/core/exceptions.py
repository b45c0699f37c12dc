"""Deprecation audit exceptions."""

from __future__ import annotations


class DeprecationAuditError(Exception):
    """Base class for run-level audit failures."""


class BundleCollectionError(DeprecationAuditError):
    """Raised when the bundle collection could not be obtained from its provider."""

    def __init__(self, message: str, provider: str | None = None):
        self.provider = provider
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.provider:
            msg += f" (provider: {self.provider})"
        return msg


class ArtifactLoadError(DeprecationAuditError):
    """Raised when an artifacts or bundles file cannot be read or validated."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.path:
            msg += f" (path: {self.path})"
        return msg
