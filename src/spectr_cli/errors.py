"""Exception types raised by spectr-cli."""

from typing import Optional


class SpectrError(Exception):
    """Base class for all spectr-cli errors."""


class MarkerError(SpectrError):
    """A managed file contains marker sentinels that cannot be reconciled.

    These are never auto-repaired: the user has to fix the file by hand.
    """

    reason = "invalid marker state"

    def __init__(self, path: Optional[str] = None, detail: Optional[str] = None):
        self.path = path
        self.detail = detail
        message = self.reason
        if path:
            message = f"{message} in {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class OrphanedEndMarkerError(MarkerError):
    reason = "orphaned end marker"


class NestedStartMarkerError(MarkerError):
    reason = "nested start marker"


class MultipleStartMarkersError(MarkerError):
    reason = "multiple start markers"


class RenderError(SpectrError):
    """A template could not be rendered."""

    def __init__(self, template: str, message: str):
        self.template = template
        super().__init__(f"failed to render template {template}: {message}")


class PathEscapeError(SpectrError, ValueError):
    """A relative artifact path resolves outside of its filesystem root."""

    def __init__(self, path: str, root: Optional[str] = None):
        self.path = path
        self.root = root
        where = f" (root: {root})" if root else ""
        super().__init__(f"path escapes filesystem root: {path}{where}")


class ConfigError(SpectrError):
    """Invalid spectr configuration."""


class UnknownProviderError(SpectrError, KeyError):
    """Raised when a provider id is not registered."""

    def __init__(self, provider_id: str):
        self.provider_id = provider_id
        super().__init__(f"unknown provider: {provider_id}")

    def __str__(self) -> str:
        return self.args[0]


class InitializationError(SpectrError):
    """Wraps the failure of a single initializer during execution."""

    def __init__(self, key: Optional[str], kind: str, path: str, cause: BaseException):
        self.key = key
        self.kind = kind
        self.path = path
        self.cause = cause
        self.__cause__ = cause
        super().__init__(f"{kind} initializer failed for {path}: {cause}")


class InitializationCancelled(SpectrError):
    """Execution was cancelled between two initializers."""
