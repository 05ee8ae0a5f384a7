"""Base interface for initializers."""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import List, Optional, Tuple

from ..config import InitConfig
from ..core.filesystem import Filesystem, Scope, normalize_path
from ..models.results import InitResult
from ..templates import TemplateManager


class Phase(IntEnum):
    """Execution phase; lower phases run first."""
    DIRECTORIES = 0
    FILES = 1
    COMMANDS = 2


class Initializer(ABC):
    """A single idempotent unit of scaffolding work targeting one artifact.

    Subclasses set ``kind`` and ``phase`` and implement ``init`` and
    ``is_setup``. Two initializers with the same ``identity`` are assumed to do
    the same work, so only the first one runs.
    """

    kind = "initializer"
    phase = Phase.FILES

    def __init__(self, path: str, scope: Scope = Scope.PROJECT):
        self.path = normalize_path(path)
        self.scope = scope

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r}, scope={self.scope.value})"

    @property
    def identity(self) -> Optional[Tuple[str, ...]]:
        """Deduplication identity: kind, scope, path, then discriminators.

        Initializers with an identity of None are never deduplicated.
        """
        return (self.kind, self.scope.value, self.path, *self.key_discriminators())

    @property
    def key(self) -> str:
        """Display form of the identity: ``<kind>:<path>[:<discriminator>][@home]``."""
        key = ":".join([self.kind, self.path, *self.key_discriminators()])
        if self.scope is Scope.HOME:
            key = f"{key}@{Scope.HOME.value}"
        return key

    def key_discriminators(self) -> List[str]:
        """Extra key segments for kinds that vary by more than the path."""
        return []

    def filesystem(self, project_fs: Filesystem, home_fs: Filesystem) -> Filesystem:
        """Pick the filesystem matching this initializer's scope."""
        return home_fs if self.scope is Scope.HOME else project_fs

    @abstractmethod
    def init(self, project_fs: Filesystem, home_fs: Filesystem, config: InitConfig,
             templates: TemplateManager) -> InitResult:
        """Create or update the artifact. Must be safe to run repeatedly."""
        pass

    @abstractmethod
    def is_setup(self, project_fs: Filesystem, home_fs: Filesystem, config: InitConfig) -> bool:
        """Cheap check whether the artifact is already in place."""
        pass
