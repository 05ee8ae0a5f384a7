"""Result models reported by initializers and the executor."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class InitResult:
    """Files created or updated by one or more initializers."""
    created_files: List[str] = field(default_factory=list)
    updated_files: List[str] = field(default_factory=list)

    @classmethod
    def created(cls, *paths: str) -> "InitResult":
        return cls(created_files=list(paths))

    @classmethod
    def updated(cls, *paths: str) -> "InitResult":
        return cls(updated_files=list(paths))

    @property
    def is_empty(self) -> bool:
        """True when nothing observable changed."""
        return not self.created_files and not self.updated_files

    def merge(self, other: "InitResult") -> "InitResult":
        """Return a new result with ``other`` appended after this one."""
        return InitResult(
            created_files=self.created_files + other.created_files,
            updated_files=self.updated_files + other.updated_files,
        )

    def extend(self, other: "InitResult") -> None:
        """Append ``other`` in place."""
        self.created_files.extend(other.created_files)
        self.updated_files.extend(other.updated_files)


@dataclass
class ExecutionResult:
    """Aggregated outcome of running an initializer plan."""
    result: InitResult = field(default_factory=InitResult)
    executed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    duplicates: List[str] = field(default_factory=list)
    error: Optional[Exception] = None
    failed_key: Optional[str] = None

    @property
    def created_files(self) -> List[str]:
        return self.result.created_files

    @property
    def updated_files(self) -> List[str]:
        return self.result.updated_files

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def record_failure(self, key: Optional[str], error: Exception) -> None:
        self.error = error
        self.failed_key = key

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the execution."""
        return {
            "created": len(self.created_files),
            "updated": len(self.updated_files),
            "executed": len(self.executed),
            "skipped": len(self.skipped),
            "duplicates": len(self.duplicates),
            "succeeded": self.succeeded,
            "failed_key": self.failed_key,
        }
