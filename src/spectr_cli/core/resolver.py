"""Deduplication and phase ordering of initializers contributed by providers.

Providers are written independently and may both ask for the same directory
or instruction file. The first initializer seen for an identity wins; later ones
are dropped, not merged. Survivors are then stably ordered so directories
exist before files are written into them.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..initializers.base import Initializer


@dataclass
class DuplicateInfo:
    """An initializer dropped because an earlier one had the same key."""
    key: str
    winner: Initializer
    dropped: List[Initializer] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.key}: kept first of {len(self.dropped) + 1} (first declared initializer wins)"


@dataclass
class ResolutionPlan:
    """Deduplicated, phase-ordered initializers ready for execution."""
    initializers: List[Initializer] = field(default_factory=list)
    duplicates: List[DuplicateInfo] = field(default_factory=list)

    def has_duplicates(self) -> bool:
        return bool(self.duplicates)

    def keys(self) -> List[Optional[str]]:
        return [initializer.key for initializer in self.initializers]

    def dropped_count(self) -> int:
        return sum(len(info.dropped) for info in self.duplicates)


def deduplicate(initializers: Iterable[Initializer]) -> ResolutionPlan:
    """Keep the first initializer per identity, preserving input order.

    Initializers without an identity are never treated as duplicates.
    """
    plan = ResolutionPlan()
    winners: Dict[Tuple[str, ...], Initializer] = {}
    conflicts: Dict[Tuple[str, ...], DuplicateInfo] = {}

    for initializer in initializers:
        identity = initializer.identity
        if identity is None:
            plan.initializers.append(initializer)
            continue

        if identity not in winners:
            winners[identity] = initializer
            plan.initializers.append(initializer)
            continue

        info = conflicts.get(identity)
        if info is None:
            info = DuplicateInfo(key=initializer.key, winner=winners[identity])
            conflicts[identity] = info
            plan.duplicates.append(info)
        info.dropped.append(initializer)

    return plan


def order_by_phase(initializers: Iterable[Initializer]) -> List[Initializer]:
    """Stable sort: directories, then files, then commands/skills."""
    return sorted(initializers, key=lambda initializer: initializer.phase)


def build_plan(initializers: Iterable[Initializer]) -> ResolutionPlan:
    plan = deduplicate(initializers)
    plan.initializers = order_by_phase(plan.initializers)
    return plan


def resolve(initializers: Iterable[Initializer]) -> List[Initializer]:
    """Deduplicate (first wins) and order ``initializers`` into phases."""
    return build_plan(initializers).initializers
