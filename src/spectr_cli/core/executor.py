"""Execution driver: collects provider initializers and runs them in order."""

import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..config import InitConfig
from ..errors import InitializationCancelled, InitializationError
from ..initializers import DirectoryInitializer, GeneratedFileInitializer, Initializer
from ..models.results import ExecutionResult
from ..providers import ProviderRegistry, build_default_registry
from ..templates import AGENTS, PROJECT, TemplateManager
from ..utils.logger import get_logger
from .filesystem import Filesystem, Scope
from .resolver import ResolutionPlan, build_plan

logger = get_logger(__name__)


def base_initializers(config: InitConfig) -> List[Initializer]:
    """The spectr directory layout every project gets."""
    return [
        DirectoryInitializer(config.spectr_dir),
        DirectoryInitializer(config.specs_dir),
        DirectoryInitializer(config.changes_dir),
        GeneratedFileInitializer(config.project_file, PROJECT),
        GeneratedFileInitializer(config.agents_file, AGENTS),
    ]


class InitExecutor:
    """Runs initializers against a project root and a home root.

    Execution is sequential. The first failing initializer stops the run;
    files already written stay reported in the returned result.
    """

    def __init__(self, project_root: Union[str, Path], home_root: Optional[Union[str, Path]] = None,
                 config: Optional[InitConfig] = None, templates: Optional[TemplateManager] = None,
                 registry: Optional[ProviderRegistry] = None):
        self.project_fs = Filesystem(project_root, Scope.PROJECT)
        self.home_fs = Filesystem(home_root if home_root is not None else Path.home(), Scope.HOME)
        self.config = config or InitConfig(project_root=self.project_fs.root)
        self.config.validate()
        self.templates = templates or TemplateManager()
        self.registry = registry or build_default_registry()

    def collect(self, provider_ids: Iterable[str], include_base: bool = True) -> List[Initializer]:
        """Concatenate initializers of the selected providers, in order.

        Raises:
            UnknownProviderError: If a provider id is not registered.
        """
        initializers: List[Initializer] = base_initializers(self.config) if include_base else []
        for provider_id in provider_ids:
            initializers.extend(self.registry.get(provider_id).initializers())
        return initializers

    def plan(self, provider_ids: Iterable[str], include_base: bool = True) -> ResolutionPlan:
        return build_plan(self.collect(provider_ids, include_base))

    def run(self, initializers: Iterable[Initializer], cancel: Optional[threading.Event] = None) -> ExecutionResult:
        """Resolve and run ``initializers``.

        Args:
            initializers: Raw initializers, possibly with duplicates.
            cancel: Checked before each initializer starts.
        Returns:
            ExecutionResult; ``error`` is set if the run stopped early.
        """
        plan = build_plan(initializers)
        return self.run_plan(plan, cancel)

    def run_plan(self, plan: ResolutionPlan, cancel: Optional[threading.Event] = None) -> ExecutionResult:
        execution = ExecutionResult()
        for info in plan.duplicates:
            execution.duplicates.append(info.key)
            logger.debug(f"Dropped {len(info.dropped)} duplicate(s) of {info.key}")

        for index, initializer in enumerate(plan.initializers):
            key = initializer.key
            if cancel is not None and cancel.is_set():
                execution.skipped.extend(i.key for i in plan.initializers[index:])
                execution.record_failure(key, InitializationCancelled("initialization cancelled"))
                logger.warning(f"Initialization cancelled before {key}")
                break

            logger.debug(f"Running {key}")
            try:
                result = initializer.init(self.project_fs, self.home_fs, self.config, self.templates)
            except Exception as e:
                error = InitializationError(key, initializer.kind, initializer.path, e)
                execution.record_failure(key, error)
                execution.skipped.extend(i.key for i in plan.initializers[index + 1:])
                logger.error(str(error))
                break

            execution.result.extend(result)
            execution.executed.append(key)

        return execution

    def execute(self, provider_ids: Iterable[str], cancel: Optional[threading.Event] = None,
                include_base: bool = True) -> ExecutionResult:
        """Collect, resolve and run the initializers of ``provider_ids``."""
        return self.run(self.collect(provider_ids, include_base), cancel)

    def status(self, provider_ids: Optional[Iterable[str]] = None) -> Dict[str, bool]:
        """Report, per provider, whether all its artifacts are in place."""
        ids = list(provider_ids) if provider_ids is not None else self.registry.ids()
        report = {}
        for provider_id in ids:
            provider = self.registry.get(provider_id)
            report[provider.id] = all(
                initializer.is_setup(self.project_fs, self.home_fs, self.config)
                for initializer in provider.initializers()
            )
        return report
