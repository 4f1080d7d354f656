"""
Dependency-ordered composition of build steps.

Each step names the steps whose results it needs. The graph runs steps in
topological order and hands every step a view restricted to the results of
its declared dependencies, so a resource can only be declared once the
identifiers it references (ARNs, canonical user IDs, domain names) exist.
"""

import logging
from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Tuple

from .errors import CompositionError, UnresolvedReferenceError

logger = logging.getLogger(__name__)


class ResolvedRefs(Mapping):
    """Read-only view over the results a step is allowed to reference."""

    def __init__(self, step: str, results: Dict[str, Any], allowed: Tuple[str, ...]):
        self._step = step
        self._results = results
        self._allowed = allowed

    def __getitem__(self, name: str) -> Any:
        if name not in self._allowed or name not in self._results:
            raise UnresolvedReferenceError(self._step, name)
        return self._results[name]

    def __iter__(self):
        return iter(self._allowed)

    def __len__(self) -> int:
        return len(self._allowed)


@dataclass(frozen=True)
class BuildStep:
    name: str
    build: Callable[[ResolvedRefs], Any]
    requires: Tuple[str, ...] = field(default_factory=tuple)


class SiteGraph:
    """Registry of build steps with explicit dependency edges."""

    def __init__(self):
        self._steps: Dict[str, BuildStep] = {}

    def add_step(self, name: str, build: Callable[[ResolvedRefs], Any], requires=()) -> BuildStep:
        if name in self._steps:
            raise CompositionError(f"Step '{name}' is already registered")
        step = BuildStep(name=name, build=build, requires=tuple(requires))
        self._steps[name] = step
        return step

    @property
    def steps(self) -> List[str]:
        return list(self._steps)

    def dependencies_of(self, name: str) -> Tuple[str, ...]:
        return self._steps[name].requires

    def order(self) -> List[str]:
        """
        Returns the step names in dependency order.

        Among steps that are ready at the same time, registration order is
        kept so that repeated compositions are deterministic.

        Raises:
            CompositionError: on an unknown dependency or a cycle
        """
        for step in self._steps.values():
            for dependency in step.requires:
                if dependency not in self._steps:
                    raise CompositionError(
                        f"Step '{step.name}' depends on unknown step '{dependency}'"
                    )

        ordered: List[str] = []
        done = set()
        pending = list(self._steps)
        while pending:
            ready = [
                name for name in pending
                if all(dep in done for dep in self._steps[name].requires)
            ]
            if not ready:
                raise CompositionError(
                    f"Dependency cycle between steps: {', '.join(pending)}"
                )
            for name in ready:
                ordered.append(name)
                done.add(name)
                pending.remove(name)
        return ordered

    def build(self) -> Dict[str, Any]:
        """Runs every step once, in dependency order, and returns their results."""
        results: Dict[str, Any] = {}
        for name in self.order():
            step = self._steps[name]
            logger.debug("Building step %s (requires: %s)", name, ", ".join(step.requires) or "-")
            results[name] = step.build(ResolvedRefs(name, results, step.requires))
        return results
