"""
In-process module graph.

A minimal stand-in for an external build graph engine: it resolves the
names each module declares against the modules of one declaration set,
plans dependencies before their dependents and hands each module its
resolved dependencies. It never runs or orders stages beyond that.

Failures stay with the module that raised them. A module whose dependency
failed is reported as failed without being planned; unrelated modules are
still planned.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from .build.capability import ResolvedDependency
from .build.context import BuildContext
from .build.module_types import ModuleType, default_module_types
from .build.pipeline import ModuleBuildResult
from .config.build_environment import BuildEnvironment
from .config.module_descriptor import ModuleDeclaration
from .errors import ConfigurationError, GraphResolutionError, JavaBuildError


@dataclass
class GraphResult:
    """Outcome of planning a set of modules."""

    results: Dict[str, ModuleBuildResult] = field(default_factory=dict)
    failures: Dict[str, JavaBuildError] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.failures


class BuildGraph:
    """
    Plans every module of a declaration set for one variant.

    Example usage:
        graph = BuildGraph(config.get_declarations(), environment, device=True)
        result = graph.plan()
        for name, module in result.results.items():
            print(name, module.output_file)
    """

    def __init__(
        self,
        declarations: Iterable[ModuleDeclaration],
        environment: BuildEnvironment,
        device: bool = True,
        module_types: Optional[Mapping[str, ModuleType]] = None
    ):
        """
        Initialize build graph.

        Args:
            declarations: All module declarations
            environment: Build environment
            device: Plan the device variant (True) or host variant (False)
            module_types: Kind to ModuleType mapping (defaults to the standard kinds)

        Raises:
            ConfigurationError: On unknown kinds or duplicate module names
        """
        self.environment = environment
        self.device = device
        self.module_types = dict(module_types) if module_types is not None else default_module_types()
        self.modules: Dict[str, ModuleDeclaration] = {}

        for declaration in declarations:
            module_type = self.module_types.get(declaration.kind)
            if module_type is None:
                raise ConfigurationError(
                    f"unknown module kind '{declaration.kind}'", declaration.name
                )
            if declaration.name in self.modules:
                raise ConfigurationError("module declared more than once", declaration.name)
            # Kinds that don't build for this variant are left out of the graph
            if module_type.spec.supports(device):
                self.modules[declaration.name] = declaration

    def declare(self, name: str) -> List[str]:
        """
        Run the declaration pass of one module.

        Returns:
            Dependency names with duplicates removed, in declared order
        """
        declaration = self.modules[name]
        names = self.module_types[declaration.kind].declare(declaration, self.device)
        return list(dict.fromkeys(names))

    def plan(self, names: Optional[Sequence[str]] = None) -> GraphResult:
        """
        Plan modules and everything they depend on.

        Args:
            names: Modules to plan (defaults to all)

        Returns:
            GraphResult with one entry per module in either results or failures
        """
        result = GraphResult()
        for name in names if names is not None else list(self.modules):
            if name not in self.modules:
                result.failures[name] = GraphResolutionError(
                    "no such module for this variant", name
                )
                continue
            self._plan_module(name, result, [])
        return result

    def _plan_module(self, name: str, result: GraphResult, stack: List[str]) -> bool:
        if name in result.results:
            return True
        if name in result.failures:
            return False

        stack = stack + [name]
        declaration = self.modules[name]

        try:
            dep_names = self.declare(name)
        except JavaBuildError as e:
            return self._fail(name, e, result)

        resolved = []
        for dep in dep_names:
            if dep not in self.modules:
                return self._fail(
                    name, GraphResolutionError(f"depends on undefined module '{dep}'", name), result
                )
            if dep in stack:
                cycle = " -> ".join(stack[stack.index(dep):] + [dep])
                return self._fail(
                    name, GraphResolutionError(f"dependency cycle: {cycle}", name), result
                )
            if not self._plan_module(dep, result, stack):
                return self._fail(
                    name, GraphResolutionError(f"dependency '{dep}' failed", name), result
                )
            resolved.append(ResolvedDependency(dep, result.results[dep].capability))

        ctx = BuildContext.create(name, declaration.module_dir, self.environment, self.device)
        try:
            result.results[name] = self.module_types[declaration.kind].build(
                declaration, ctx, resolved
            )
        except JavaBuildError as e:
            return self._fail(name, e, result)
        return True

    @staticmethod
    def _fail(name: str, error: JavaBuildError, result: GraphResult) -> bool:
        logging.error(f"Module {name} failed: {error}")
        result.failures[name] = error
        return False
