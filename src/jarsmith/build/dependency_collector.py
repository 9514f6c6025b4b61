"""
Dependency collection.

Runs after the graph has resolved and built every declared dependency.
Each resolved dependency is classified exactly once, by name, as the boot
library, a classpath-only library or a static library, and its exported
capability is folded into the classpath and the merge set.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from ..config.module_descriptor import ModuleDescriptor
from ..errors import CapabilityMismatch, UnknownDependency
from .boot_classpath import boot_library_name
from .capability import IJavaDependency, ResolvedDependency
from .dependency_declarer import check_disjoint
from .jar_spec import JarSpec


class DependencyKind(Enum):
    """How a resolved dependency contributes to a module."""

    BOOT = "boot"
    LIBRARY = "library"  # classpath only
    STATIC = "static"  # classpath and merged into the output jar


@dataclass(frozen=True)
class ClassifiedDependency:
    """A resolved dependency tagged with its kind."""

    name: str
    kind: DependencyKind
    capability: IJavaDependency


@dataclass
class CollectedDependencies:
    """Result of dependency collection for one module."""

    classpath: List[Path] = field(default_factory=list)
    boot_classpath: Optional[Path] = None
    class_jar_specs: List[JarSpec] = field(default_factory=list)
    resource_jar_specs: List[JarSpec] = field(default_factory=list)
    # Names of every classified dependency, in classpath order
    names: List[str] = field(default_factory=list)
    static_names: List[str] = field(default_factory=list)


class DependencyCollector:
    """
    Classifies resolved dependencies and accumulates their artifacts.

    Example usage:
        collector = DependencyCollector(descriptor, target_is_device=True, module="app")
        collected = collector.collect(resolved)
        print(collected.classpath, collected.boot_classpath)
    """

    def __init__(self, descriptor: ModuleDescriptor, target_is_device: bool, module: str = ""):
        """
        Initialize dependency collector.

        Args:
            descriptor: Descriptor of the module being built
            target_is_device: True for the device variant
            module: Module name, for error messages
        """
        self.descriptor = descriptor
        self.target_is_device = target_is_device
        self.module = module
        self.boot_name = boot_library_name(descriptor, target_is_device)

    def classify(self, name: str) -> Optional[DependencyKind]:
        """
        Classify a dependency name.

        Returns:
            DependencyKind, or None if this module never declared the name
        """
        if self.boot_name and name == self.boot_name:
            return DependencyKind.BOOT
        if name in self.descriptor.java_libs:
            return DependencyKind.LIBRARY
        if name in self.descriptor.java_static_libs:
            return DependencyKind.STATIC
        return None

    def collect(self, resolved: Sequence[ResolvedDependency]) -> CollectedDependencies:
        """
        Collect classpath and merge set from resolved dependencies.

        The classpath is ordered boot, java_libs, java_static_libs (each in
        declared order) regardless of the order the graph visits them in;
        repeated jars keep their first position.

        Args:
            resolved: Dependencies as resolved by the graph

        Returns:
            CollectedDependencies

        Raises:
            AmbiguousDependency: If the declared name lists overlap
            UnknownDependency: If a dependency was never declared, or the
                boot library is seen twice
            CapabilityMismatch: If a dependency does not export jars
        """
        check_disjoint(self.descriptor, self.target_is_device, self.module)

        boot: Optional[ClassifiedDependency] = None
        libraries: Dict[str, ClassifiedDependency] = {}
        statics: Dict[str, ClassifiedDependency] = {}

        for dep in resolved:
            kind = self.classify(dep.name)
            if kind is None:
                raise UnknownDependency(f"unknown dependency '{dep.name}'", self.module)

            if not isinstance(dep.module, IJavaDependency):
                raise CapabilityMismatch(
                    f"dependency '{dep.name}' is not a Java library "
                    f"(got {type(dep.module).__name__})",
                    self.module,
                )

            classified = ClassifiedDependency(dep.name, kind, dep.module)
            if kind is DependencyKind.BOOT:
                if boot is not None:
                    raise UnknownDependency(
                        f"boot library '{dep.name}' resolved more than once", self.module
                    )
                boot = classified
            elif kind is DependencyKind.LIBRARY:
                libraries.setdefault(dep.name, classified)
            else:
                statics.setdefault(dep.name, classified)

        collected = CollectedDependencies()

        if boot is not None:
            collected.boot_classpath = boot.capability.get_classpath_entry()
            self._add_classpath(collected, boot)

        for name in _unique(self.descriptor.java_libs):
            if name in libraries:
                self._add_classpath(collected, libraries[name])

        for name in _unique(self.descriptor.java_static_libs):
            if name in statics:
                dep = statics[name]
                self._add_classpath(collected, dep)
                collected.static_names.append(name)
                collected.class_jar_specs.extend(dep.capability.get_class_jar_specs())
                collected.resource_jar_specs.extend(dep.capability.get_resource_jar_specs())

        logging.debug(
            f"Collected {len(collected.classpath)} classpath entries and "
            f"{len(collected.class_jar_specs)} class jar specs for {self.module or '<module>'}"
        )
        return collected

    @staticmethod
    def _add_classpath(collected: CollectedDependencies, dep: ClassifiedDependency) -> None:
        collected.names.append(dep.name)
        entry = dep.capability.get_classpath_entry()
        if entry not in collected.classpath:
            collected.classpath.append(entry)


def _unique(names: Sequence[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(names))
