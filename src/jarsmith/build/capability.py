"""
Exported capability of a built Java module.

Dependents only ever see a module through the IJavaDependency interface:
one classpath entry plus the JarSpecs that a static dependent merges.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Tuple

from .jar_spec import JarSpec


class IJavaDependency(ABC):
    """Interface for modules that other Java modules can depend on."""

    @abstractmethod
    def get_classpath_entry(self) -> Path:
        """Get the jar that dependents compile against."""
        pass

    @abstractmethod
    def get_class_jar_specs(self) -> List[JarSpec]:
        """Get the class JarSpecs that static dependents merge."""
        pass

    @abstractmethod
    def get_resource_jar_specs(self) -> List[JarSpec]:
        """Get the resource JarSpecs that static dependents merge."""
        pass


@dataclass(frozen=True)
class ExportedCapability(IJavaDependency):
    """Published, read-only result of planning one module."""

    classpath_entry: Path
    class_jar_specs: Tuple[JarSpec, ...] = ()
    resource_jar_specs: Tuple[JarSpec, ...] = ()

    def get_classpath_entry(self) -> Path:
        return self.classpath_entry

    def get_class_jar_specs(self) -> List[JarSpec]:
        return list(self.class_jar_specs)

    def get_resource_jar_specs(self) -> List[JarSpec]:
        return list(self.resource_jar_specs)


@dataclass(frozen=True)
class ResolvedDependency:
    """A dependency name paired with the module the graph resolved it to."""

    name: str
    module: Any
