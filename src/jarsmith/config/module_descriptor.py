"""
Module descriptors for Java modules.

A descriptor is the immutable, per-module view of the properties declared
in a module file. It is created once by the module file loader (or directly
in code) and never changes afterwards.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class ModuleDescriptor:
    """Properties shared by every compiled Java module kind.

    Example module file section:
        [java_library:framework-core]
        srcs = src/**/*.java
        resource_dirs = res
        java_libs = framework-annotations
        java_static_libs = guava
        manifest = MANIFEST.MF
        sdk_version = current
    """

    # Source patterns, relative to the module directory (globs allowed)
    srcs: Tuple[str, ...] = ()
    # Directories whose whole contents become jar resources
    resource_dirs: Tuple[str, ...] = ()
    # Don't build against the default boot library
    no_standard_libraries: bool = False
    javacflags: Tuple[str, ...] = ()
    dxflags: Tuple[str, ...] = ()
    # Libraries placed on the classpath only
    java_libs: Tuple[str, ...] = ()
    # Libraries placed on the classpath and merged into the output jar
    java_static_libs: Tuple[str, ...] = ()
    manifest: Optional[str] = None
    sdk_version: str = ""
    # Convert the merged jar to dex; set by the module kind, not by users
    dex: bool = False
    jarjar_rules: Optional[str] = None

    def __post_init__(self):
        # Accept any iterable for list-valued fields but store tuples
        for name in ("srcs", "resource_dirs", "javacflags", "dxflags",
                     "java_libs", "java_static_libs"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))


@dataclass(frozen=True)
class ModuleDeclaration:
    """A named module of a given kind, as declared in a module file."""

    kind: str
    name: str
    module_dir: Path
    descriptor: ModuleDescriptor = field(default_factory=ModuleDescriptor)
    # Launcher script for binary kinds, relative to module_dir
    wrapper: Optional[str] = None
