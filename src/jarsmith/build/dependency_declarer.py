"""
Dependency declaration.

Runs before the graph resolves anything: lists the names this module needs
built first.
"""

import logging
from typing import List

from ..config.module_descriptor import ModuleDescriptor
from ..errors import AmbiguousDependency
from .boot_classpath import boot_library_name


def check_disjoint(descriptor: ModuleDescriptor, target_is_device: bool, module: str = "") -> None:
    """
    Check that no dependency name is declared under two kinds.

    The active boot library counts as a kind of its own.

    Raises:
        AmbiguousDependency: If a name is both a library and a static library,
            or repeats the boot library name
    """
    libs = set(descriptor.java_libs)
    static_libs = set(descriptor.java_static_libs)

    both = sorted(libs & static_libs)
    if both:
        raise AmbiguousDependency(
            f"dependencies listed in both java_libs and java_static_libs: {', '.join(both)}",
            module,
        )

    boot = boot_library_name(descriptor, target_is_device)
    if boot and (boot in libs or boot in static_libs):
        raise AmbiguousDependency(
            f"boot library '{boot}' must not also be listed in java_libs or "
            f"java_static_libs (set no_standard_libraries to manage it explicitly)",
            module,
        )


def declare_dependencies(
    descriptor: ModuleDescriptor,
    target_is_device: bool,
    module: str = ""
) -> List[str]:
    """
    List the dependency names a module needs resolved.

    Order: boot library (unless suppressed), then java_libs, then
    java_static_libs, each in declared order. Duplicates within one list are
    passed through; the graph deduplicates.

    Args:
        descriptor: Module descriptor
        target_is_device: True for the device variant
        module: Module name, for error messages

    Returns:
        Ordered list of dependency names

    Raises:
        AmbiguousDependency: If the name lists overlap
    """
    check_disjoint(descriptor, target_is_device, module)

    deps: List[str] = []
    boot = boot_library_name(descriptor, target_is_device)
    if boot:
        deps.append(boot)
    deps.extend(descriptor.java_libs)
    deps.extend(descriptor.java_static_libs)

    logging.debug(f"Declared dependencies for {module or '<module>'}: {deps}")
    return deps
