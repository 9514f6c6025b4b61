"""
Module kind specifications.

This module centralizes the static facts about each module kind a module
file may declare: which variants it builds for, whether it converts its
output to dex, and which extra properties it carries.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

DEVICE = "device"
HOST = "host"


@dataclass(frozen=True)
class ModuleKindSpec:
    """Static properties of one module kind."""

    kind: str
    variants: Tuple[str, ...]
    dex: bool = False
    binary: bool = False  # Requires a launcher wrapper script
    prebuilt: bool = False  # srcs holds one jar instead of sources

    def supports(self, device: bool) -> bool:
        """Check whether the kind builds for the device or host variant."""
        return (DEVICE if device else HOST) in self.variants


MODULE_KINDS = {
    "java_library": ModuleKindSpec(
        kind="java_library",
        variants=(DEVICE, HOST),
        dex=True,
    ),
    "java_library_host": ModuleKindSpec(
        kind="java_library_host",
        variants=(HOST,),
    ),
    "java_binary": ModuleKindSpec(
        kind="java_binary",
        variants=(DEVICE, HOST),
        dex=True,
        binary=True,
    ),
    "java_binary_host": ModuleKindSpec(
        kind="java_binary_host",
        variants=(HOST,),
        binary=True,
    ),
    "java_prebuilt": ModuleKindSpec(
        kind="java_prebuilt",
        variants=(DEVICE, HOST),
        prebuilt=True,
    ),
}


def get_kind_spec(kind: str) -> Optional[ModuleKindSpec]:
    """
    Get the specification of a module kind.

    Args:
        kind: Module kind name (e.g., 'java_library')

    Returns:
        ModuleKindSpec if known, None otherwise
    """
    return MODULE_KINDS.get(kind)
