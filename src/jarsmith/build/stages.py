"""
Pipeline stage descriptions.

A stage describes one transform for an external executor: what it reads,
what it writes, which flags it runs with and which dependency modules its
output depends on. Nothing here runs a tool.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple

from ..config.toolchain import JavaToolchain
from .jar_spec import JarSpec


class StageKind(Enum):
    """Transform kinds, named after the tool that performs them."""

    COMPILE = "javac"
    RESOURCES = "resources"
    MERGE = "jar"
    JARJAR = "jarjar"
    DEX = "dex"
    DEX_MERGE = "javalib"
    EXTRACT = "unzip"
    INSTALL = "install"


@dataclass(frozen=True)
class PipelineStage:
    """One transform in a module's linear stage chain."""

    kind: StageKind
    module: str
    inputs: Tuple[Path, ...]
    output: Path
    flags: str = ""
    # Dependency module names the output causally depends on
    depends_on: FrozenSet[str] = frozenset()
    # JarSpecs packed by jar-building stages, in merge order
    jar_specs: Tuple[JarSpec, ...] = ()
    # Files that must be ready first but are not passed on the command line
    implicit_inputs: Tuple[Path, ...] = ()
    # Toolchain tool name; None when the planner supplies file_contents
    tool: Optional[str] = None
    args: Tuple[str, ...] = ()
    file_contents: Optional[str] = None
    # Outputs besides the primary one
    implicit_outputs: Tuple[Path, ...] = ()
    # (path, contents) the executor writes once the tool has run
    written_files: Tuple[Tuple[Path, str], ...] = ()

    def command(self, toolchain: JavaToolchain) -> List[str]:
        """
        Render the command an executor would run.

        Returns:
            Argument list, or [] for stages whose output is written directly
            from file_contents
        """
        if self.tool is None:
            return []
        return [toolchain.get_all_tools()[self.tool], *self.args]

    def to_dict(self, toolchain: JavaToolchain) -> dict:
        """Serialize the stage for JSON output."""
        return {
            "kind": self.kind.value,
            "module": self.module,
            "inputs": [str(p) for p in self.inputs],
            "implicit_inputs": [str(p) for p in self.implicit_inputs],
            "output": str(self.output),
            "implicit_outputs": [str(p) for p in self.implicit_outputs],
            "written_files": {str(path): contents for path, contents in self.written_files},
            "file_contents": self.file_contents,
            "flags": self.flags,
            "depends_on": sorted(self.depends_on),
            "jar_specs": [spec.name for spec in self.jar_specs],
            "command": self.command(toolchain),
        }
