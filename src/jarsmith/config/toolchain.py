"""
Java toolchain tool locations.

The planner never runs these tools; it only names them in the commands it
describes for an executor.
"""

from dataclasses import dataclass, fields
from typing import Dict, Mapping


@dataclass(frozen=True)
class JavaToolchain:
    """Executables used by the transform stages."""

    javac: str = "javac"
    jar: str = "soong_jar"
    jarjar: str = "jarjar"
    dx: str = "dx"
    unzip: str = "unzip"
    install: str = "cp"

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "JavaToolchain":
        """
        Create a toolchain, overriding defaults from a mapping.

        Unknown keys are ignored so a [toolchain] section may carry
        unrelated settings.

        Args:
            values: Tool name to executable path

        Returns:
            JavaToolchain instance
        """
        known = {f.name for f in fields(cls)}
        overrides = {k: v for k, v in values.items() if k in known and v}
        return cls(**overrides)

    def get_all_tools(self) -> Dict[str, str]:
        """Get all tool paths keyed by tool name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
