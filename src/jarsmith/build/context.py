"""
Per-module build context.

Carries everything a module needs to know about where it lives and where
its outputs go. One context belongs to exactly one module variant.
"""

from dataclasses import dataclass
from pathlib import Path

from ..config.build_environment import BuildEnvironment


@dataclass(frozen=True)
class BuildContext:
    """Location and environment of one module variant."""

    module_name: str
    module_dir: Path
    out_dir: Path
    device: bool
    environment: BuildEnvironment

    @classmethod
    def create(
        cls,
        module_name: str,
        module_dir: Path,
        environment: BuildEnvironment,
        device: bool
    ) -> "BuildContext":
        """Create a context with the environment's standard output directory."""
        return cls(
            module_name=module_name,
            module_dir=Path(module_dir),
            out_dir=environment.module_out_dir(module_name, device),
            device=device,
            environment=environment,
        )

    def module_path(self, relative: str) -> Path:
        """Resolve a path written relative to the module directory."""
        return self.module_dir / relative

    def install_dir(self, category: str) -> Path:
        return self.environment.install_dir(category, self.device)
