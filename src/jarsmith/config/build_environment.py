"""
Build environment settings.

Holds the output and install roots, the toolchain, and the environment
toggles that affect dex conversion. Toggles are read once when the
environment is created.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .toolchain import JavaToolchain

# Environment variables consulted by the dex stage
NO_OPTIMIZE_DX = "NO_OPTIMIZE_DX"
GENERATE_DEX_DEBUG = "GENERATE_DEX_DEBUG"


@dataclass(frozen=True)
class BuildEnvironment:
    """Global settings shared by every module in one build."""

    out_root: Path
    install_root: Path
    toolchain: JavaToolchain = field(default_factory=JavaToolchain)
    no_optimize_dx: bool = False
    generate_dex_debug: bool = False

    @classmethod
    def from_env(
        cls,
        out_root: Path,
        install_root: Optional[Path] = None,
        toolchain: Optional[JavaToolchain] = None,
        environ: Optional[Mapping[str, str]] = None
    ) -> "BuildEnvironment":
        """
        Create a build environment from process environment variables.

        A toggle is enabled when its variable is set to a non-empty value.

        Args:
            out_root: Root directory for intermediate outputs
            install_root: Root of the install tree (defaults to out_root/install)
            toolchain: Tool locations (defaults to JavaToolchain())
            environ: Variables to read (defaults to os.environ)

        Returns:
            BuildEnvironment instance
        """
        if environ is None:
            environ = os.environ
        out_root = Path(out_root)
        return cls(
            out_root=out_root,
            install_root=Path(install_root) if install_root else out_root / "install",
            toolchain=toolchain or JavaToolchain(),
            no_optimize_dx=bool(environ.get(NO_OPTIMIZE_DX, "")),
            generate_dex_debug=bool(environ.get(GENERATE_DEX_DEBUG, "")),
        )

    def module_out_dir(self, module_name: str, device: bool) -> Path:
        """Get the intermediate output directory for one module variant."""
        variant = "target" if device else "host"
        return self.out_root / variant / "common" / module_name

    def install_dir(self, category: str, device: bool) -> Path:
        """Get the install directory for an artifact category."""
        variant = "target" if device else "host"
        return self.install_root / variant / category
