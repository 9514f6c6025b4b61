"""Java Compilation Flag Builder.

This module builds the flag lists for the javac and dx stages.

Design:
    - Emits boot classpath and classpath flags only when there is something to pass
    - Appends dx flags driven by the build environment toggles
"""

import os
from pathlib import Path
from typing import List, Optional, Sequence

from ..config.build_environment import BuildEnvironment
from ..config.module_descriptor import ModuleDescriptor


class FlagBuilder:
    """Builds javac and dx flags for one module.

    This class handles:
    - Module javacflags and dxflags
    - -bootclasspath and -classpath from collected dependencies
    - --no-optimize and dex debug dump flags from environment toggles
    """

    def __init__(
        self,
        descriptor: ModuleDescriptor,
        environment: BuildEnvironment,
        out_dir: Path
    ):
        """Initialize flag builder.

        Args:
            descriptor: Module descriptor
            environment: Build environment with toggles
            out_dir: Module output directory (for dump files)
        """
        self.descriptor = descriptor
        self.environment = environment
        self.out_dir = out_dir

    @staticmethod
    def join(flags: Sequence[str]) -> str:
        """Join flags into the single flag string recorded on a stage."""
        return " ".join(flags)

    def build_javac_flags(
        self,
        boot_classpath: Optional[Path],
        classpath: Sequence[Path]
    ) -> List[str]:
        """Build javac flags.

        Args:
            boot_classpath: Boot library jar, if any
            classpath: Classpath jars in order

        Returns:
            Module javacflags followed by classpath flags
        """
        flags = list(self.descriptor.javacflags)

        if boot_classpath is not None:
            flags.extend(["-bootclasspath", str(boot_classpath)])

        if classpath:
            flags.extend(["-classpath", os.pathsep.join(str(p) for p in classpath)])

        return flags

    def build_dx_flags(self) -> List[str]:
        """Build dx flags.

        Returns:
            Module dxflags followed by flags enabled by environment toggles
        """
        flags = list(self.descriptor.dxflags)

        if self.environment.no_optimize_dx:
            flags.append("--no-optimize")

        if self.environment.generate_dex_debug:
            flags.extend([
                "--debug",
                "--verbose",
                f"--dump-to={self.out_dir / 'classes.lst'}",
                "--dump-width=1000",
            ])

        return flags
