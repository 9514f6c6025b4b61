"""
Java binary modules.

A binary is a library plus a launcher script. The launcher is installed
after the library and lists the installed jar as an implicit input, so it
is never considered ready before the jar it runs has been installed.
"""

import dataclasses
from pathlib import Path
from typing import Optional

from ..errors import ConfigurationError, StageFailure
from .context import BuildContext
from .pipeline import ModuleBuildResult
from .stages import StageKind
from .transforms import install_file

LAUNCHER_CATEGORY = "bin"


def check_wrapper(ctx: BuildContext, wrapper: Optional[str]) -> Path:
    """
    Resolve a binary's launcher script.

    Raises:
        ConfigurationError: If no wrapper is declared
        StageFailure: If the wrapper file does not exist
    """
    if not wrapper:
        raise ConfigurationError("binary modules require a wrapper script", ctx.module_name)
    path = ctx.module_path(wrapper)
    if not path.is_file():
        raise StageFailure(
            StageKind.INSTALL.value, f"Wrapper script not found: {path}", ctx.module_name
        )
    return path


def decorate_binary(
    library: ModuleBuildResult,
    ctx: BuildContext,
    wrapper: Path
) -> ModuleBuildResult:
    """
    Add the launcher install to a planned library.

    Args:
        library: Completed library plan
        ctx: Build context of the module variant
        wrapper: Launcher script path

    Returns:
        The library result with one more install stage and launcher_path set
    """
    stage, launcher_path = install_file(
        ctx,
        LAUNCHER_CATEGORY,
        wrapper.name,
        wrapper,
        implicit_inputs=(library.install_path,),
    )
    return dataclasses.replace(
        library,
        stages=library.stages + (stage,),
        launcher_path=launcher_path,
    )
