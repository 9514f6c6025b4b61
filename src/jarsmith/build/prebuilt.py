"""
Prebuilt Java modules.

A prebuilt module wraps exactly one existing jar. It has no compile stage:
the jar itself is the classpath entry, and its members are split into one
class JarSpec and one resource JarSpec for static dependents.
"""

import logging
from typing import Sequence

from ..config.module_descriptor import ModuleDeclaration
from ..errors import ConfigurationError, UnknownDependency
from .capability import ExportedCapability, ResolvedDependency
from .context import BuildContext
from .pipeline import INSTALL_CATEGORY, ModuleBuildResult, installed_jar_name
from .transforms import install_file, transform_prebuilt_jar_to_classes


def build_prebuilt(
    declaration: ModuleDeclaration,
    ctx: BuildContext,
    resolved: Sequence[ResolvedDependency] = ()
) -> ModuleBuildResult:
    """
    Plan a prebuilt jar module.

    Args:
        declaration: Module declaration; srcs must name exactly one jar
        ctx: Build context of the module variant
        resolved: Resolved dependencies; prebuilts declare none

    Returns:
        ModuleBuildResult whose classpath entry is the prebuilt jar

    Raises:
        ConfigurationError: If srcs does not hold exactly one path
        UnknownDependency: If the graph resolved any dependency
        StageFailure: If the jar is missing or unreadable
    """
    srcs = declaration.descriptor.srcs
    if len(srcs) != 1:
        raise ConfigurationError(
            f"expected exactly one jar in srcs, got {len(srcs)}", declaration.name
        )

    for dep in resolved:
        raise UnknownDependency(f"unknown dependency '{dep.name}'", declaration.name)

    prebuilt = ctx.module_path(srcs[0])
    stage, class_spec, resource_spec = transform_prebuilt_jar_to_classes(ctx, prebuilt)
    install_stage, install_path = install_file(
        ctx, INSTALL_CATEGORY, installed_jar_name(declaration.name), prebuilt
    )

    logging.info(f"Planned prebuilt {declaration.name}: {prebuilt}")
    return ModuleBuildResult(
        module=declaration.name,
        stages=(stage, install_stage),
        capability=ExportedCapability(
            classpath_entry=prebuilt,
            class_jar_specs=(class_spec,),
            resource_jar_specs=(resource_spec,),
        ),
        output_file=prebuilt,
        install_path=install_path,
    )
