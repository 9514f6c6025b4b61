"""
Module type registry.

Maps each module kind to the functions that declare its dependencies and
plan its build. The graph receives this mapping explicitly; nothing
registers itself globally.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from ..config.module_descriptor import ModuleDeclaration
from ..config.module_kinds import MODULE_KINDS, ModuleKindSpec
from .binary import check_wrapper, decorate_binary
from .capability import ResolvedDependency
from .context import BuildContext
from .dependency_collector import DependencyCollector
from .dependency_declarer import declare_dependencies
from .pipeline import CompilationPipeline, ModuleBuildResult
from .prebuilt import build_prebuilt

DeclareFn = Callable[[ModuleDeclaration, bool], List[str]]
BuildFn = Callable[[ModuleDeclaration, BuildContext, Sequence[ResolvedDependency]], ModuleBuildResult]


@dataclass(frozen=True)
class ModuleType:
    """A module kind together with its declaration and build functions."""

    spec: ModuleKindSpec
    declare: DeclareFn
    build: BuildFn


def declare_library(declaration: ModuleDeclaration, device: bool) -> List[str]:
    return declare_dependencies(declaration.descriptor, device, declaration.name)


def build_library(
    declaration: ModuleDeclaration,
    ctx: BuildContext,
    resolved: Sequence[ResolvedDependency]
) -> ModuleBuildResult:
    """Collect dependencies and run the compilation pipeline."""
    collector = DependencyCollector(declaration.descriptor, ctx.device, declaration.name)
    collected = collector.collect(resolved)
    return CompilationPipeline(ctx, declaration.descriptor).build(collected)


def build_binary(
    declaration: ModuleDeclaration,
    ctx: BuildContext,
    resolved: Sequence[ResolvedDependency]
) -> ModuleBuildResult:
    """Plan the library, then install its launcher."""
    wrapper = check_wrapper(ctx, declaration.wrapper)
    library = build_library(declaration, ctx, resolved)
    return decorate_binary(library, ctx, wrapper)


def declare_prebuilt(declaration: ModuleDeclaration, device: bool) -> List[str]:
    return []


def default_module_types() -> Dict[str, ModuleType]:
    """
    Create the standard module type mapping.

    Returns:
        Fresh dictionary of kind name to ModuleType
    """
    types = {}
    for kind, spec in MODULE_KINDS.items():
        if spec.prebuilt:
            types[kind] = ModuleType(spec, declare_prebuilt, build_prebuilt)
        elif spec.binary:
            types[kind] = ModuleType(spec, declare_library, build_binary)
        else:
            types[kind] = ModuleType(spec, declare_library, build_library)
    return types
