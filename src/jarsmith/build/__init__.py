"""
Build planning components for Jarsmith.

This package provides:
- Boot classpath policy and dependency declaration
- Dependency collection and classification
- JarSpec model and merge ordering
- Stage descriptions and the compilation pipeline
- Prebuilt and binary module kinds
"""

from .boot_classpath import boot_library_name, resolve_boot_classpath
from .capability import ExportedCapability, IJavaDependency, ResolvedDependency
from .context import BuildContext
from .dependency_collector import (
    CollectedDependencies,
    DependencyCollector,
    DependencyKind,
)
from .dependency_declarer import check_disjoint, declare_dependencies
from .flag_builder import FlagBuilder
from .jar_spec import JarSpec, concat_jar_specs, merge_jar_specs
from .module_types import ModuleType, default_module_types
from .pipeline import CompilationPipeline, ModuleBuildResult
from .prebuilt import build_prebuilt
from .source_scanner import SourceScanError, SourceScanner
from .stages import PipelineStage, StageKind

__all__ = [
    'BuildContext',
    'CollectedDependencies',
    'CompilationPipeline',
    'DependencyCollector',
    'DependencyKind',
    'ExportedCapability',
    'FlagBuilder',
    'IJavaDependency',
    'JarSpec',
    'ModuleBuildResult',
    'ModuleType',
    'PipelineStage',
    'ResolvedDependency',
    'SourceScanError',
    'SourceScanner',
    'StageKind',
    'boot_library_name',
    'build_prebuilt',
    'check_disjoint',
    'concat_jar_specs',
    'declare_dependencies',
    'default_module_types',
    'merge_jar_specs',
    'resolve_boot_classpath',
]
