"""
Compilation pipeline for Java library modules.

This module assembles the linear chain of stages that turns a module's
sources into an installable jar:

1. Compile sources to classes (skipped when there are no sources)
2. Package each resource directory
3. Merge own classes, static library classes and all resources into
   classes-full-debug.jar, embedding the manifest if any
4. Rename classes with jarjar (only with jarjar_rules)
5. Convert to dex and pack dex + resources into javalib.jar (only with dex)
6. Install the final jar as framework/<name>.jar

The capability dependents see is only built after every stage has been
described. A failure at any step raises, so nothing is published.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from ..config.module_descriptor import ModuleDescriptor
from ..errors import StageFailure
from .capability import ExportedCapability
from .context import BuildContext
from .dependency_collector import CollectedDependencies
from .flag_builder import FlagBuilder
from .jar_spec import JarSpec
from .source_scanner import SourceScanError, SourceScanner
from .stages import PipelineStage, StageKind
from .transforms import (
    install_file,
    resource_dirs_to_jar_specs,
    transform_classes_jar_to_dex,
    transform_classes_to_jar,
    transform_dex_to_java_lib,
    transform_java_to_classes,
    transform_jarjar,
)

INSTALL_CATEGORY = "framework"
JAR_EXTENSION = "jar"


@dataclass(frozen=True)
class ModuleBuildResult:
    """Result of planning one module."""

    module: str
    stages: Tuple[PipelineStage, ...]
    capability: ExportedCapability
    # Final artifact produced by the last build stage
    output_file: Path
    install_path: Path
    launcher_path: Optional[Path] = None

    def stage_kinds(self) -> List[StageKind]:
        """Get the kinds of the emitted stages, in order."""
        return [stage.kind for stage in self.stages]

    def get_stage(self, kind: StageKind) -> Optional[PipelineStage]:
        """Get the first stage of a kind, or None if it was elided."""
        for stage in self.stages:
            if stage.kind is kind:
                return stage
        return None


def installed_jar_name(module_name: str) -> str:
    return f"{module_name}.{JAR_EXTENSION}"


class CompilationPipeline:
    """
    Builds the stage chain of a Java library module.

    Example usage:
        pipeline = CompilationPipeline(ctx, descriptor)
        result = pipeline.build(collected)
        for stage in result.stages:
            print(stage.command(ctx.environment.toolchain))
    """

    def __init__(self, ctx: BuildContext, descriptor: ModuleDescriptor):
        """
        Initialize compilation pipeline.

        Args:
            ctx: Build context of the module variant
            descriptor: Module descriptor
        """
        self.ctx = ctx
        self.descriptor = descriptor
        self.flag_builder = FlagBuilder(descriptor, ctx.environment, ctx.out_dir)

    def build(self, collected: CollectedDependencies) -> ModuleBuildResult:
        """
        Describe every stage and compute the exported capability.

        Args:
            collected: Classpath and merge set from DependencyCollector

        Returns:
            ModuleBuildResult

        Raises:
            StageFailure: If a stage's inputs cannot be found
        """
        ctx = self.ctx
        descriptor = self.descriptor
        stages: List[PipelineStage] = []

        # Stage 1: compile
        srcs = self._expand_sources()
        own_class_specs: List[JarSpec] = []
        if srcs:
            javac_flags = self.flag_builder.build_javac_flags(
                collected.boot_classpath, collected.classpath
            )
            implicit = list(collected.classpath)
            if collected.boot_classpath is not None and collected.boot_classpath not in implicit:
                implicit.insert(0, collected.boot_classpath)
            stage, classes = transform_java_to_classes(
                ctx, srcs, javac_flags, depends_on=collected.names, implicit_inputs=implicit
            )
            stages.append(stage)
            own_class_specs.append(classes)
        else:
            logging.debug(f"{ctx.module_name}: no sources, skipping compile")

        # Stage 2: resources
        resource_stages, own_resource_specs = resource_dirs_to_jar_specs(
            ctx, descriptor.resource_dirs
        )
        stages.extend(resource_stages)

        # Stage 3: merge; own output first so it wins collisions
        class_jar_specs = own_class_specs + collected.class_jar_specs
        resource_jar_specs = own_resource_specs + collected.resource_jar_specs
        manifest = self._module_file(descriptor.manifest, StageKind.MERGE)
        stage, output_file = transform_classes_to_jar(
            ctx,
            class_jar_specs + resource_jar_specs,
            manifest,
            depends_on=collected.static_names,
        )
        stages.append(stage)

        # Stage 4: jarjar
        if descriptor.jarjar_rules:
            rules = self._module_file(descriptor.jarjar_rules, StageKind.JARJAR)
            stage, output_file = transform_jarjar(ctx, output_file, rules)
            stages.append(stage)

        # Dependents compile against the renamed, not yet dexed, jar
        classpath_entry = output_file

        # Stage 5: dex; merged classes are already inside the dexed jar
        if descriptor.dex:
            dx_flags = self.flag_builder.build_dx_flags()
            stage, dex_file = transform_classes_jar_to_dex(ctx, output_file, dx_flags)
            stages.append(stage)
            stage, output_file = transform_dex_to_java_lib(ctx, resource_jar_specs, dex_file)
            stages.append(stage)

        stage, install_path = install_file(
            ctx, INSTALL_CATEGORY, installed_jar_name(ctx.module_name), output_file
        )
        stages.append(stage)

        capability = ExportedCapability(
            classpath_entry=classpath_entry,
            class_jar_specs=tuple(own_class_specs),
            resource_jar_specs=tuple(own_resource_specs),
        )
        logging.info(f"Planned {ctx.module_name}: {len(stages)} stages -> {output_file}")
        return ModuleBuildResult(
            module=ctx.module_name,
            stages=tuple(stages),
            capability=capability,
            output_file=output_file,
            install_path=install_path,
        )

    def _expand_sources(self) -> List[Path]:
        try:
            return SourceScanner(self.ctx.module_dir).expand_sources(self.descriptor.srcs)
        except SourceScanError as e:
            raise StageFailure(StageKind.COMPILE.value, str(e), self.ctx.module_name) from e

    def _module_file(self, relative: Optional[str], stage: StageKind) -> Optional[Path]:
        # Manifest and rules files are read at build time and must exist
        if not relative:
            return None
        path = self.ctx.module_path(relative)
        if not path.is_file():
            raise StageFailure(stage.value, f"File not found: {path}", self.ctx.module_name)
        return path
