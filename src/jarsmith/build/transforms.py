"""
Transform descriptions for Java modules.

Each function describes one stage and returns it together with what it
produces (a JarSpec or an output path). Functions only check that the
files they read at plan time exist; they never run a tool.
"""

import logging
import zipfile
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from ..errors import StageFailure
from .context import BuildContext
from .flag_builder import FlagBuilder
from .jar_spec import JarSpec
from .source_scanner import SourceScanError, SourceScanner
from .stages import PipelineStage, StageKind

CLASSES_DIR = "classes"
CLASSES_LIST = "classes.list"
RESOURCES_LIST = "resources.list"
FULL_DEBUG_JAR = "classes-full-debug.jar"
JARJAR_JAR = "classes-jarjar.jar"
DEX_DIR = "dex"
DEX_FILE = "classes.dex"
JAVALIB_JAR = "javalib.jar"


def transform_java_to_classes(
    ctx: BuildContext,
    srcs: Sequence[Path],
    javac_flags: Sequence[str],
    depends_on: Iterable[str] = (),
    implicit_inputs: Sequence[Path] = ()
) -> Tuple[PipelineStage, JarSpec]:
    """
    Describe compiling Java sources into class files.

    The compile writes class files under <out>/classes and lists them in
    <out>/classes.list.
    """
    classes_dir = ctx.out_dir / CLASSES_DIR
    class_list = ctx.out_dir / CLASSES_LIST

    stage = PipelineStage(
        kind=StageKind.COMPILE,
        module=ctx.module_name,
        inputs=tuple(srcs),
        output=class_list,
        flags=FlagBuilder.join(javac_flags),
        depends_on=frozenset(depends_on),
        implicit_inputs=tuple(implicit_inputs),
        tool="javac",
        args=(*javac_flags, "-d", str(classes_dir), *(str(s) for s in srcs)),
    )
    return stage, JarSpec(name=f"{ctx.module_name}:classes", root=classes_dir, file_list=class_list)


def resource_dirs_to_jar_specs(
    ctx: BuildContext,
    resource_dirs: Sequence[str]
) -> Tuple[List[PipelineStage], List[JarSpec]]:
    """
    Describe packaging resource directories, one JarSpec per directory.

    Raises:
        StageFailure: If a resource directory does not exist
    """
    scanner = SourceScanner(ctx.module_dir)
    stages = []
    specs = []
    for resource_dir in resource_dirs:
        try:
            entries = scanner.scan_resource_dir(resource_dir)
        except SourceScanError as e:
            raise StageFailure(StageKind.RESOURCES.value, str(e), ctx.module_name) from e

        root = ctx.module_path(resource_dir)
        file_list = ctx.out_dir / "res" / resource_dir / RESOURCES_LIST
        stages.append(PipelineStage(
            kind=StageKind.RESOURCES,
            module=ctx.module_name,
            inputs=tuple(path for _, path in entries),
            output=file_list,
            file_contents="".join(f"{path}\n" for path, _ in entries),
        ))
        specs.append(JarSpec(
            name=f"{ctx.module_name}:res/{resource_dir}",
            root=root,
            file_list=file_list,
            entries=tuple(entries),
        ))
    return stages, specs


def transform_classes_to_jar(
    ctx: BuildContext,
    jar_specs: Sequence[JarSpec],
    manifest: Optional[Path],
    depends_on: Iterable[str] = ()
) -> Tuple[PipelineStage, Path]:
    """Describe merging class and resource JarSpecs into classes-full-debug.jar."""
    output = ctx.out_dir / FULL_DEBUG_JAR

    args: List[str] = ["-o", str(output)]
    if manifest is not None:
        args.extend(["-m", str(manifest)])
    for spec in jar_specs:
        args.extend(spec.jar_args())

    stage = PipelineStage(
        kind=StageKind.MERGE,
        module=ctx.module_name,
        inputs=tuple(_spec_inputs(jar_specs)),
        output=output,
        depends_on=frozenset(depends_on),
        jar_specs=tuple(jar_specs),
        implicit_inputs=(manifest,) if manifest is not None else (),
        tool="jar",
        args=tuple(args),
    )
    return stage, output


def transform_jarjar(ctx: BuildContext, input_jar: Path, rules: Path) -> Tuple[PipelineStage, Path]:
    """Describe renaming classes in a jar with a jarjar rules file."""
    output = ctx.out_dir / JARJAR_JAR
    stage = PipelineStage(
        kind=StageKind.JARJAR,
        module=ctx.module_name,
        inputs=(input_jar,),
        output=output,
        implicit_inputs=(rules,),
        tool="jarjar",
        args=("process", str(rules), str(input_jar), str(output)),
    )
    return stage, output


def transform_classes_jar_to_dex(
    ctx: BuildContext,
    input_jar: Path,
    dx_flags: Sequence[str]
) -> Tuple[PipelineStage, Path]:
    """Describe converting a classes jar into classes.dex."""
    dex_dir = ctx.out_dir / DEX_DIR
    output = dex_dir / DEX_FILE
    stage = PipelineStage(
        kind=StageKind.DEX,
        module=ctx.module_name,
        inputs=(input_jar,),
        output=output,
        flags=FlagBuilder.join(dx_flags),
        tool="dx",
        args=("--dex", f"--output={dex_dir}", *dx_flags, str(input_jar)),
    )
    return stage, output


def transform_dex_to_java_lib(
    ctx: BuildContext,
    resource_jar_specs: Sequence[JarSpec],
    dex_file: Path
) -> Tuple[PipelineStage, Path]:
    """Describe packing classes.dex and resources into javalib.jar."""
    output = ctx.out_dir / JAVALIB_JAR

    args: List[str] = ["-o", str(output)]
    for spec in resource_jar_specs:
        args.extend(spec.jar_args())
    args.extend(["-C", str(dex_file.parent), "-f", str(dex_file)])

    stage = PipelineStage(
        kind=StageKind.DEX_MERGE,
        module=ctx.module_name,
        inputs=(dex_file, *_spec_inputs(resource_jar_specs)),
        output=output,
        jar_specs=tuple(resource_jar_specs),
        tool="jar",
        args=tuple(args),
    )
    return stage, output


def transform_prebuilt_jar_to_classes(
    ctx: BuildContext,
    prebuilt: Path
) -> Tuple[PipelineStage, JarSpec, JarSpec]:
    """
    Describe extracting a prebuilt jar into class and resource JarSpecs.

    Member names are read from the jar now; members ending in .class are
    classes, every other file is a resource. The stage unpacks the jar into
    <out>/classes and writes classes.list and resources.list beside it,
    which dependents merging the jar read.

    Raises:
        StageFailure: If the jar is missing or is not a readable zip archive
    """
    if not prebuilt.is_file():
        raise StageFailure(
            StageKind.EXTRACT.value, f"Prebuilt jar not found: {prebuilt}", ctx.module_name
        )

    try:
        with zipfile.ZipFile(prebuilt) as archive:
            members = [info.filename for info in archive.infolist() if not info.is_dir()]
    except (zipfile.BadZipFile, OSError) as e:
        raise StageFailure(
            StageKind.EXTRACT.value, f"Cannot read prebuilt jar {prebuilt}: {e}", ctx.module_name
        ) from e

    classes_dir = ctx.out_dir / CLASSES_DIR
    class_list = ctx.out_dir / CLASSES_LIST
    resource_list = ctx.out_dir / RESOURCES_LIST

    class_entries = tuple((m, classes_dir / m) for m in members if m.endswith(".class"))
    resource_entries = tuple((m, classes_dir / m) for m in members if not m.endswith(".class"))
    logging.debug(
        f"Prebuilt {prebuilt.name}: {len(class_entries)} classes, {len(resource_entries)} resources"
    )

    stage = PipelineStage(
        kind=StageKind.EXTRACT,
        module=ctx.module_name,
        inputs=(prebuilt,),
        output=class_list,
        implicit_outputs=(resource_list,),
        tool="unzip",
        args=("-qo", str(prebuilt), "-d", str(classes_dir)),
        written_files=(
            (class_list, _list_contents(class_entries)),
            (resource_list, _list_contents(resource_entries)),
        ),
    )
    class_spec = JarSpec(
        name=f"{ctx.module_name}:classes",
        root=classes_dir,
        file_list=class_list,
        entries=class_entries,
    )
    resource_spec = JarSpec(
        name=f"{ctx.module_name}:resources",
        root=classes_dir,
        file_list=resource_list,
        entries=resource_entries,
    )
    return stage, class_spec, resource_spec


def install_file(
    ctx: BuildContext,
    category: str,
    file_name: str,
    source: Path,
    implicit_inputs: Sequence[Path] = ()
) -> Tuple[PipelineStage, Path]:
    """Describe installing a file under <install_root>/<variant>/<category>."""
    output = ctx.install_dir(category) / file_name
    stage = PipelineStage(
        kind=StageKind.INSTALL,
        module=ctx.module_name,
        inputs=(source,),
        output=output,
        implicit_inputs=tuple(implicit_inputs),
        tool="install",
        args=(str(source), str(output)),
    )
    return stage, output


def _list_contents(entries: Sequence[Tuple[str, Path]]) -> str:
    return "".join(f"{archive_path}\n" for archive_path, _ in entries)


def _spec_inputs(specs: Sequence[JarSpec]) -> List[Path]:
    # File lists stand in for members that are only known at build time
    inputs: List[Path] = []
    for spec in specs:
        for part in spec.components():
            if part.file_list is not None:
                inputs.append(part.file_list)
            else:
                inputs.extend(source for _, source in part.entries)
    return inputs
