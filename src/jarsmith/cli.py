"""
Command-line interface for Jarsmith.

This module provides the `jarsmith` CLI tool for planning Java module builds.
"""

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from jarsmith.cli_utils import (
    ErrorFormatter,
    ModuleFileLocator,
    PathValidator,
    setup_logging,
)
from jarsmith.config import BuildEnvironment, ModuleFileConfig
from jarsmith.errors import ConfigurationError, JavaBuildError
from jarsmith.graph import BuildGraph

VERSION = "0.1.0"


@dataclass
class PlanArgs:
    """Arguments for the plan command."""

    project_dir: Path
    module_file: Optional[Path] = None
    host: bool = False
    modules: List[str] = field(default_factory=list)
    out_dir: Optional[Path] = None
    as_json: bool = False
    verbose: bool = False


@dataclass
class DepsArgs:
    """Arguments for the deps command."""

    project_dir: Path
    module_file: Optional[Path] = None
    host: bool = False
    verbose: bool = False


def _load_graph(project_dir: Path, module_file: Optional[Path], host: bool,
                out_dir: Optional[Path] = None) -> BuildGraph:
    path = ModuleFileLocator.locate(project_dir, module_file)
    config = ModuleFileConfig(path)
    environment = BuildEnvironment.from_env(
        out_root=out_dir or project_dir / "out",
        toolchain=config.get_toolchain(),
    )
    return BuildGraph(config.get_declarations(), environment, device=not host)


def plan_command(args: PlanArgs) -> None:
    """Plan the build stages of Java modules.

    Examples:
        jarsmith plan                    # Plan every device module
        jarsmith plan --host             # Plan host variants
        jarsmith plan -m framework-core  # Plan one module and its dependencies
        jarsmith plan --json             # Machine-readable output
    """
    setup_logging(args.verbose)
    if not args.as_json:
        print(f"Jarsmith Build Planner v{VERSION}")
        print()

    try:
        graph = _load_graph(args.project_dir, args.module_file, args.host, args.out_dir)
        result = graph.plan(args.modules or None)
        toolchain = graph.environment.toolchain

        if args.as_json:
            payload = {
                "variant": "host" if args.host else "device",
                "modules": {
                    name: {
                        "classpath_entry": str(module.capability.classpath_entry),
                        "output_file": str(module.output_file),
                        "install_path": str(module.install_path),
                        "launcher_path": str(module.launcher_path) if module.launcher_path else None,
                        "stages": [stage.to_dict(toolchain) for stage in module.stages],
                    }
                    for name, module in result.results.items()
                },
                "failures": {name: str(error) for name, error in result.failures.items()},
            }
            print(json.dumps(payload, indent=2))
            sys.exit(0 if result.success else 1)

        for name, module in result.results.items():
            print(f"{name}:")
            for stage in module.stages:
                print(f"  [{stage.kind.value}] -> {stage.output}")
                if args.verbose:
                    command = stage.command(toolchain)
                    if command:
                        print(f"      {' '.join(command)}")
            print(f"  classpath: {module.capability.classpath_entry}")
            print()

        if result.success:
            ErrorFormatter.print_success(f"Planned {len(result.results)} modules")
            sys.exit(0)
        else:
            message = "\n".join(str(error) for error in result.failures.values())
            ErrorFormatter.print_error("Planning failed!", message)
            sys.exit(1)

    except FileNotFoundError as e:
        ErrorFormatter.handle_file_not_found(e)
    except ConfigurationError as e:
        ErrorFormatter.handle_configuration_error(e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.verbose)


def deps_command(args: DepsArgs) -> None:
    """Print the dependency names each module declares.

    Examples:
        jarsmith deps           # Device variant
        jarsmith deps --host    # Host variant
    """
    setup_logging(args.verbose)

    try:
        graph = _load_graph(args.project_dir, args.module_file, args.host)
        failed = False
        for name in graph.modules:
            try:
                deps = graph.declare(name)
            except JavaBuildError as e:
                failed = True
                print(f"{name}: error: {e}")
                continue
            print(f"{name}: {' '.join(deps) if deps else '(none)'}")
        sys.exit(1 if failed else 0)

    except FileNotFoundError as e:
        ErrorFormatter.handle_file_not_found(e)
    except ConfigurationError as e:
        ErrorFormatter.handle_configuration_error(e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.verbose)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "project_dir",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Project directory (default: current directory)",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="module_file",
        type=Path,
        default=None,
        help="Module file (default: jarsmith.ini in the project directory)",
    )
    parser.add_argument(
        "--host",
        action="store_true",
        help="Plan the host variant instead of the device variant",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )


def main() -> None:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="jarsmith",
        description="Plan the build of Java modules without running any compiler",
    )
    parser.add_argument("--version", action="version", version=f"jarsmith {VERSION}")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Plan command
    plan_parser = subparsers.add_parser(
        "plan",
        help="Describe the build stages of each module",
    )
    _add_common_arguments(plan_parser)
    plan_parser.add_argument(
        "-m",
        "--module",
        dest="modules",
        action="append",
        default=[],
        help="Module to plan (repeatable; default: all modules)",
    )
    plan_parser.add_argument(
        "-o",
        "--out",
        dest="out_dir",
        type=Path,
        default=None,
        help="Output root (default: <project_dir>/out)",
    )
    plan_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print the plan as JSON",
    )

    # Deps command
    deps_parser = subparsers.add_parser(
        "deps",
        help="List the dependencies each module declares",
    )
    _add_common_arguments(deps_parser)

    # Parse arguments
    parsed_args = parser.parse_args()

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)

    PathValidator.validate_project_dir(parsed_args.project_dir)

    if parsed_args.command == "plan":
        plan_command(PlanArgs(
            project_dir=parsed_args.project_dir,
            module_file=parsed_args.module_file,
            host=parsed_args.host,
            modules=parsed_args.modules,
            out_dir=parsed_args.out_dir,
            as_json=parsed_args.as_json,
            verbose=parsed_args.verbose,
        ))
    elif parsed_args.command == "deps":
        deps_command(DepsArgs(
            project_dir=parsed_args.project_dir,
            module_file=parsed_args.module_file,
            host=parsed_args.host,
            verbose=parsed_args.verbose,
        ))


if __name__ == "__main__":
    main()
