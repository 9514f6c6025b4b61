"""CLI utility functions for Jarsmith.

This module provides common utilities used across CLI commands including:
- Module file discovery
- Logging setup
- Error handling and formatting
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from jarsmith.config import DEFAULT_MODULE_FILE

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Setup console logging for the CLI."""
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Avoid stacking handlers when main() runs more than once in a process
    for handler in list(logger.handlers):
        if getattr(handler, "_jarsmith", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._jarsmith = True  # type: ignore[attr-defined]
    logger.addHandler(console_handler)


class ModuleFileLocator:
    """Finds the module declaration file of a project."""

    @staticmethod
    def locate(project_dir: Path, module_file: Optional[Path] = None) -> Path:
        """Locate the module file.

        Args:
            project_dir: Project directory
            module_file: Explicit module file, absolute or relative to project_dir

        Returns:
            Path to the module file

        Raises:
            FileNotFoundError: If the module file doesn't exist
        """
        if module_file is not None:
            path = module_file if module_file.is_absolute() else project_dir / module_file
        else:
            path = project_dir / DEFAULT_MODULE_FILE

        if not path.exists():
            raise FileNotFoundError(f"{path.name} not found in {path.parent}")
        return path


class ErrorFormatter:
    """Formats and displays error messages with ANSI color codes."""

    # ANSI color codes
    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    @staticmethod
    def print_error(title: str, message: str) -> None:
        """Print formatted error message.

        Args:
            title: Error title (e.g., "Planning failed")
            message: Error message details
        """
        print()
        print(f"{ErrorFormatter.RED}✗ {title}{ErrorFormatter.RESET}")
        print()
        print(message)
        print()

    @staticmethod
    def print_success(message: str) -> None:
        """Print formatted success message."""
        print()
        print(f"{ErrorFormatter.GREEN}✓ {message}{ErrorFormatter.RESET}")

    @staticmethod
    def print_warning(message: str) -> None:
        """Print formatted warning message."""
        print()
        print(f"{ErrorFormatter.YELLOW}✗ {message}{ErrorFormatter.RESET}")

    @staticmethod
    def handle_file_not_found(error: FileNotFoundError) -> None:
        """Handle FileNotFoundError with standard formatting."""
        ErrorFormatter.print_error("Error: File not found", str(error))
        print(f"Make sure the project directory contains a {DEFAULT_MODULE_FILE} file.")
        sys.exit(1)

    @staticmethod
    def handle_configuration_error(error: Exception) -> None:
        """Handle module file and declaration errors."""
        ErrorFormatter.print_error("Error: Invalid module configuration", str(error))
        sys.exit(1)

    @staticmethod
    def handle_keyboard_interrupt() -> None:
        """Handle KeyboardInterrupt with standard formatting."""
        ErrorFormatter.print_warning("Planning interrupted")
        sys.exit(130)  # Standard exit code for SIGINT

    @staticmethod
    def handle_unexpected_error(error: Exception, verbose: bool = False) -> None:
        """Handle unexpected errors with standard formatting.

        Args:
            error: The exception to handle
            verbose: Whether to print traceback
        """
        message = f"{type(error).__name__}: {error}"
        ErrorFormatter.print_error("Unexpected error", message)

        if verbose:
            import traceback

            print("Traceback:")
            print(traceback.format_exc())

        sys.exit(1)


class PathValidator:
    """Validates project paths and directories."""

    @staticmethod
    def validate_project_dir(project_dir: Path) -> None:
        """Validate that project directory exists and is a directory.

        Raises:
            SystemExit: If path doesn't exist or isn't a directory
        """
        if not project_dir.exists():
            print(
                f"{ErrorFormatter.RED}✗ Error: Path does not exist: {project_dir}{ErrorFormatter.RESET}"
            )
            sys.exit(2)
        if not project_dir.is_dir():
            print(
                f"{ErrorFormatter.RED}✗ Error: Path is not a directory: {project_dir}{ErrorFormatter.RESET}"
            )
            sys.exit(2)
