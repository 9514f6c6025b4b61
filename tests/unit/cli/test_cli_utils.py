"""Unit tests for CLI utilities."""

import logging
from pathlib import Path

import pytest

from jarsmith.cli_utils import ErrorFormatter, ModuleFileLocator, PathValidator, setup_logging


class TestModuleFileLocator:
    """Tests for ModuleFileLocator."""

    def test_default_file(self, tmp_path):
        """Test finding jarsmith.ini in the project directory."""
        (tmp_path / "jarsmith.ini").write_text("")
        assert ModuleFileLocator.locate(tmp_path) == tmp_path / "jarsmith.ini"

    def test_relative_file(self, tmp_path):
        """Test that relative module files resolve against the project."""
        (tmp_path / "modules.ini").write_text("")
        assert ModuleFileLocator.locate(tmp_path, Path("modules.ini")) == tmp_path / "modules.ini"

    def test_absolute_file(self, tmp_path):
        """Test that absolute module files are used as given."""
        other = tmp_path / "other"
        other.mkdir()
        module_file = other / "m.ini"
        module_file.write_text("")
        assert ModuleFileLocator.locate(tmp_path / "project", module_file) == module_file

    def test_missing_file(self, tmp_path):
        """Test that a missing module file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="jarsmith.ini"):
            ModuleFileLocator.locate(tmp_path)


class TestErrorFormatter:
    """Tests for ErrorFormatter."""

    def test_print_error(self, capsys):
        """Test error title and message formatting."""
        ErrorFormatter.print_error("Planning failed!", "details")
        out = capsys.readouterr().out
        assert "✗ Planning failed!" in out
        assert "details" in out

    def test_print_success(self, capsys):
        """Test success formatting."""
        ErrorFormatter.print_success("done")
        assert "✓ done" in capsys.readouterr().out

    def test_handle_configuration_error_exits(self, capsys):
        """Test that configuration errors exit with 1."""
        with pytest.raises(SystemExit) as exc_info:
            ErrorFormatter.handle_configuration_error(ValueError("bad"))
        assert exc_info.value.code == 1
        assert "bad" in capsys.readouterr().out


class TestPathValidator:
    """Tests for PathValidator."""

    def test_valid_directory(self, tmp_path):
        """Test that existing directories pass."""
        PathValidator.validate_project_dir(tmp_path)

    def test_file_is_not_directory(self, tmp_path):
        """Test that files are rejected with exit code 2."""
        path = tmp_path / "file.txt"
        path.write_text("")
        with pytest.raises(SystemExit) as exc_info:
            PathValidator.validate_project_dir(path)
        assert exc_info.value.code == 2


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_handlers_do_not_stack(self):
        """Test that repeated setup keeps a single CLI handler."""
        setup_logging()
        setup_logging(verbose=True)

        logger = logging.getLogger()
        ours = [h for h in logger.handlers if getattr(h, "_jarsmith", False)]
        assert len(ours) == 1
        assert logger.level == logging.DEBUG
