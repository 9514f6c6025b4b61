"""Tests for the jarsmith command line."""

import json
import sys
from unittest.mock import patch

import pytest

from jarsmith.cli import main

MODULE_FILE = """
[java_library:core-baselib]
srcs = Object.java
no_standard_libraries = true

[java_library:lib]
srcs = Lib.java

[java_library_host:hostlib]
srcs = Host.java

[toolchain]
javac = /opt/jdk/bin/javac
"""


@pytest.fixture
def project_dir(tmp_path):
    """Create a project with a module file and its sources."""
    (tmp_path / "jarsmith.ini").write_text(MODULE_FILE)
    for name in ("Object.java", "Lib.java", "Host.java"):
        (tmp_path / name).write_text(f"// {name}")
    return tmp_path


def run(monkeypatch, *argv):
    """Run main() with arguments and return its exit code."""
    monkeypatch.setattr(sys, "argv", ["jarsmith", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


class TestPlanCommand:
    """Tests for the 'jarsmith plan' command."""

    def test_plan_success(self, project_dir, monkeypatch, capsys):
        """Test planning every device module."""
        assert run(monkeypatch, "plan", str(project_dir)) == 0

        captured = capsys.readouterr()
        assert "Jarsmith Build Planner" in captured.out
        assert "core-baselib:" in captured.out
        assert "lib:" in captured.out
        assert "hostlib:" not in captured.out
        assert "[javac]" in captured.out
        assert "Planned 2 modules" in captured.out

    def test_plan_host(self, project_dir, monkeypatch, capsys):
        """Test planning the host variant."""
        assert run(monkeypatch, "plan", "--host", str(project_dir)) == 0
        assert "hostlib:" in capsys.readouterr().out

    def test_plan_json(self, project_dir, monkeypatch, capsys):
        """Test machine-readable output."""
        code = run(monkeypatch, "plan", "--json", "-m", "lib", "-o", str(project_dir / "build"),
                   str(project_dir))
        assert code == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["variant"] == "device"
        assert payload["failures"] == {}
        assert set(payload["modules"]) == {"core-baselib", "lib"}

        lib = payload["modules"]["lib"]
        assert lib["output_file"].endswith("javalib.jar")
        assert lib["classpath_entry"].endswith("classes-full-debug.jar")
        assert lib["launcher_path"] is None
        assert str(project_dir / "build") in lib["output_file"]

        compile_stage = lib["stages"][0]
        assert compile_stage["kind"] == "javac"
        assert compile_stage["depends_on"] == ["core-baselib"]
        assert compile_stage["command"][0] == "/opt/jdk/bin/javac"

    def test_plan_verbose_shows_commands(self, project_dir, monkeypatch, capsys):
        """Test that verbose output includes tool commands."""
        assert run(monkeypatch, "plan", "-v", "-m", "core-baselib", str(project_dir)) == 0
        assert "/opt/jdk/bin/javac" in capsys.readouterr().out

    def test_plan_failure(self, project_dir, monkeypatch, capsys):
        """Test that a missing source fails the plan."""
        (project_dir / "Lib.java").unlink()

        assert run(monkeypatch, "plan", str(project_dir)) == 1
        captured = capsys.readouterr()
        assert "Planning failed!" in captured.out
        assert "lib: [javac]" in captured.out

    def test_plan_unknown_module(self, project_dir, monkeypatch, capsys):
        """Test asking for a module that isn't declared."""
        code = run(monkeypatch, "plan", "--json", "-m", "missing", str(project_dir))
        assert code == 1
        payload = json.loads(capsys.readouterr().out)
        assert "missing" in payload["failures"]

    def test_missing_module_file(self, tmp_path, monkeypatch, capsys):
        """Test a project without a module file."""
        assert run(monkeypatch, "plan", str(tmp_path)) == 1
        assert "File not found" in capsys.readouterr().out

    def test_explicit_module_file(self, project_dir, monkeypatch, capsys):
        """Test -f with a module file under another name."""
        (project_dir / "jarsmith.ini").rename(project_dir / "modules.ini")
        assert run(monkeypatch, "plan", "-f", "modules.ini", str(project_dir)) == 0

    def test_invalid_module_file(self, tmp_path, monkeypatch, capsys):
        """Test a module file with an unknown kind."""
        (tmp_path / "jarsmith.ini").write_text("[cc_library:foo]\n")
        assert run(monkeypatch, "plan", str(tmp_path)) == 1
        assert "Invalid module configuration" in capsys.readouterr().out

    def test_bad_interpolation(self, tmp_path, monkeypatch, capsys):
        """Test that interpolation errors are reported as configuration errors."""
        (tmp_path / "jarsmith.ini").write_text("[java_library:a]\njavacflags = -Dx=$y\n")
        assert run(monkeypatch, "plan", str(tmp_path)) == 1

        out = capsys.readouterr().out
        assert "Invalid module configuration" in out
        assert "Unexpected error" not in out

    def test_keyboard_interrupt(self, project_dir, monkeypatch, capsys):
        """Test that interrupts exit with 130."""
        with patch("jarsmith.cli.BuildGraph", side_effect=KeyboardInterrupt):
            assert run(monkeypatch, "plan", str(project_dir)) == 130
        assert "Planning interrupted" in capsys.readouterr().out

    def test_unexpected_error(self, project_dir, monkeypatch, capsys):
        """Test that unexpected errors are reported with their type."""
        with patch("jarsmith.cli.BuildGraph", side_effect=RuntimeError("boom")):
            assert run(monkeypatch, "plan", str(project_dir)) == 1
        assert "RuntimeError: boom" in capsys.readouterr().out


class TestDepsCommand:
    """Tests for the 'jarsmith deps' command."""

    def test_deps(self, project_dir, monkeypatch, capsys):
        """Test listing declared dependencies."""
        assert run(monkeypatch, "deps", str(project_dir)) == 0

        out = capsys.readouterr().out
        assert "core-baselib: (none)" in out
        assert "lib: core-baselib" in out

    def test_deps_ambiguous(self, tmp_path, monkeypatch, capsys):
        """Test that declaration errors are reported per module."""
        (tmp_path / "jarsmith.ini").write_text(
            "[java_library:a]\njava_libs = b\njava_static_libs = b\n\n[java_library:b]\n"
        )
        assert run(monkeypatch, "deps", str(tmp_path)) == 1

        out = capsys.readouterr().out
        assert "a: error:" in out
        assert "b: core-baselib" in out


class TestMain:
    """Tests for top-level argument handling."""

    def test_no_command_prints_help(self, monkeypatch, capsys):
        """Test that running without a command prints help."""
        assert run(monkeypatch) == 0
        assert "plan" in capsys.readouterr().out

    def test_version(self, monkeypatch, capsys):
        """Test --version."""
        assert run(monkeypatch, "--version") == 0
        assert "jarsmith 0.1.0" in capsys.readouterr().out

    def test_missing_project_dir(self, tmp_path, monkeypatch):
        """Test that a missing project directory exits with 2."""
        assert run(monkeypatch, "plan", str(tmp_path / "nope")) == 2
