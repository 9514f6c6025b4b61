"""
Integration tests for the installed jarsmith command.

These run the console script in a subprocess against a small project on
disk, from module file parsing through the JSON plan.
"""

import json
import subprocess
import zipfile

import pytest

COMMAND = "jarsmith"

MODULE_FILE = """
[java_library:core-baselib]
srcs = Object.java
no_standard_libraries = true

[java_prebuilt:guava]
srcs = guava.jar

[java_binary:app]
srcs = App.java
java_static_libs = guava
wrapper = app.sh
"""


@pytest.mark.integration
class TestCLIIntegration:
    """CLI integration tests"""

    @pytest.fixture
    def project_dir(self, tmp_path):
        """Create a project with a library, a prebuilt and a binary"""
        (tmp_path / "jarsmith.ini").write_text(MODULE_FILE)
        for name in ("Object.java", "App.java", "app.sh"):
            (tmp_path / name).write_text(f"// {name}")
        with zipfile.ZipFile(tmp_path / "guava.jar", "w") as jar:
            jar.writestr("com/google/Base.class", b"\xca\xfe\xba\xbe")
        return tmp_path

    def test_cli_help_invocation(self):
        """Test command line interface help flag."""
        result = subprocess.run([COMMAND, "--help"], capture_output=True, text=True, timeout=30)
        assert result.returncode == 0
        assert "plan" in result.stdout

    def test_plan_json(self, project_dir):
        """Test planning a project and reading the JSON plan."""
        result = subprocess.run(
            [COMMAND, "plan", "--json", str(project_dir)],
            capture_output=True,
            text=True,
            timeout=30,
        )

        assert result.returncode == 0, result.stdout + result.stderr
        payload = json.loads(result.stdout)
        assert payload["variant"] == "device"
        assert payload["failures"] == {}
        assert set(payload["modules"]) == {"core-baselib", "guava", "app"}

        app = payload["modules"]["app"]
        assert app["output_file"].endswith("javalib.jar")
        assert app["launcher_path"].endswith("app.sh")

        guava = payload["modules"]["guava"]
        extract = guava["stages"][0]
        merge = next(stage for stage in app["stages"] if stage["kind"] == "jar")
        assert extract["output"] in merge["inputs"]

    def test_plan_missing_module_file(self, tmp_path):
        """Test that planning fails without a module file."""
        result = subprocess.run(
            [COMMAND, "plan", str(tmp_path)],
            capture_output=True,
            text=True,
            timeout=30,
        )

        assert result.returncode == 1
        assert "jarsmith.ini" in result.stdout + result.stderr
