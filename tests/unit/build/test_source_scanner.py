"""Tests for source pattern expansion and resource listing."""

import pytest

from jarsmith.build.source_scanner import SourceScanError, SourceScanner


class TestSourceScanner:
    """Test source file scanning."""

    @pytest.fixture
    def module_dir(self, tmp_path):
        """Create a module with sources and resources."""
        module = tmp_path / "module"
        (module / "src" / "com" / "example").mkdir(parents=True)
        (module / "src" / "com" / "example" / "B.java").write_text("class B {}")
        (module / "src" / "com" / "example" / "A.java").write_text("class A {}")
        (module / "Main.java").write_text("class Main {}")

        res = module / "res"
        (res / "sub").mkdir(parents=True)
        (res / "a.properties").write_text("a=1")
        (res / "sub" / "b.txt").write_text("b")
        (res / ".git").mkdir()
        (res / ".git" / "HEAD").write_text("ref")
        return module

    def test_literal_path(self, module_dir):
        """Literal paths are prefixed with the module directory."""
        scanner = SourceScanner(module_dir)
        assert scanner.expand_sources(["Main.java"]) == [module_dir / "Main.java"]

    def test_missing_literal_path(self, module_dir):
        """A literal path that doesn't exist is an error."""
        with pytest.raises(SourceScanError, match="Missing.java"):
            SourceScanner(module_dir).expand_sources(["Missing.java"])

    def test_recursive_glob_sorted(self, module_dir):
        """Recursive globs match in sorted order."""
        sources = SourceScanner(module_dir).expand_sources(["src/**/*.java"])
        assert [p.name for p in sources] == ["A.java", "B.java"]

    def test_glob_without_matches(self, module_dir):
        """A glob may match nothing."""
        assert SourceScanner(module_dir).expand_sources(["gen/*.java"]) == []

    def test_pattern_order_and_dedup(self, module_dir):
        """Patterns keep their order and a file is listed once."""
        sources = SourceScanner(module_dir).expand_sources(
            ["Main.java", "**/*.java"]
        )
        assert [p.name for p in sources] == ["Main.java", "A.java", "B.java"]

    def test_scan_resource_dir(self, module_dir):
        """Resource files are listed relative to their directory."""
        entries = SourceScanner(module_dir).scan_resource_dir("res")
        assert [path for path, _ in entries] == ["a.properties", "sub/b.txt"]
        assert entries[1][1] == module_dir / "res" / "sub" / "b.txt"

    def test_missing_resource_dir(self, module_dir):
        """A missing resource directory is an error."""
        with pytest.raises(SourceScanError):
            SourceScanner(module_dir).scan_resource_dir("assets")

    def test_is_glob(self):
        """Glob detection looks for wildcard characters."""
        assert SourceScanner.is_glob("src/*.java")
        assert SourceScanner.is_glob("A?.java")
        assert not SourceScanner.is_glob("src/A.java")
