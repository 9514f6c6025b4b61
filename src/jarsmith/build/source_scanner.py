"""
Source file discovery for Java modules.

This module handles:
- Prefixing source patterns with the module directory
- Expanding glob patterns (including ** for recursive matches)
- Listing resource directories into archive-relative entries
"""

from pathlib import Path
from typing import List, Sequence, Tuple

# Directories never packaged as resources
EXCLUDED_DIRS = {'.git', '.svn', '.hg', '__pycache__'}

GLOB_CHARS = set('*?[')


class SourceScanError(Exception):
    """Raised when a source pattern or resource directory cannot be expanded."""
    pass


class SourceScanner:
    """
    Expands module-relative source patterns into concrete files.

    Literal paths must exist. Glob patterns may match nothing.
    """

    def __init__(self, module_dir: Path):
        """
        Initialize source scanner.

        Args:
            module_dir: Directory that patterns are relative to
        """
        self.module_dir = Path(module_dir)

    @staticmethod
    def is_glob(pattern: str) -> bool:
        return any(c in GLOB_CHARS for c in pattern)

    def expand_sources(self, patterns: Sequence[str]) -> List[Path]:
        """
        Expand source patterns.

        Args:
            patterns: Patterns relative to the module directory

        Returns:
            Files in pattern order; matches of one glob are sorted, and a
            file matched twice is only listed once

        Raises:
            SourceScanError: If a literal path does not exist
        """
        sources: List[Path] = []
        seen = set()
        for pattern in patterns:
            if self.is_glob(pattern):
                matches = sorted(p for p in self.module_dir.glob(pattern) if p.is_file())
            else:
                path = self.module_dir / pattern
                if not path.is_file():
                    raise SourceScanError(f"Source file not found: {path}")
                matches = [path]

            for path in matches:
                if path not in seen:
                    seen.add(path)
                    sources.append(path)
        return sources

    def scan_resource_dir(self, resource_dir: str) -> List[Tuple[str, Path]]:
        """
        List every file under a resource directory.

        Args:
            resource_dir: Directory relative to the module directory

        Returns:
            Sorted (archive path, file) pairs, archive paths relative to the
            resource directory and always '/' separated

        Raises:
            SourceScanError: If the directory does not exist
        """
        root = self.module_dir / resource_dir
        if not root.is_dir():
            raise SourceScanError(f"Resource directory not found: {root}")

        entries = []
        for path in sorted(root.rglob('*')):
            if not path.is_file():
                continue
            relative = path.relative_to(root)
            if any(part in EXCLUDED_DIRS for part in relative.parts):
                continue
            entries.append((relative.as_posix(), path))
        return entries
