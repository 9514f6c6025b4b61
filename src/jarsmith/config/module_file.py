"""
Module file parser.

This module parses INI-style module declaration files into
ModuleDeclaration values. Each section declares one module:

    [java_library:framework-core]
    srcs =
        src/**/*.java
        gen/*.java
    java_libs = framework-annotations
    java_static_libs = guava
    javacflags = -Xlint:unchecked -encoding UTF-8

    [java_binary_host:signapk]
    srcs = SignApk.java
    wrapper = signapk

    [toolchain]
    javac = /opt/jdk/bin/javac
"""

import configparser
import shlex
from pathlib import Path
from typing import Dict, List, Optional

from ..errors import ConfigurationError
from .module_descriptor import ModuleDeclaration, ModuleDescriptor
from .module_kinds import get_kind_spec
from .toolchain import JavaToolchain

DEFAULT_MODULE_FILE = "jarsmith.ini"

LIST_PROPERTIES = (
    "srcs",
    "resource_dirs",
    "javacflags",
    "dxflags",
    "java_libs",
    "java_static_libs",
)

FLAG_PROPERTIES = ("javacflags", "dxflags")

STRING_PROPERTIES = ("manifest", "sdk_version", "jarjar_rules", "wrapper")

BOOL_PROPERTIES = ("no_standard_libraries",)


def parse_flag_string(flag_string: str) -> List[str]:
    """
    Parse a flag string that may contain quoted values.

    Example:
        >>> parse_flag_string('-encoding UTF-8 -J"-Xmx1g"')
        ['-encoding', 'UTF-8', '-J-Xmx1g']
    """
    try:
        return shlex.split(flag_string)
    except ValueError:
        # Unbalanced quotes
        return flag_string.split()


class ModuleConfigError(ConfigurationError):
    """Exception raised for module file errors."""

    pass


class ModuleFileConfig:
    """
    Parser for module declaration files.

    Usage:
        config = ModuleFileConfig(Path("jarsmith.ini"))
        for declaration in config.get_declarations():
            print(declaration.kind, declaration.name)
    """

    TOOLCHAIN_SECTION = "toolchain"

    def __init__(self, path: Path):
        """
        Initialize the parser with a module file.

        Args:
            path: Path to the module file

        Raises:
            ModuleConfigError: If the file doesn't exist or cannot be parsed
        """
        self.path = Path(path)

        if not self.path.exists():
            raise ModuleConfigError(f"Module file not found: {self.path}")

        self.config = configparser.ConfigParser(
            allow_no_value=True, interpolation=configparser.ExtendedInterpolation()
        )

        try:
            self.config.read(self.path, encoding="utf-8")
        except configparser.Error as e:
            raise ModuleConfigError(f"Failed to parse {self.path}: {e}") from e

    @property
    def module_dir(self) -> Path:
        """Directory that module-relative paths are resolved against."""
        return self.path.parent

    def get_module_names(self) -> List[str]:
        """
        Get the names of all modules declared in the file.

        Returns:
            Module names in declaration order
        """
        return [self._split_section(section)[1] for section in self._module_sections()]

    def get_declarations(self) -> List[ModuleDeclaration]:
        """
        Get every module declaration in the file.

        Returns:
            List of ModuleDeclaration in declaration order

        Raises:
            ModuleConfigError: On unknown kinds, duplicate names or bad values
        """
        declarations = []
        seen = set()
        for section in self._module_sections():
            declaration = self._parse_section(section)
            if declaration.name in seen:
                raise ModuleConfigError(
                    f"Module '{declaration.name}' declared more than once in {self.path}"
                )
            seen.add(declaration.name)
            declarations.append(declaration)
        return declarations

    def get_declaration(self, name: str) -> ModuleDeclaration:
        """
        Get the declaration of a single module.

        Args:
            name: Module name

        Raises:
            ModuleConfigError: If the module is not declared
        """
        for declaration in self.get_declarations():
            if declaration.name == name:
                return declaration
        available = ", ".join(self.get_module_names())
        raise ModuleConfigError(
            f"Module '{name}' not found. Available modules: {available or 'none'}"
        )

    def get_toolchain(self) -> JavaToolchain:
        """
        Get tool locations, applying the optional [toolchain] section.

        Returns:
            JavaToolchain instance
        """
        if self.config.has_section(self.TOOLCHAIN_SECTION):
            try:
                tools = dict(self.config[self.TOOLCHAIN_SECTION])
            except configparser.Error as e:
                raise ModuleConfigError(f"Invalid [{self.TOOLCHAIN_SECTION}] section: {e}") from e
            return JavaToolchain.from_mapping(tools)
        return JavaToolchain()

    def _module_sections(self) -> List[str]:
        return [s for s in self.config.sections() if s != self.TOOLCHAIN_SECTION]

    def _split_section(self, section: str):
        if ":" not in section:
            raise ModuleConfigError(
                f"Section [{section}] must be written as [<kind>:<name>]"
            )
        kind, name = section.split(":", 1)
        kind, name = kind.strip(), name.strip()
        if not kind or not name:
            raise ModuleConfigError(
                f"Section [{section}] must be written as [<kind>:<name>]"
            )
        return kind, name

    def _parse_section(self, section: str) -> ModuleDeclaration:
        kind, name = self._split_section(section)
        kind_spec = get_kind_spec(kind)
        if kind_spec is None:
            raise ModuleConfigError(f"Unknown module kind '{kind}' for module '{name}'")

        values = self.config[section]
        unknown = set(values.keys()) - set(LIST_PROPERTIES + STRING_PROPERTIES + BOOL_PROPERTIES)
        # configparser also exposes DEFAULT section keys; those are allowed
        unknown -= set(self.config.defaults().keys())
        if unknown:
            raise ModuleConfigError(
                f"Module '{name}' has unknown properties: {', '.join(sorted(unknown))}"
            )

        props: Dict[str, object] = {}
        for key in LIST_PROPERTIES:
            props[key] = tuple(self._get_list(section, key))
        for key in ("manifest", "jarjar_rules"):
            props[key] = self._get_string(section, key)
        props["sdk_version"] = self._get_string(section, "sdk_version") or ""

        try:
            props["no_standard_libraries"] = values.getboolean(
                "no_standard_libraries", fallback=False
            )
        except (ValueError, configparser.Error) as e:
            raise ModuleConfigError(f"Module '{name}': {e}") from e

        descriptor = ModuleDescriptor(dex=kind_spec.dex, **props)  # type: ignore[arg-type]
        return ModuleDeclaration(
            kind=kind,
            name=name,
            module_dir=self.module_dir,
            descriptor=descriptor,
            wrapper=self._get_string(section, "wrapper"),
        )

    def _get_list(self, section: str, key: str) -> List[str]:
        value = self._get_raw(section, key)
        if not value:
            return []

        # Flags keep quoted values together; names and paths also split on commas
        if key in FLAG_PROPERTIES:
            return parse_flag_string(value)
        return value.replace(",", " ").split()

    def _get_string(self, section: str, key: str) -> Optional[str]:
        value = self._get_raw(section, key)
        if value is None:
            return None
        value = value.strip()
        return value or None

    def _get_raw(self, section: str, key: str) -> Optional[str]:
        # Interpolation happens on read, so bad ${...} references surface here
        try:
            return self.config[section].get(key)
        except configparser.Error as e:
            raise ModuleConfigError(f"Invalid value for '{key}' in [{section}]: {e}") from e
