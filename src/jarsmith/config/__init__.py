"""Configuration modules for Jarsmith."""

from .build_environment import BuildEnvironment
from .module_descriptor import ModuleDeclaration, ModuleDescriptor
from .module_file import DEFAULT_MODULE_FILE, ModuleConfigError, ModuleFileConfig
from .module_kinds import MODULE_KINDS, ModuleKindSpec, get_kind_spec
from .toolchain import JavaToolchain

__all__ = [
    "BuildEnvironment",
    "DEFAULT_MODULE_FILE",
    "JavaToolchain",
    "ModuleConfigError",
    "ModuleDeclaration",
    "ModuleDescriptor",
    "ModuleFileConfig",
    "ModuleKindSpec",
    "MODULE_KINDS",
    "get_kind_spec",
]
