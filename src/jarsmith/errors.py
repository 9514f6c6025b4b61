"""
Error taxonomy for Java module build planning.

All errors are scoped to a single module. Nothing here is retried: the
module that raised is reported as failed and its capability is never
published.
"""

from typing import Optional


class JavaBuildError(Exception):
    """Base exception for module build planning errors."""

    def __init__(self, message: str, module: Optional[str] = None):
        self.module = module
        if module:
            message = f"{module}: {message}"
        super().__init__(message)


class ConfigurationError(JavaBuildError):
    """Raised when a module declaration is structurally invalid."""
    pass


class AmbiguousDependency(JavaBuildError):
    """Raised when a dependency name is declared under more than one kind."""
    pass


class UnknownDependency(JavaBuildError):
    """Raised when a resolved dependency cannot be classified."""
    pass


class CapabilityMismatch(JavaBuildError):
    """Raised when a resolved dependency does not export jar artifacts."""
    pass


class StageFailure(JavaBuildError):
    """Raised when a transform stage cannot be described."""

    def __init__(self, stage: str, message: str, module: Optional[str] = None):
        self.stage = stage
        super().__init__(f"[{stage}] {message}", module)


class GraphResolutionError(JavaBuildError):
    """Raised when the in-process graph cannot resolve a module's dependencies."""
    pass
