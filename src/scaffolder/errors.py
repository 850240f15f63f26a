"""Exception types raised while generating a schematic."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

__all__ = [
    "ConfigInvalid",
    "ConfigMissing",
    "DirectoryCreationFailed",
    "InvalidName",
    "PromptAborted",
    "ScaffoldError",
    "TargetExists",
    "TemplateRenderFailed",
    "UnsupportedSchematic",
]


class ScaffoldError(RuntimeError):
    """Base class for every fatal error of a scaffolding run."""


class ConfigMissing(ScaffoldError):
    """Raised when the project has no naming configuration."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"no scaffold configuration found at {path}")


class ConfigInvalid(ScaffoldError):
    """Raised when the naming configuration cannot be understood."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"invalid scaffold configuration in {path}: {reason}")


class UnsupportedSchematic(ScaffoldError):
    """Raised when the requested schematic kind is not one we can generate."""

    def __init__(self, kind: str | None, allowed: Iterable[str]) -> None:
        self.kind = kind
        self.allowed = tuple(allowed)
        super().__init__(
            f"The schematic {kind} is not supported. "
            f"Please use one of the following: {', '.join(self.allowed)}"
        )


class InvalidName(ScaffoldError):
    """Raised when the entity name yields no usable identifier."""

    def __init__(self, name: str | None) -> None:
        self.name = name
        super().__init__(f"cannot derive a name from {name!r}")


class DirectoryCreationFailed(ScaffoldError):
    """Raised when the target folder cannot be created."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        super().__init__(f"could not create {path}: {cause.strerror or cause}")


class TargetExists(ScaffoldError):
    """Raised when a generated file would overwrite an existing one."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path} already exists (use --force to overwrite)")


class TemplateRenderFailed(ScaffoldError):
    """Raised when a template cannot be rendered into its target file."""


class PromptAborted(ScaffoldError):
    """Raised when the user interrupts an interactive question."""
