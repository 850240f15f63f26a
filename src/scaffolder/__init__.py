"""Code generator for use case, controller, DTO and service schematics.

The package converts an entity name into the casing configured for the
project, renders the matching template and writes the result below ``src/``.
It can be driven programmatically through :func:`scaffold` or via the command
line interface.
"""

from __future__ import annotations

from .config import NamingConfig, load_config
from .errors import (
    ConfigInvalid,
    ConfigMissing,
    DirectoryCreationFailed,
    InvalidName,
    PromptAborted,
    ScaffoldError,
    TargetExists,
    TemplateRenderFailed,
    UnsupportedSchematic,
)
from .naming import NamingPattern, to_camel_case, to_kebab_case, to_lower_case, to_pascal_case
from .scaffold import ScaffoldPipeline, ScaffoldRequest, ScaffoldResult, scaffold
from .schematics import Schematic, is_valid
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "ConfigInvalid",
    "ConfigMissing",
    "DirectoryCreationFailed",
    "InvalidName",
    "NamingConfig",
    "NamingPattern",
    "PromptAborted",
    "ScaffoldError",
    "ScaffoldPipeline",
    "ScaffoldRequest",
    "ScaffoldResult",
    "Schematic",
    "TargetExists",
    "TemplateRenderFailed",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UnsupportedSchematic",
    "is_valid",
    "load_config",
    "scaffold",
    "to_camel_case",
    "to_kebab_case",
    "to_lower_case",
    "to_pascal_case",
]

__version__ = "0.1.0"
