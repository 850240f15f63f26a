"""Loading of the project level naming configuration."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigInvalid, ConfigMissing
from .naming import NamingPattern

__all__ = ["CONFIG_FILENAME", "NamingConfig", "load_config"]

CONFIG_FILENAME = "scaffold.toml"

LOGGER = logging.getLogger(__name__)


class NamingConfig(BaseModel):
    """Naming convention used for generated folders and files.

    Attributes
    ----------
    pattern:
        Casing applied to the entity name when deriving the folder and file
        names. Read from the ``scaffoldPattern`` key and defaulting to
        ``kebab-case`` when the key is absent. Class identifiers are always
        PascalCase and do not depend on this value.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    pattern: NamingPattern = Field(
        default=NamingPattern.KEBAB_CASE,
        alias="scaffoldPattern",
        description="Casing convention for generated folder and file names.",
    )


def load_config(path: str | Path) -> NamingConfig:
    """Read the :class:`NamingConfig` stored at ``path``.

    ``path`` may point at the configuration file itself or at the project root,
    in which case :data:`CONFIG_FILENAME` is looked up inside it.

    Raises
    ------
    ConfigMissing
        When no configuration file exists.
    ConfigInvalid
        When the file cannot be read, is not valid TOML or holds an unknown
        pattern.
    """

    config_path = Path(path)
    if config_path.is_dir():
        config_path = config_path / CONFIG_FILENAME
    if not config_path.is_file():
        raise ConfigMissing(config_path)

    try:
        with config_path.open("rb") as handle:
            data = tomllib.load(handle)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as exc:
        raise ConfigInvalid(config_path, str(exc)) from exc

    try:
        config = NamingConfig.model_validate(data)
    except ValidationError as exc:
        accepted = ", ".join(pattern.value for pattern in NamingPattern)
        raise ConfigInvalid(
            config_path, f"scaffoldPattern must be one of: {accepted}"
        ) from exc

    LOGGER.debug("loaded %s with pattern %s", config_path, config.pattern.value)
    return config
