from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from scaffolder.config import CONFIG_FILENAME, NamingConfig, load_config
from scaffolder.errors import ConfigInvalid, ConfigMissing
from scaffolder.naming import NamingPattern


def _write_config(directory: Path, content: str) -> Path:
    path = directory / CONFIG_FILENAME
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize("value", ["lowercase", "kebab-case", "PascalCase", "camelCase"])
def test_load_config_reads_pattern(tmp_path: Path, value: str):
    _write_config(tmp_path, f'scaffoldPattern = "{value}"\n')
    assert load_config(tmp_path).pattern == NamingPattern(value)


def test_load_config_accepts_file_path(tmp_path: Path):
    path = _write_config(tmp_path, 'scaffoldPattern = "PascalCase"\n')
    assert load_config(path).pattern is NamingPattern.PASCAL_CASE


def test_load_config_defaults_to_kebab_case(tmp_path: Path):
    _write_config(tmp_path, 'other = "value"\n')
    assert load_config(tmp_path).pattern is NamingPattern.KEBAB_CASE


def test_load_config_missing_file(tmp_path: Path):
    with pytest.raises(ConfigMissing) as excinfo:
        load_config(tmp_path)
    assert excinfo.value.path == tmp_path / CONFIG_FILENAME


def test_load_config_rejects_unknown_pattern(tmp_path: Path):
    _write_config(tmp_path, 'scaffoldPattern = "snake_case"\n')
    with pytest.raises(ConfigInvalid, match="kebab-case"):
        load_config(tmp_path)


def test_load_config_rejects_malformed_toml(tmp_path: Path):
    _write_config(tmp_path, "scaffoldPattern = \n")
    with pytest.raises(ConfigInvalid):
        load_config(tmp_path)


def test_load_config_rejects_undecodable_file(tmp_path: Path):
    (tmp_path / CONFIG_FILENAME).write_bytes(b'scaffoldPattern = "\xff"\n')
    with pytest.raises(ConfigInvalid):
        load_config(tmp_path)


def test_naming_config_is_frozen():
    config = NamingConfig(pattern=NamingPattern.CAMEL_CASE)
    with pytest.raises(ValidationError):
        config.pattern = NamingPattern.LOWER_CASE  # type: ignore[misc]
