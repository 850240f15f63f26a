"""The fixed set of schematics the generator knows how to emit."""

from __future__ import annotations

from enum import Enum

__all__ = ["ALIASES", "Schematic", "SCHEMATIC_NAMES", "is_valid", "resolve_alias"]


class Schematic(str, Enum):
    USECASE = "usecase"
    CONTROLLER = "controller"
    DTO = "dto"
    SERVICE = "service"


SCHEMATIC_NAMES: tuple[str, ...] = tuple(schematic.value for schematic in Schematic)

# Single letter shortcuts accepted on the command line.
ALIASES: dict[str, str] = {
    "u": Schematic.USECASE.value,
    "c": Schematic.CONTROLLER.value,
    "d": Schematic.DTO.value,
    "s": Schematic.SERVICE.value,
}


def is_valid(kind: object) -> bool:
    """Return ``True`` when ``kind`` names one of the supported schematics."""

    return isinstance(kind, str) and kind in SCHEMATIC_NAMES


def resolve_alias(value: str) -> str:
    """Expand a single letter alias, returning any other value unchanged."""

    return ALIASES.get(value, value)
