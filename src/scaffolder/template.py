"""Placeholder substitution for schematic templates."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping

from .naming import to_camel_case, to_kebab_case

__all__ = [
    "DEFAULT_TEMPLATE_DIR",
    "TemplateRenderer",
    "TemplateRenderingError",
]


DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>\w+)\s*(?:\|\s*(?P<filter>\w+)\s*)?}}")


class TemplateRenderingError(RuntimeError):
    """Raised when a placeholder cannot be filled in."""


def _default_filters() -> dict[str, Callable[[str], str]]:
    return {"camel": to_camel_case, "kebab": to_kebab_case}


@dataclass(slots=True)
class TemplateRenderer:
    """Fill ``{{ key }}`` and ``{{ key|filter }}`` placeholders from a context.

    Templates are looked up by name inside ``template_dir``; a schematic
    ``usecase`` is rendered from ``usecase.tpl`` and its spec companion from
    ``usecase.spec.tpl``. Every placeholder must resolve, otherwise
    :class:`TemplateRenderingError` is raised.
    """

    template_dir: Path = DEFAULT_TEMPLATE_DIR
    filters: dict[str, Callable[[str], str]] = field(default_factory=_default_filters)

    def __post_init__(self) -> None:
        self.template_dir = Path(self.template_dir)

    def template_path(self, name: str) -> Path:
        return self.template_dir / f"{name}.tpl"

    def render_string(self, template: str, context: Mapping[str, str]) -> str:
        def substitute(match: re.Match[str]) -> str:
            key, filter_name = match.group("key", "filter")
            if key not in context:
                raise TemplateRenderingError(f"missing value for '{key}'")
            value = str(context[key])
            if filter_name is None:
                return value
            if filter_name not in self.filters:
                raise TemplateRenderingError(f"unknown filter '{filter_name}'")
            return self.filters[filter_name](value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

    def render(self, name: str, context: Mapping[str, str], *, encoding: str = "utf-8") -> str:
        """Render the template called ``name``.

        Raises ``FileNotFoundError`` when there is no such template, and lets
        read errors of the template file propagate.
        """

        template_path = self.template_path(name)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)

        text = template_path.read_text(encoding=encoding)
        return self.render_string(text, context)
