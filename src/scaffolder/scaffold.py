"""Schematic generation pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .config import NamingConfig, load_config
from .errors import (
    DirectoryCreationFailed,
    InvalidName,
    TargetExists,
    TemplateRenderFailed,
    UnsupportedSchematic,
)
from .naming import apply_pattern, to_pascal_case
from .prompts import ConsolePrompter, Prompter
from .schematics import SCHEMATIC_NAMES, Schematic, is_valid
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "ResolvedName",
    "ScaffoldPipeline",
    "ScaffoldRequest",
    "ScaffoldResult",
    "TargetPath",
    "resolve_name",
    "scaffold",
    "target_path",
]

LOGGER = logging.getLogger(__name__)

SOURCE_DIR = "src"
DEFAULT_EXTENSION = "ts"

# Names must stay inside src/<folder>.
_PATH_PARTS = ("/", "\\", "..")


class ScaffoldRequest(BaseModel):
    """A validated request to generate one schematic."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    schematic: Schematic = Field(..., description="Kind of file to generate.")
    raw_name: str = Field(..., description="Entity name as typed by the user.")
    create_spec: bool = Field(True, description="Whether a companion spec file is emitted.")


@dataclass(frozen=True, slots=True)
class ResolvedName:
    """Names derived from the raw entity name."""

    folder_name: str
    class_identifier: str


@dataclass(frozen=True, slots=True)
class TargetPath:
    """Where the generated files of a request end up."""

    folder: Path
    file: Path
    spec_file: Path


@dataclass(slots=True)
class ScaffoldResult:
    """Outcome of a successful run."""

    request: ScaffoldRequest
    name: ResolvedName
    target: TargetPath
    files: list[Path] = field(default_factory=list)


def resolve_name(raw_name: str, config: NamingConfig) -> ResolvedName:
    """Derive folder and class names from ``raw_name``.

    The folder follows the configured pattern; the class identifier is always
    PascalCase so it stays a valid identifier whatever the folder looks like.
    """

    return ResolvedName(
        folder_name=apply_pattern(raw_name, config.pattern),
        class_identifier=to_pascal_case(raw_name),
    )


def target_path(
    root: str | Path,
    name: ResolvedName,
    schematic: Schematic,
    *,
    extension: str = DEFAULT_EXTENSION,
) -> TargetPath:
    """Return ``src/<folder>/<folder>.<schematic>.<extension>`` under ``root``."""

    folder = Path(root) / SOURCE_DIR / name.folder_name
    stem = f"{name.folder_name}.{schematic.value}"
    return TargetPath(
        folder=folder,
        file=folder / f"{stem}.{extension}",
        spec_file=folder / f"{stem}.spec.{extension}",
    )


class ScaffoldPipeline:
    """Resolve, validate, normalise and materialise a single schematic.

    The steps run strictly in order and the first error ends the run. Missing
    arguments are requested from ``prompter``: the schematic first, then the
    name, whose question mentions the chosen schematic.

    Templates come from ``renderer`` when given, otherwise from
    ``template_dir`` or the bundled templates.
    """

    def __init__(
        self,
        config: NamingConfig,
        prompter: Prompter | None = None,
        renderer: TemplateRenderer | None = None,
        *,
        project_root: str | Path = ".",
        template_dir: str | Path | None = None,
        extension: str = DEFAULT_EXTENSION,
        force: bool = False,
    ) -> None:
        if renderer is None:
            if template_dir is None:
                renderer = TemplateRenderer()
            else:
                renderer = TemplateRenderer(template_dir=Path(template_dir))
        self.config = config
        self.prompter = prompter or ConsolePrompter()
        self.renderer = renderer
        self.project_root = Path(project_root)
        self.extension = extension
        self.force = force

    def run(
        self,
        schematic: str | None = None,
        name: str | None = None,
        *,
        create_spec: bool = True,
    ) -> ScaffoldResult:
        kind = self._resolve_schematic(schematic)
        raw_name = self._resolve_name(kind, name)
        request = self._validate(kind, raw_name, create_spec)

        resolved = resolve_name(request.raw_name, self.config)
        if not resolved.folder_name or not resolved.class_identifier:
            raise InvalidName(request.raw_name)
        LOGGER.debug(
            "normalised %r to folder %r and class %r",
            request.raw_name,
            resolved.folder_name,
            resolved.class_identifier,
        )

        target = target_path(
            self.project_root, resolved, request.schematic, extension=self.extension
        )
        files = self._materialize(request, resolved, target)
        return ScaffoldResult(request=request, name=resolved, target=target, files=files)

    def _resolve_schematic(self, schematic: str | None) -> str:
        if schematic:
            return schematic
        return self.prompter.select("What do you want to generate?", list(SCHEMATIC_NAMES))

    def _resolve_name(self, schematic: str, name: str | None) -> str:
        if name:
            return name
        return self.prompter.text(f"What is the name of the {schematic}?")

    def _validate(self, kind: str, raw_name: str, create_spec: bool) -> ScaffoldRequest:
        if not is_valid(kind):
            raise UnsupportedSchematic(kind, SCHEMATIC_NAMES)
        raw_name = raw_name.strip()
        if not raw_name or any(part in raw_name for part in _PATH_PARTS):
            raise InvalidName(raw_name)
        return ScaffoldRequest(
            schematic=Schematic(kind), raw_name=raw_name, create_spec=create_spec
        )

    def _materialize(
        self, request: ScaffoldRequest, name: ResolvedName, target: TargetPath
    ) -> list[Path]:
        try:
            target.folder.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationFailed(target.folder, exc) from exc

        context = {
            "class_name": name.class_identifier,
            "folder_name": name.folder_name,
            "schematic": request.schematic.value,
            "file_name": f"{name.folder_name}.{request.schematic.value}",
        }
        outputs = [(request.schematic.value, target.file)]
        if request.create_spec:
            outputs.append((f"{request.schematic.value}.spec", target.spec_file))

        rendered: list[tuple[Path, str]] = []
        for template_name, destination in outputs:
            if destination.exists() and not self.force:
                raise TargetExists(destination)
            try:
                text = self.renderer.render(template_name, context)
            except FileNotFoundError as exc:
                raise TemplateRenderFailed(f"template '{template_name}' not found") from exc
            except (TemplateRenderingError, UnicodeDecodeError, OSError) as exc:
                raise TemplateRenderFailed(
                    f"could not render template '{template_name}': {exc}"
                ) from exc
            rendered.append((destination, text))

        written: list[Path] = []
        for destination, text in rendered:
            try:
                destination.write_text(text, encoding="utf-8")
            except OSError as exc:
                raise TemplateRenderFailed(f"could not write {destination}: {exc}") from exc
            LOGGER.info("created %s", destination)
            written.append(destination)
        return written


def scaffold(
    project_root: str | Path = ".",
    schematic: str | None = None,
    name: str | None = None,
    *,
    create_spec: bool = True,
    prompter: Prompter | None = None,
    renderer: TemplateRenderer | None = None,
    config_path: str | Path | None = None,
    template_dir: str | Path | None = None,
    force: bool = False,
) -> ScaffoldResult:
    """Load the project configuration and generate one schematic.

    The configuration is read before any question is asked, so a project
    without one fails without prompting.
    """

    config = load_config(config_path if config_path is not None else project_root)
    pipeline = ScaffoldPipeline(
        config,
        prompter,
        renderer,
        project_root=project_root,
        template_dir=template_dir,
        force=force,
    )
    return pipeline.run(schematic, name, create_spec=create_spec)
