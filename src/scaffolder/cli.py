"""Command line interface for the scaffolder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .errors import PromptAborted, ScaffoldError
from .prompts import Prompter
from .schematics import ALIASES, SCHEMATIC_NAMES, resolve_alias
from .scaffold import scaffold

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    aliases = ", ".join(f"{alias}={name}" for alias, name in ALIASES.items())
    parser = argparse.ArgumentParser(
        prog="scaffolder",
        description="Generate a use case, controller, DTO or service skeleton",
    )
    parser.add_argument(
        "schematic",
        nargs="?",
        type=resolve_alias,
        help=f"One of {', '.join(SCHEMATIC_NAMES)} (aliases: {aliases})",
    )
    parser.add_argument("name", nargs="?", help="Name of the schematic's entity")
    parser.add_argument(
        "--spec",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Whether to create the spec file",
    )
    parser.add_argument(
        "-p",
        "--project-root",
        type=Path,
        default=Path.cwd(),
        help="Project directory holding scaffold.toml and src/",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Read the naming configuration from this file instead",
    )
    parser.add_argument(
        "-t",
        "--templates",
        type=Path,
        help="Directory holding <schematic>.tpl files to use instead of the bundled ones",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files instead of failing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every step")
    return parser


def main(argv: Sequence[str] | None = None, *, prompter: Prompter | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = scaffold(
            args.project_root,
            args.schematic,
            args.name,
            create_spec=args.spec,
            prompter=prompter,
            config_path=args.config,
            template_dir=args.templates,
            force=args.force,
        )
    except PromptAborted as exc:
        LOGGER.debug("aborted: %s", exc)
        sys.stderr.write("aborted\n")
        return 130
    except ScaffoldError as exc:
        LOGGER.debug("scaffolding failed", exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        return 1

    for path in result.files:
        print(f"CREATE {path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
