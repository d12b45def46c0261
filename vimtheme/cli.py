"""Command-line entry point for vimtheme.

Converts Vim colorschemes into Emacs themes (`convert`), lists the
colorschemes it can find (`list`) and previews a conversion (`preview`).
"""

from __future__ import annotations

import argparse
import textwrap
from pathlib import Path
import sys
from typing import Callable

from rich.console import Console

from .capture import (
    CaptureError,
    capture_highlights,
    default_colorscheme_dirs,
    discover_colorschemes,
)
from .config import AppConfig, ConfigError, load_config
from .faces import map_dump
from .output import default_output_dir, normalize_theme_name, save_theme
from .preview import preview_line
from .render import build_theme, render_theme

CONFIG_ATTR = "_config"
STDIN_MARKER = "-"


class _SourceError(Exception):
    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser."""

    parser = argparse.ArgumentParser(
        prog="vimtheme",
        description=textwrap.dedent(
            """
            Convert Vim colorschemes into Emacs themes. `convert` writes a
            <name>-theme.el file, `list` shows the colorschemes that were
            found and `preview` prints the converted faces.
            """
        ).strip(),
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=(
            "Path to a YAML configuration file. Defaults to $VIMTHEME_CONFIG "
            "or ~/.config/vimtheme/config.yaml."
        ),
    )

    subparsers = parser.add_subparsers(dest="command")

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a colorscheme into an Emacs theme",
    )
    _add_source_arguments(convert_parser)
    convert_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the theme file (overrides config).",
    )
    convert_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the theme instead of saving it.",
    )
    convert_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing theme file.",
    )
    convert_parser.set_defaults(handler=_run_convert)

    list_parser = subparsers.add_parser(
        "list",
        help="List colorschemes found in the configured directories",
    )
    list_parser.set_defaults(handler=_run_list)

    preview_parser = subparsers.add_parser(
        "preview",
        help="Print the faces a conversion would produce",
    )
    _add_source_arguments(preview_parser)
    preview_parser.set_defaults(handler=_run_preview)

    return parser


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "colorscheme",
        nargs="?",
        default=None,
        help="Name of the Vim colorscheme to capture.",
    )
    parser.add_argument(
        "--dump",
        type=Path,
        default=None,
        help=(
            "Read an existing :highlight dump instead of running Vim "
            "('-' reads stdin)."
        ),
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Theme name (defaults to the colorscheme or dump file name).",
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point used by console scripts and ``python -m vimtheme.cli``."""

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.error(str(exc))

    setattr(args, CONFIG_ATTR, config)

    handler: Callable[[argparse.Namespace], int] | None = getattr(
        args,
        "handler",
        None,
    )
    if handler is None:
        parser.print_help()
        return 2
    return handler(args)


def _run_convert(args: argparse.Namespace) -> int:
    config: AppConfig = getattr(args, CONFIG_ATTR)
    try:
        name, raw = _load_source(args, config)
    except _SourceError as exc:
        print(str(exc), file=sys.stderr)
        return exc.exit_code

    try:
        tables = config.tables()
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    document = render_theme(build_theme(name, map_dump(raw, tables)))
    if args.stdout:
        sys.stdout.write(document)
        return 0

    output_dir = args.output_dir or config.output_dir or default_output_dir()
    try:
        target = save_theme(document, name, output_dir, overwrite=args.force)
    except FileExistsError as exc:
        print(f"{exc} (use --force to replace it)", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"Failed to save theme to {output_dir}: {exc}", file=sys.stderr)
        return 1

    print(f"Saved theme '{name}' to {target}")
    return 0


def _run_list(args: argparse.Namespace) -> int:
    config: AppConfig = getattr(args, CONFIG_ATTR)
    directories = list(config.colorscheme_dirs) or default_colorscheme_dirs()
    colorschemes = discover_colorschemes(directories)
    if not colorschemes:
        searched = ", ".join(str(path) for path in directories)
        print(f"No colorschemes found in {searched}", file=sys.stderr)
        return 2

    print("Available colorschemes:")
    for path in colorschemes:
        print(f"  {path.stem} -> {path}")
    return 0


def _run_preview(args: argparse.Namespace) -> int:
    config: AppConfig = getattr(args, CONFIG_ATTR)
    try:
        name, raw = _load_source(args, config)
    except _SourceError as exc:
        print(str(exc), file=sys.stderr)
        return exc.exit_code

    try:
        specs = map_dump(raw, config.tables())
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    console = Console(highlight=False)
    console.print(f"Theme '{name}' -> {len(specs)} face(s)")
    for spec in specs:
        console.print(preview_line(spec))
    return 0


def _load_source(
    args: argparse.Namespace,
    config: AppConfig,
) -> tuple[str, str]:
    if args.dump is None and args.colorscheme is None:
        raise _SourceError(
            "A colorscheme name is required unless --dump is supplied.",
            2,
        )

    if args.dump is not None:
        default_name = args.colorscheme or args.dump.stem
        raw = _read_dump(args.dump)
    else:
        default_name = args.colorscheme
        try:
            raw = capture_highlights(
                args.colorscheme,
                vim_command=config.vim_command,
            )
        except CaptureError as exc:
            raise _SourceError(str(exc), 1) from exc

    try:
        name = normalize_theme_name(args.name or default_name)
    except ValueError as exc:
        raise _SourceError(f"{exc} Use --name to choose one.", 2) from exc
    return name, raw


def _read_dump(path: Path) -> str:
    try:
        if str(path) == STDIN_MARKER:
            return sys.stdin.read()
        return path.expanduser().read_text(encoding="utf-8")
    except OSError as exc:
        raise _SourceError(f"Failed to read dump {path}: {exc}", 1) from exc
    except UnicodeDecodeError as exc:
        raise _SourceError(
            f"Dump {path} is not valid UTF-8: {exc}",
            2,
        ) from exc


if __name__ == "__main__":
    raise SystemExit(main())
