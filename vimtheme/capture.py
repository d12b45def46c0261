"""Capture a colorscheme's highlight groups by running Vim."""

from __future__ import annotations

from pathlib import Path
import subprocess
import tempfile
from typing import Callable, Iterable, Optional

COLORSCHEME_SUFFIX = ".vim"
DUMP_FILE_NAME = "highlight.dump"

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


class CaptureError(RuntimeError):
    """Raised when Vim cannot produce a highlight dump."""


def build_capture_command(
    colorscheme: str,
    dump_path: Path,
    *,
    vim_command: str = "vim",
) -> list[str]:
    """Return the argv that writes ``:highlight`` output to ``dump_path``."""

    return [
        vim_command,
        "-N",
        "-es",
        "-i",
        "NONE",
        "-c",
        "set termguicolors",
        "-c",
        f"colorscheme {colorscheme}",
        "-c",
        "set columns=1000",
        "-c",
        f"redir! > {dump_path}",
        "-c",
        "silent highlight",
        "-c",
        "redir END",
        "-c",
        "qa!",
    ]


def capture_highlights(
    colorscheme: str,
    *,
    vim_command: str = "vim",
    runner: Optional[Runner] = None,
) -> str:
    """Run Vim with ``colorscheme`` loaded and return its highlight dump."""

    run = runner or subprocess.run
    with tempfile.TemporaryDirectory(prefix="vimtheme-") as workdir:
        dump_path = Path(workdir) / DUMP_FILE_NAME
        command = build_capture_command(
            colorscheme,
            dump_path,
            vim_command=vim_command,
        )
        try:
            completed = run(
                command,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise CaptureError(
                f"Vim executable not found: {vim_command}"
            ) from exc

        if completed.returncode != 0:
            details = (completed.stderr or "").strip()
            message = (
                f"Vim exited with status {completed.returncode} while "
                f"loading colorscheme {colorscheme!r}"
            )
            if details:
                message = f"{message}: {details}"
            raise CaptureError(message)

        try:
            return dump_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CaptureError(
                f"Vim did not write a highlight dump for {colorscheme!r}"
            ) from exc
        except UnicodeDecodeError as exc:
            raise CaptureError(
                f"Highlight dump for {colorscheme!r} is not UTF-8: {exc}"
            ) from exc


def discover_colorschemes(paths: Iterable[Path]) -> list[Path]:
    """Return sorted colorscheme files found under ``paths``."""

    files: set[Path] = set()
    for raw_path in paths:
        path = raw_path.expanduser()
        if not path.exists():
            continue
        if path.is_file() and path.suffix.lower() == COLORSCHEME_SUFFIX:
            files.add(path)
            continue
        if not path.is_dir():
            continue
        for child in path.rglob(f"*{COLORSCHEME_SUFFIX}"):
            if child.is_file():
                files.add(child)
    return sorted(files)


def default_colorscheme_dirs() -> list[Path]:
    """Return the directories Vim and Neovim load user colorschemes from."""

    home = Path.home()
    return [
        home / ".vim" / "colors",
        home / ".config" / "nvim" / "colors",
    ]
