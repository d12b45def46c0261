"""Persist rendered themes where Emacs can load them."""

from __future__ import annotations

from pathlib import Path
import re

THEME_FILE_SUFFIX = "-theme.el"


def normalize_theme_name(value: str) -> str:
    """Return ``value`` as a theme name usable as an Emacs symbol."""

    slug = re.sub(r"[^a-z0-9]+", "-", value.strip().lower()).strip("-")
    if not slug:
        raise ValueError(f"Cannot derive a theme name from {value!r}.")
    return slug


def theme_filename(name: str) -> str:
    """Return the file name Emacs expects for theme ``name``."""

    return f"{name}{THEME_FILE_SUFFIX}"


def default_output_dir() -> Path:
    """Return the default directory for generated themes."""

    return Path.home() / ".emacs.d" / "themes"


def save_theme(
    document: str,
    name: str,
    output_dir: Path,
    *,
    overwrite: bool = False,
) -> Path:
    """Write ``document`` as the theme file for ``name``.

    Raises ``FileExistsError`` if the file exists and ``overwrite`` is not
    set.
    """

    directory = output_dir.expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / theme_filename(name)
    if target.exists() and not overwrite:
        raise FileExistsError(f"Theme file already exists: {target}")
    with target.open("w", encoding="utf-8") as handle:
        handle.write(document)
    return target
