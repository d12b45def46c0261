"""Serialize face specifications as an Emacs ``deftheme`` file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from .faces import FaceSpec, map_dump
from .mappings import (
    DEFAULT_TABLES,
    MappingTables,
    Plist,
    PropertyValue,
    Symbol,
)

GENERATOR_NAME = "vimtheme"
GENERATOR_URL = "https://pypi.org/project/vimtheme/"
THEME_DOCSTRING = "Converted from a Vim colorscheme."


@dataclass(frozen=True)
class Theme:
    """A named, ordered collection of face specifications."""

    name: str
    faces: tuple[FaceSpec, ...] = ()


def render_theme(theme: Theme) -> str:
    """Return the Emacs Lisp theme document for ``theme``."""

    name = theme.name
    filename = f"{name}-theme.el"
    lines = [
        f";;; {filename} --- {name} theme",
        ";;",
        f";; Generated by {GENERATOR_NAME} from a Vim colorscheme.",
        f";; Source: {GENERATOR_URL}",
        "",
        f"(deftheme {name}",
        f"  {_quote(THEME_DOCSTRING)})",
        "",
        "(custom-theme-set-faces",
        f" '{name}",
    ]
    lines.extend(_render_face(spec) for spec in theme.faces)
    lines[-1] += ")"
    lines.extend(
        [
            "",
            f"(provide-theme '{name})",
            "",
            ";; Local Variables:",
            ";; no-byte-compile: t",
            ";; End:",
            "",
            f";;; {filename} ends here",
        ]
    )
    return "\n".join(lines) + "\n"


def render_value(value: PropertyValue) -> str:
    """Return the Emacs Lisp literal for one property value."""

    if value is True:
        return "t"
    if value is False:
        return "nil"
    if isinstance(value, Plist):
        return f"({render_plist(dict(value.items))})"
    if isinstance(value, Symbol):
        return str(value)
    return _quote(value)


def render_plist(properties: Mapping[str, PropertyValue]) -> str:
    """Return ``properties`` as space separated ``:key value`` pairs."""

    return " ".join(
        f":{key} {render_value(value)}"
        for key, value in properties.items()
    )


def convert_dump(
    name: str,
    raw: str,
    tables: MappingTables = DEFAULT_TABLES,
) -> str:
    """Convert a raw ``:highlight`` dump into a theme document."""

    return render_theme(build_theme(name, map_dump(raw, tables)))


def build_theme(name: str, faces: Sequence[FaceSpec]) -> Theme:
    """Return an immutable ``Theme`` from ``faces``."""

    return Theme(name=name, faces=tuple(faces))


def _render_face(spec: FaceSpec) -> str:
    return f" '({spec.face} ((t ({render_plist(spec.properties)}))))"


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
