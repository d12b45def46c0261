"""Lookup tables from Vim highlight groups and attributes to Emacs faces."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Union


class MappingError(ValueError):
    """Raised when user supplied mapping tables have the wrong shape."""


class Symbol(str):
    """A Lisp symbol, rendered without quotes."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Symbol({str(self)!r})"


@dataclass(frozen=True)
class Plist:
    """A nested Lisp property list such as ``(:style wave)``."""

    items: tuple[tuple[str, "PropertyValue"], ...]


PropertyValue = Union[str, Symbol, bool, Plist]


def _faces(*names: str) -> tuple[str, ...]:
    return names


HIGHLIGHT_GROUP_FACES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    # Editor chrome
    "Normal": _faces("default"),
    "Cursor": _faces("cursor"),
    "CursorLine": _faces("hl-line"),
    "Visual": _faces("region"),
    "Search": _faces("lazy-highlight"),
    "IncSearch": _faces("isearch"),
    "LineNr": _faces("line-number"),
    "CursorLineNr": _faces("line-number-current-line"),
    "StatusLine": _faces("mode-line"),
    "StatusLineNC": _faces("mode-line-inactive"),
    "VertSplit": _faces("vertical-border"),
    "MatchParen": _faces("show-paren-match"),
    "Pmenu": _faces("company-tooltip", "corfu-default"),
    "PmenuSel": _faces("company-tooltip-selection", "corfu-current"),
    "Folded": _faces("outline-1"),
    "SignColumn": _faces("fringe"),
    "NonText": _faces("shadow"),
    "Directory": _faces("dired-directory"),
    "ErrorMsg": _faces("error"),
    "WarningMsg": _faces("warning"),
    "Question": _faces("minibuffer-prompt"),
    "Title": _faces("outline-2"),
    "TabLine": _faces("tab-bar-tab-inactive"),
    "TabLineSel": _faces("tab-bar-tab"),
    "TabLineFill": _faces("tab-bar"),
    "DiffAdd": _faces("diff-added"),
    "DiffDelete": _faces("diff-removed"),
    "DiffChange": _faces("diff-changed"),
    "DiffText": _faces("diff-refine-changed"),
    "SpellBad": _faces("flyspell-incorrect"),
    "SpellCap": _faces("flyspell-duplicate"),
    # Syntax
    "Comment": _faces(
        "font-lock-comment-face",
        "font-lock-comment-delimiter-face",
    ),
    "Constant": _faces("font-lock-constant-face"),
    "String": _faces("font-lock-string-face"),
    "Character": _faces("font-lock-string-face"),
    "Number": _faces("font-lock-number-face"),
    "Boolean": _faces("font-lock-constant-face"),
    "Identifier": _faces("font-lock-variable-name-face"),
    "Function": _faces("font-lock-function-name-face"),
    "Statement": _faces("font-lock-keyword-face"),
    "Keyword": _faces("font-lock-keyword-face"),
    "PreProc": _faces("font-lock-preprocessor-face"),
    "Type": _faces("font-lock-type-face"),
    "Special": _faces("font-lock-builtin-face"),
    "Todo": _faces("font-lock-warning-face"),
    "Error": _faces("error"),
    "Underlined": _faces("link"),
})

ATTRIBUTE_PROPERTIES: Mapping[str, Mapping[str, PropertyValue]] = (
    MappingProxyType({
        "bold": MappingProxyType({"weight": Symbol("bold")}),
        "italic": MappingProxyType({"slant": Symbol("italic")}),
        "underline": MappingProxyType({"underline": True}),
        "undercurl": MappingProxyType({
            "underline": Plist((("style", Symbol("wave")),)),
        }),
        "reverse": MappingProxyType({"inverse-video": True}),
        "inverse": MappingProxyType({"inverse-video": True}),
        "standout": MappingProxyType({"inverse-video": True}),
        "strikethrough": MappingProxyType({"strike-through": True}),
    })
)


@dataclass(frozen=True)
class MappingTables:
    """The pair of lookup tables consulted by the face mapper."""

    group_faces: Mapping[str, tuple[str, ...]]
    attributes: Mapping[str, Mapping[str, PropertyValue]]


DEFAULT_TABLES = MappingTables(
    group_faces=HIGHLIGHT_GROUP_FACES,
    attributes=ATTRIBUTE_PROPERTIES,
)


def build_tables(
    group_faces: Mapping[str, Any] | None = None,
    attributes: Mapping[str, Any] | None = None,
    *,
    replace: bool = False,
) -> MappingTables:
    """Return tables with user entries layered over (or replacing) defaults.

    ``group_faces`` values may be a single face name or a list of names.
    ``attributes`` values are mappings of property name to a value where
    strings become symbols, booleans stay booleans and nested mappings
    become property lists.
    """

    faces: dict[str, tuple[str, ...]] = (
        {} if replace else dict(HIGHLIGHT_GROUP_FACES)
    )
    for group, raw in (group_faces or {}).items():
        faces[_require_name(group, "group")] = _coerce_faces(group, raw)

    props: dict[str, Mapping[str, PropertyValue]] = (
        {} if replace else dict(ATTRIBUTE_PROPERTIES)
    )
    for keyword, raw in (attributes or {}).items():
        name = _require_name(keyword, "attribute")
        if not isinstance(raw, Mapping):
            raise MappingError(
                f"Attribute {name!r} must map to property/value pairs."
            )
        props[name] = MappingProxyType(_coerce_properties(name, raw))

    return MappingTables(
        group_faces=MappingProxyType(faces),
        attributes=MappingProxyType(props),
    )


def _require_name(value: Any, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MappingError(f"Every {label} name must be a non-empty string.")
    return value.strip()


def _coerce_faces(group: str, raw: Any) -> tuple[str, ...]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple)) or not raw:
        raise MappingError(
            f"Group {group!r} must map to a face name or a non-empty list."
        )
    return tuple(_require_name(face, "face") for face in raw)


def _coerce_properties(
    owner: str,
    raw: Mapping[Any, Any],
) -> dict[str, PropertyValue]:
    properties: dict[str, PropertyValue] = {}
    for key, value in raw.items():
        name = _require_name(key, "property").lstrip(":")
        properties[name] = _coerce_value(owner, name, value)
    return properties


def _coerce_value(owner: str, name: str, value: Any) -> PropertyValue:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return Symbol(value)
    if isinstance(value, Mapping):
        nested = _coerce_properties(owner, value)
        return Plist(tuple(nested.items()))
    raise MappingError(
        f"Property {name!r} of {owner!r} has unsupported value {value!r}."
    )
