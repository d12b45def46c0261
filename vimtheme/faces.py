"""Map tokenized highlight declarations onto Emacs face specifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .dump import Token, tokenize_dump
from .mappings import DEFAULT_TABLES, MappingTables, PropertyValue

NONE_VALUE = "NONE"
FOREGROUND_KEY = "guifg"
BACKGROUND_KEY = "guibg"
ATTRIBUTE_KEYS = ("gui", "term", "cterm")


@dataclass(frozen=True)
class FaceSpec:
    """A target face and the properties it should be given."""

    face: str
    properties: dict[str, PropertyValue] = field(default_factory=dict)


def normalize_value(value: Optional[str]) -> Optional[str]:
    """Return ``None`` for absent values and Vim's ``NONE`` placeholder."""

    if value is None or value == NONE_VALUE:
        return None
    return value


def attribute_properties(
    attribute_list: str,
    tables: MappingTables = DEFAULT_TABLES,
) -> dict[str, PropertyValue]:
    """Merge the properties of every known keyword in ``attribute_list``."""

    merged: dict[str, PropertyValue] = {}
    for keyword in attribute_list.split(","):
        if not keyword:
            continue
        properties = tables.attributes.get(keyword)
        if properties is None:
            continue
        merged.update(properties)
    return merged


def map_line(
    tokens: Sequence[Token],
    tables: MappingTables = DEFAULT_TABLES,
) -> list[FaceSpec]:
    """Return one ``FaceSpec`` per face mapped from the line's group.

    Lines whose group is not in ``tables`` produce nothing.
    """

    if not tokens:
        return []
    faces = tables.group_faces.get(tokens[0].key)
    if not faces:
        return []

    rest = tokens[1:]
    foreground = normalize_value(_token_value(rest, FOREGROUND_KEY))
    background = normalize_value(_token_value(rest, BACKGROUND_KEY))
    attributes = _attribute_list(rest)

    properties: dict[str, PropertyValue] = {}
    if attributes is not None:
        properties.update(attribute_properties(attributes, tables))
    if background is not None:
        properties["background"] = background
    if foreground is not None:
        properties["foreground"] = foreground

    return [FaceSpec(face, dict(properties)) for face in faces]


def map_dump(
    raw: str,
    tables: MappingTables = DEFAULT_TABLES,
) -> list[FaceSpec]:
    """Return the face specifications for every line of ``raw``, in order."""

    specs: list[FaceSpec] = []
    for tokens in tokenize_dump(raw):
        specs.extend(map_line(tokens, tables))
    return specs


def _token_value(tokens: Sequence[Token], key: str) -> Optional[str]:
    for token in tokens:
        if token.key == key:
            return token.value
    return None


def _attribute_list(tokens: Sequence[Token]) -> Optional[str]:
    for key in ATTRIBUTE_KEYS:
        value = normalize_value(_token_value(tokens, key))
        if value is not None:
            return value
    return None
