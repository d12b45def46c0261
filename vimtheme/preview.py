"""Rich previews of converted face specifications."""

from __future__ import annotations

from typing import Any

from rich.color import Color, ColorParseError
from rich.style import Style
from rich.text import Text

from .faces import FaceSpec
from .mappings import Plist
from .render import render_plist


def preview_style(spec: FaceSpec) -> Style:
    """Return the closest Rich ``Style`` for ``spec``."""

    properties = spec.properties
    underline = properties.get("underline")
    return Style(
        color=_parse_color(properties.get("foreground")),
        bgcolor=_parse_color(properties.get("background")),
        bold=_flag(properties.get("weight") == "bold"),
        italic=_flag(properties.get("slant") == "italic"),
        underline=_flag(underline is True or isinstance(underline, Plist)),
        strike=_flag(properties.get("strike-through") is True),
        reverse=_flag(properties.get("inverse-video") is True),
    )


def preview_line(spec: FaceSpec) -> Text:
    """Return ``spec`` as a styled face name followed by its plist."""

    text = Text()
    text.append(spec.face, style=preview_style(spec))
    plist = render_plist(spec.properties)
    if plist:
        text.append(f"  {plist}", style=Style(dim=True))
    return text


def _parse_color(value: Any) -> Color | None:
    if not isinstance(value, str):
        return None
    try:
        return Color.parse(value)
    except ColorParseError:
        return None


def _flag(enabled: bool) -> bool | None:
    return True if enabled else None
