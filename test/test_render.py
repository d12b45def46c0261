from __future__ import annotations

from vimtheme.faces import FaceSpec
from vimtheme.mappings import Plist
from vimtheme.mappings import Symbol
from vimtheme.mappings import build_tables
from vimtheme.render import GENERATOR_URL
from vimtheme.render import Theme
from vimtheme.render import build_theme
from vimtheme.render import convert_dump
from vimtheme.render import render_plist
from vimtheme.render import render_theme
from vimtheme.render import render_value


def test_render_value_literals():
    assert render_value(True) == "t"
    assert render_value(False) == "nil"
    assert render_value(Symbol("bold")) == "bold"
    assert render_value("#ffffff") == '"#ffffff"'
    assert render_value('a "b" \\c') == '"a \\"b\\" \\\\c"'
    assert render_value(Plist((("style", Symbol("wave")),))) == (
        "(:style wave)"
    )


def test_render_plist_keeps_property_order():
    properties = {
        "weight": Symbol("bold"),
        "background": "#000000",
        "foreground": "#ffffff",
    }

    assert render_plist(properties) == (
        ':weight bold :background "#000000" :foreground "#ffffff"'
    )


def test_render_theme_empty_keeps_all_boilerplate():
    document = render_theme(Theme(name="demo"))

    assert document == (
        ";;; demo-theme.el --- demo theme\n"
        ";;\n"
        ";; Generated by vimtheme from a Vim colorscheme.\n"
        f";; Source: {GENERATOR_URL}\n"
        "\n"
        "(deftheme demo\n"
        '  "Converted from a Vim colorscheme.")\n'
        "\n"
        "(custom-theme-set-faces\n"
        " 'demo)\n"
        "\n"
        "(provide-theme 'demo)\n"
        "\n"
        ";; Local Variables:\n"
        ";; no-byte-compile: t\n"
        ";; End:\n"
        "\n"
        ";;; demo-theme.el ends here\n"
    )


def test_render_theme_lists_faces_in_order_without_deduplicating():
    theme = build_theme(
        "demo",
        [
            FaceSpec("default", {"foreground": "#ffffff"}),
            FaceSpec("region", {}),
            FaceSpec("default", {"weight": Symbol("bold")}),
        ],
    )

    document = render_theme(theme)

    assert (
        "(custom-theme-set-faces\n"
        " 'demo\n"
        " '(default ((t (:foreground \"#ffffff\"))))\n"
        " '(region ((t ())))\n"
        " '(default ((t (:weight bold)))))\n"
        "\n"
        "(provide-theme 'demo)\n"
    ) in document


def test_render_theme_is_deterministic():
    theme = build_theme("demo", [FaceSpec("cursor", {"background": "red"})])

    assert render_theme(theme) == render_theme(theme)


def test_convert_dump_end_to_end():
    tables = build_tables(
        {"Normal": "default"},
        {"bold": {"weight": "bold"}},
        replace=True,
    )

    document = convert_dump(
        "night",
        "Normal guifg=#ffffff guibg=#000000 gui=bold\n",
        tables,
    )

    assert (
        " '(default ((t (:weight bold :background \"#000000\" "
        ":foreground \"#ffffff\")))))\n"
    ) in document
    assert document.count(" '(default ") == 1


def test_convert_dump_empty_input():
    document = convert_dump("blank", "")

    assert "(custom-theme-set-faces\n 'blank)\n" in document
    assert "(deftheme blank\n" in document
    assert "(provide-theme 'blank)\n" in document
    assert ";; no-byte-compile: t\n" in document
