from __future__ import annotations

from vimtheme.dump import Token
from vimtheme.dump import parse_token
from vimtheme.dump import split_lines
from vimtheme.dump import tokenize_dump
from vimtheme.dump import tokenize_line


def test_split_lines_empty_dump_yields_nothing():
    assert split_lines("") == []


def test_split_lines_drops_unterminated_tail():
    assert split_lines("Normal xxx\nComment xxx") == ["Normal xxx"]


def test_split_lines_keeps_empty_lines_in_order():
    raw = "\nNormal xxx guifg=#ffffff\n\nComment xxx\n"

    assert split_lines(raw) == [
        "",
        "Normal xxx guifg=#ffffff",
        "",
        "Comment xxx",
    ]


def test_split_lines_is_repeatable():
    raw = "a\nb\n"

    assert split_lines(raw) == split_lines(raw) == ["a", "b"]


def test_parse_token_without_equals_has_no_value():
    assert parse_token("xxx") == Token("xxx", None)


def test_parse_token_splits_on_first_equals_only():
    assert parse_token("a=b=c") == Token("a", "b=c")


def test_parse_token_bare_equals():
    assert parse_token("=") == Token("", "")


def test_tokenize_line_collapses_whitespace_runs():
    tokens = tokenize_line("  Normal \t xxx   guifg=#ffffff  gui=bold ")

    assert tokens == [
        Token("Normal"),
        Token("xxx"),
        Token("guifg", "#ffffff"),
        Token("gui", "bold"),
    ]


def test_tokenize_line_whitespace_only_is_empty():
    assert tokenize_line(" \t  ") == []


def test_tokenize_dump_tokenizes_each_line():
    raw = "Normal guifg=#000000\nComment gui=italic\ntrailing"

    assert tokenize_dump(raw) == [
        [Token("Normal"), Token("guifg", "#000000")],
        [Token("Comment"), Token("gui", "italic")],
    ]
