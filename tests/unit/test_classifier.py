import pytest

from addrspec.utils.classifier import (
    is_atom_char,
    is_atom_text,
    is_domain_label,
    is_domain_literal_char,
    is_dot_atom_text,
    is_quoted_content,
    is_quoted_text_char,
    is_reserved_uni_char,
    is_utf8_non_ascii_char,
    is_visible_char,
    is_whitespace_char,
)


def test_non_ascii_detection() -> None:
    assert is_utf8_non_ascii_char("ü") is True
    assert is_utf8_non_ascii_char("😀") is True
    assert is_utf8_non_ascii_char("A") is False
    assert is_utf8_non_ascii_char("\x7f") is False


def test_visible_char_bounds() -> None:
    assert is_visible_char("A") is True
    assert is_visible_char("~") is True
    assert is_visible_char("!") is True
    assert is_visible_char(" ") is False
    assert is_visible_char("\x7f") is False
    assert is_visible_char("é") is False


def test_whitespace_is_space_or_tab_only() -> None:
    assert is_whitespace_char(" ") is True
    assert is_whitespace_char("\t") is True
    assert is_whitespace_char("\n") is False
    assert is_whitespace_char("A") is False


def test_quoted_text_excludes_quote_and_backslash() -> None:
    assert is_quoted_text_char("!") is True
    assert is_quoted_text_char("#") is True
    assert is_quoted_text_char("@") is True
    assert is_quoted_text_char("]") is True
    assert is_quoted_text_char('"') is False
    assert is_quoted_text_char("\\") is False
    assert is_quoted_text_char(" ") is False


def test_domain_literal_chars() -> None:
    assert is_domain_literal_char("A") is True
    assert is_domain_literal_char("~") is True
    assert is_domain_literal_char(":") is True
    assert is_domain_literal_char("ß") is True
    for char in ("\\", "[", "]", " "):
        assert is_domain_literal_char(char) is False


@pytest.mark.parametrize("char", list("Az09!#$%&'*+-/=?^_`{|}~") + ["ü", "中"])
def test_atom_char_accepts_atext(char: str) -> None:
    assert is_atom_char(char) is True


@pytest.mark.parametrize("char", list('()<>[]:;@\\,."') + [" ", "\t", "\x7f"])
def test_atom_char_rejects_specials(char: str) -> None:
    assert is_atom_char(char) is False


def test_atom_text_requires_content() -> None:
    assert is_atom_text("abc") is True
    assert is_atom_text("ünïcödé") is True
    assert is_atom_text("") is False
    assert is_atom_text("a(c") is False


def test_dot_atom_text_rejects_empty_atoms() -> None:
    assert is_dot_atom_text("a.b.c") is True
    assert is_dot_atom_text("a") is True
    assert is_dot_atom_text("a..b") is False
    assert is_dot_atom_text(".a") is False
    assert is_dot_atom_text("a.") is False
    assert is_dot_atom_text("") is False


def test_quoted_content_handles_quoted_pairs() -> None:
    assert is_quoted_content('\\"a\\"') is True
    assert is_quoted_content("with space\tand tab") is True
    assert is_quoted_content("\\\\") is True
    assert is_quoted_content("") is True
    assert is_quoted_content('bad"') is False
    assert is_quoted_content("trailing\\") is False
    assert is_quoted_content("\\ ") is False
    assert is_quoted_content("ü") is False


def test_domain_label_shape() -> None:
    assert is_domain_label("example") is True
    assert is_domain_label("a") is True
    assert is_domain_label("x-1") is True
    assert is_domain_label("a--b") is True
    assert is_domain_label("-example") is False
    assert is_domain_label("example-") is False
    assert is_domain_label("under_score") is False
    assert is_domain_label("bücher") is False
    assert is_domain_label("") is False


def test_reserved_uri_chars() -> None:
    for char in "!#$%&'()*+,/:;=?[]":
        assert is_reserved_uni_char(char) is True
    for char in ("z", "@", ".", "-", "~", "ü"):
        assert is_reserved_uni_char(char) is False
