from ninjagen import escape


def test_escape_prefixes_special_characters() -> None:
    assert escape("foo:bar$glo fiz.js") == "foo$:bar$$glo$ fiz.js"


def test_escape_leaves_other_characters_untouched() -> None:
    assert escape("src/main.c") == "src/main.c"
    assert escape("") == ""


def test_escape_twice_double_escapes() -> None:
    once = escape("a b")
    assert once == "a$ b"
    assert escape(once) == "a$$$ b"
