import ast
import io

import pytest

from cookbook.textfmt import basename, comma, format_g, ints_to_string, main, quote


@pytest.mark.parametrize(
    "path, want",
    [("a", "a"), ("a.go", "a"), ("a/b/c.go", "c"), ("a/b.c.go", "b.c")],
)
def test_basename_examples(path, want):
    assert basename(path) == want


def test_basename_keeps_name_without_dot():
    assert basename("dir/name") == "name"


@pytest.mark.parametrize(
    "digits, want",
    [
        ("1", "1"),
        ("12", "12"),
        ("123", "123"),
        ("1234", "1,234"),
        ("1234567890", "1,234,567,890"),
    ],
)
def test_comma_examples(digits, want):
    assert comma(digits) == want


@pytest.mark.parametrize("digits", ["1", "12345", "123456", "9876543210123"])
def test_comma_removal_restores_input(digits):
    grouped = comma(digits)
    assert grouped.replace(",", "") == digits
    assert all(len(part) == 3 for part in grouped.split(",")[1:])


def test_ints_to_string():
    assert ints_to_string([1, 2, 3]) == "[1, 2, 3]"


def test_ints_to_string_empty():
    assert ints_to_string([]) == "[]"


def test_quote_plain():
    assert quote("hi") == '"hi"'


def test_quote_escapes_newline():
    assert quote("a\n") == '"a\\n"'


@pytest.mark.parametrize(
    "text", ["plain", "tab\there", 'q"uote', "back\\slash", "été", "bell\a\x01"]
)
def test_quote_round_trip(text):
    assert ast.literal_eval(quote(text)) == text


@pytest.mark.parametrize("value, want", [(212.0, "212"), (100.0, "100")])
def test_format_g_source_values(value, want):
    assert format_g(value) == want


def test_format_g_exponent_form():
    assert format_g(1e6) == "1e+06"


@pytest.mark.parametrize(
    "value", [0.1, -17.77777777777778, 273.15, 1e-5, 123456.0, 1234567.0, 2.5e300]
)
def test_format_g_round_trip(value):
    assert float(format_g(value)) == value


def test_main_comma(capsys):
    assert main(["comma", "1234"]) == 0
    assert capsys.readouterr().out == "  1,234\n"


def test_main_printints_default(capsys):
    main(["printints"])
    assert capsys.readouterr().out == "[1, 2, 3]\n"


def test_main_basename(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a/b.c.go\na.go\n"))
    main(["basename"])
    assert capsys.readouterr().out.splitlines() == ["b.c", "a"]