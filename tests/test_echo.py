import io

import pytest

from cookbook.echo import concat_args, echo, join_args, main, numbered_args, time_echoes


@pytest.mark.parametrize(
    "newline, sep, args, want",
    [
        (True, "", [], "\n"),
        (False, "", [], ""),
        (True, "\t", ["one", "two", "three"], "one\ttwo\tthree\n"),
        (True, ",", ["a", "b", "c"], "a,b,c\n"),
        (False, ":", ["1", "2", "3"], "1:2:3"),
    ],
)
def test_echo(newline, sep, args, want):
    out = io.StringIO()
    echo(args, sep, newline, out)
    assert out.getvalue() == want


@pytest.mark.parametrize("args", [[], ["x"], ["a", "b", "c"], ["with space", "z"]])
def test_concat_matches_join(args):
    assert concat_args(args) == join_args(args)


def test_join_args():
    assert join_args(["a", "b", "c"]) == "a b c"


def test_numbered_args():
    assert numbered_args(["a", "b"]) == ["1 a", "2 b"]


def test_numbered_args_empty():
    assert numbered_args([]) == []


def test_time_echoes():
    results = time_echoes(["a", "b"])
    assert [name for name, _, _ in results] == ["echo1", "echo2", "echo3"]
    assert all(output == "a b" for _, output, _ in results)
    assert all(seconds >= 0 for _, _, seconds in results)


def test_main_separator(capsys):
    assert main(["-s", ",", "a", "b"]) == 0
    assert capsys.readouterr().out == "a,b\n"


def test_main_no_newline(capsys):
    main(["-n", "1", "2"])
    assert capsys.readouterr().out == "1 2"