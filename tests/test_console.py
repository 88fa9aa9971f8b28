import io

import pytest

from opinionated.console import Console


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_read_char_skips_whitespace():
    console, _ = make("  \n x y")
    assert console.read_char() == "x"
    assert console.read_char() == "y"


def test_read_int_then_rest_of_line():
    console, _ = make("  42 rest\n")
    assert console.read_int() == 42
    assert console.read_line() == " rest"


def test_read_int_negative():
    console, _ = make("-7\n")
    assert console.read_int() == -7


def test_read_int_rejects_letters():
    console, _ = make("abc")
    with pytest.raises(ValueError):
        console.read_int()


def test_ignore_then_read_line():
    console, _ = make("1\nhello world\n")
    assert console.read_char() == "1"
    console.ignore()
    assert console.read_line() == "hello world"


def test_read_line_at_eof_raises():
    console, _ = make("")
    with pytest.raises(EOFError):
        console.read_line()


def test_read_char_at_eof_raises():
    console, _ = make("   ")
    with pytest.raises(EOFError):
        console.read_char()


def test_ask_yes_no_repeats_on_invalid():
    console, out = make("q Y")
    assert console.ask_yes_no("bad\n") is True
    assert out.getvalue() == "bad\n"


def test_ask_yes_no_no():
    console, out = make("n")
    assert console.ask_yes_no("bad\n") is False
    assert out.getvalue() == ""


def test_write_goes_to_output():
    console, out = make("")
    console.write("abc")
    console.write("def")
    assert out.getvalue() == "abcdef"