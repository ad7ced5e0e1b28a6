from hypothesis import given
from hypothesis import strategies as st

from pyparsel.Lexical import (
    ascii_char,
    ascii_string,
    assign,
    binary_digit,
    binary_number,
    carriage_return,
    char,
    decimal_number,
    digit,
    equal,
    floating_number,
    hexadecimal_digit,
    hexadecimal_number,
    minus,
    multiply,
    new_line,
    number,
    octal_digit,
    octal_number,
    one_whitespace,
    plus,
    regex,
    space,
    string,
    string_of_length,
    tab,
    whitespaces,
)
from pyparsel.Prim import run_parser
from pyparsel.Result import Failure, Success


def run(parser, input_str):
    return run_parser(parser, input_str)


# --- Basic Character Parsers ---


@given(st.characters())
def test_char_parser(c):
    # Should match the character
    res, err = run(char(c), c)
    assert res == c
    assert err is None

    # Should fail on different character
    diff = chr((ord(c) + 1) % 0x110000)
    res_fail, err_fail = run(char(c), diff)
    assert res_fail is None
    assert str(err_fail) == f"expected {c}, got {diff}"


@given(st.text(min_size=1))
def test_any_char(text):
    assert char().parse(text) == Success(text[0], text[1:])


def test_any_char_empty():
    res, err = run(char(), "")
    assert res is None
    assert str(err) == "expected char, got end of input"


def test_ascii():
    assert ascii_char().parse("a€") == Success("a", "€")
    res, err = run(ascii_char(), "€a")
    assert str(err) == "expected ascii, got €"

    assert ascii_string().parse("hello€") == Success("hello", "€")
    assert run(ascii_string(), "€")[0] is None


# --- String Parsers ---


@given(st.text())
def test_string_parser(s):
    p = string(s)

    # Positive case
    res, err = run(p, s + "suffix")
    assert res == s
    assert err is None

    if s:
        # Last character changed: nothing is consumed, the error shows what was there
        partial = s[:-1] + chr((ord(s[-1]) + 1) % 0x110000)
        res_fail, err_fail = run(p, partial)
        assert res_fail is None
        assert str(err_fail) == f"expected {s}, got {partial}"


def test_string_of_length():
    assert string_of_length(3).parse("abcd") == Success("abc", "d")
    assert isinstance(string_of_length(3).parse("ab"), Failure)


def test_regex():
    word = regex(r"[a-z]+")
    assert word.parse("abc123") == Success("abc", "123")
    res, err = run(word, "123")
    assert str(err) == "expected /[a-z]+/, got 1"


def test_regex_on_bytes():
    assert regex(rb"\x00+").parse(b"\x00\x00\x01") == Success(b"\x00\x00", b"\x01")


# --- Numbers ---


@given(st.sampled_from("0123456789"))
def test_digit(c):
    assert digit().parse(c) == Success(int(c), "")


def test_digit_rejects_non_ascii_digits():
    assert isinstance(digit().parse("٣"), Failure)


def test_binary():
    assert binary_digit().parse("1") == Success(1, "")
    res, err = run(binary_digit(), "2")
    assert str(err) == "expected 0 or 1, got 2"
    assert binary_number().parse("0b1011x") == Success(11, "x")


def test_octal():
    assert octal_digit().parse("7") == Success(7, "")
    assert str(run(octal_digit(), "8")[1]) == "expected 0 to 7, got 8"
    assert octal_number().parse("0o17") == Success(15, "")


def test_hex_digit():
    assert hexadecimal_digit().parse("a") == Success(10, "")
    assert hexadecimal_digit().parse("F") == Success(15, "")
    assert hexadecimal_digit().parse("9") == Success(9, "")
    assert str(run(hexadecimal_digit(), "g")[1]) == "expected 0 to 15, got 16"
    assert run(hexadecimal_digit(), "-")[0] is None


def test_hexadecimal_number():
    assert hexadecimal_number().parse("0xFFg") == Success(255, "g")
    assert hexadecimal_number().parse("0XdeadBEEF") == Success(0xdeadbeef, "")


def test_decimal_number():
    assert decimal_number().parse("123abc") == Success(123, "abc")


@given(st.integers(min_value=0, max_value=10**30))
def test_decimal_number_roundtrip(n):
    assert decimal_number().parse(str(n)) == Success(n, "")


def test_number_formats():
    assert number().parse("0x1f") == Success(31, "")
    assert number().parse("0o17") == Success(15, "")
    assert number().parse("0b101") == Success(5, "")
    assert number().parse("42") == Success(42, "")
    # A bare prefix is not a number in that base
    assert number().parse("0b2") == Success(0, "b2")


def test_floating_number():
    assert floating_number().parse("0.125x") == Success(0.125, "x")
    assert floating_number().parse("3,5") == Success(3.5, "")
    assert floating_number().parse("42.") == Success(42.0, ".")


# --- Punctuation & Whitespace ---


def test_punctuation():
    assert plus().parse("+1") == Success("+", "1")
    assert minus().parse("-1") == Success("-", "1")
    assert multiply().parse("*") == Success("*", "")
    assert assign().parse("=1") == Success("=", "1")
    assert equal().parse("==1") == Success("==", "1")
    assert isinstance(equal().parse("=1"), Failure)


def test_whitespace():
    assert space().parse(" x") == Success(" ", "x")
    assert new_line().parse("\nx") == Success("\n", "x")
    assert carriage_return().parse("\r\nx") == Success("\r\n", "x")
    assert tab().parse("\tx") == Success("\t", "x")
    assert one_whitespace().parse("\r\n") == Success("\r\n", "")


def test_whitespaces():
    assert whitespaces().parse(" \t\n x") == Success([" ", "\t", "\n", " "], "x")
    res, err = run(whitespaces(), "x")
    assert res is None
    # The last alternative tried is the tab
    assert str(err) == "expected \t, got x"
