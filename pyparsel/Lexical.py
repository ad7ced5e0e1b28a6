import re
from functools import reduce
from typing import List, Optional, Union

from .Parser import Parser
from .Prim import show_token, token, tokens
from .Result import Failure, ParseError, ParseResult, Success, UnexpectedToken
from .Stream import Stream, take


def _build_number(digits: List[int], base: int) -> int:
    """Digits are most significant first."""
    return reduce(lambda acc, d: acc * base + d, digits, 0)

def _in_range(low: int, high: int, expected: str):
    def check(n: int) -> Optional[ParseError]:
        if low <= n <= high:
            return None
        return UnexpectedToken(expected, str(n))
    return check


# --- Characters and strings ---

# 1. char: Parses any character, or one specific character
def char(c: Optional[str] = None) -> Parser[str]:
    """Parses the character c and returns it. Without c, parses any character."""
    if c is None:
        return token(lambda t: t, "char")
    return token(lambda t: t if t == c else None, c)

# 2. asciiChar: Parses a character from the ascii range
def ascii_char() -> Parser[str]:
    def check(c: str) -> Optional[ParseError]:
        return None if c.isascii() else UnexpectedToken("ascii", c)
    return char().filter(check)

# 3. asciiString: Parses one or more ascii characters
def ascii_string() -> Parser[str]:
    return ascii_char().at_least_once().map("".join)

# 4. string: Parses a specific string
def string(s: str) -> Parser[str]:
    """Parses the exact string s and returns it."""
    return tokens(s)

# 5. stringOfLength: Parses any string of exactly n characters
def string_of_length(n: int) -> Parser[str]:
    return char().exactly(n).map("".join)

# 6. regex: Parses the longest prefix matched by a regular expression
def regex(pattern: Union[str, bytes], flags: int = 0) -> Parser[Union[str, bytes]]:
    """
    Matches `pattern` at the start of the input and returns the matched text.
    Works on str or bytes input, matching the type of the pattern.
    """
    compiled = re.compile(pattern, flags)
    shown = pattern if isinstance(pattern, str) else pattern.decode('latin-1')

    def parse(input: Stream) -> ParseResult[Union[str, bytes]]:
        m = compiled.match(input)
        if m is None:
            got = show_token(take(input, 1)) if len(input) else ""
            return Failure(UnexpectedToken(f"/{shown}/", got, len(input)))
        return Success(m.group(0), input[m.end():])
    return Parser(parse, f"regex /{shown}/")


# --- Numbers ---

# 7. digit: Parses an ascii digit and returns its value
def digit() -> Parser[int]:
    return token(lambda c: int(c) if c.isascii() and c.isdigit() else None, "digit")

# 8. binaryDigit: 0 or 1
def binary_digit() -> Parser[int]:
    return digit().filter(_in_range(0, 1, "0 or 1"))

# 9. binaryNumber: numbers of the form 0b10110110
def binary_number() -> Parser[int]:
    return (string("0b") > binary_digit().at_least_once()).map(lambda ds: _build_number(ds, 2))

# 10. octalDigit: 0 to 7
def octal_digit() -> Parser[int]:
    return digit().filter(_in_range(0, 7, "0 to 7"))

# 11. octalNumber: numbers of the form 0o12372106
def octal_number() -> Parser[int]:
    return (string("0o") > octal_digit().at_least_once()).map(lambda ds: _build_number(ds, 8))

# 12. hexadecimalDigit: 0-9, a-f, A-F, returned as 0 to 15
def hexadecimal_digit() -> Parser[int]:
    def value(c: str) -> int:
        # Letters beyond f get values above 15 and are rejected below.
        return int(c, 36) if c.isascii() and c.isalnum() else -1
    return char().map(value).filter(_in_range(0, 15, "0 to 15"))

# 13. hexadecimalNumber: numbers of the form 0xdeadbeef or 0XDEADBEEF
def hexadecimal_number() -> Parser[int]:
    prefix = string("0x") | string("0X")
    return (prefix > hexadecimal_digit().at_least_once()).map(lambda ds: _build_number(ds, 16))

# 14. decimalNumber: one or more decimal digits
def decimal_number() -> Parser[int]:
    return digit().at_least_once().map(lambda ds: _build_number(ds, 10))

# 15. number: hexadecimal, octal, binary or decimal
def number() -> Parser[int]:
    return hexadecimal_number() | octal_number() | binary_number() | decimal_number()

# 16. floatingNumber: 0.123 or 0,123 or 42
def floating_number() -> Parser[float]:
    return regex(r"[0-9]+([.,][0-9]+)?").map(lambda s: float(s.replace(",", ".")))


# --- Common characters ---

def plus() -> Parser[str]:
    return char("+")

def minus() -> Parser[str]:
    return char("-")

def multiply() -> Parser[str]:
    return char("*")

def divide() -> Parser[str]:
    return char("/")

def assign() -> Parser[str]:
    return char("=")

def equal() -> Parser[str]:
    return (assign() & assign()).map(lambda pair: pair[0] + pair[1])


# --- Whitespace ---

def space() -> Parser[str]:
    return char(" ")

def new_line() -> Parser[str]:
    return char("\n")

def carriage_return() -> Parser[str]:
    """Parses a CRLF line ending and returns it."""
    return string("\r\n")

def tab() -> Parser[str]:
    return char("\t")

def one_whitespace() -> Parser[str]:
    return space() | new_line() | carriage_return() | tab()

def whitespaces() -> Parser[List[str]]:
    """At least one whitespace."""
    return one_whitespace().at_least_once()
