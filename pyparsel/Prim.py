from typing import Any, Callable, Optional, Sequence, Tuple

from .Parser import Parser
from .Result import Failure, Message, ParseError, ParseFailedError, ParseResult, Success, UnexpectedToken, T
from .Stream import SourcePos, Stream, drop, has_prefix, peek, take


def show_token(tok: Any) -> str:
    return tok if isinstance(tok, str) else repr(tok)

def pure(value: T) -> Parser[T]:
    """A parser that succeeds with a value without consuming input."""
    return Parser(lambda input: Success(value, input))

def fail(msg: str) -> Parser[Any]:
    """A parser that always fails with a message."""
    return Parser(lambda input: Failure(Message(msg, len(input))))

def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it runs. Needed for recursive grammars."""
    return Parser(lambda input: thunk()(input))

def satisfy(predicate: Callable[[Any], bool], expected: str = "token",
            show_tok: Callable[[Any], str] = show_token) -> Parser[Any]:
    """Parse a single element of the stream for which predicate holds."""
    def parse(input: Stream) -> ParseResult[Any]:
        if len(input) == 0:
            return Failure(UnexpectedToken(expected, "", 0))
        tok = peek(input)
        if not predicate(tok):
            return Failure(UnexpectedToken(expected, show_tok(tok), len(input)))
        return Success(tok, drop(input))
    return Parser(parse)

def token(test_tok: Callable[[Any], Optional[T]], expected: str = "token",
          show_tok: Callable[[Any], str] = show_token) -> Parser[T]:
    """
    Parse a single element, converting it with `test_tok`. A None from
    `test_tok` rejects the element.
    """
    def parse(input: Stream) -> ParseResult[T]:
        if len(input) == 0:
            return Failure(UnexpectedToken(expected, "", 0))
        tok = peek(input)
        value = test_tok(tok)
        if value is None:
            return Failure(UnexpectedToken(expected, show_tok(tok), len(input)))
        return Success(value, drop(input))
    return Parser(parse)

def tokens(prefix: Sequence[Any], expected: Optional[str] = None,
           show_tokens: Callable[[Any], str] = show_token) -> Parser[Any]:
    """
    Match a literal prefix of the stream and return it. The prefix must have
    the same kind as the stream (str for text, bytes for binary, list or tuple
    for token streams).
    """
    n = len(prefix)
    label = expected if expected is not None else show_tokens(prefix)

    def parse(input: Stream) -> ParseResult[Any]:
        if has_prefix(input, prefix):
            return Success(take(input, n), drop(input, n))
        return Failure(UnexpectedToken(label, show_tokens(take(input, n)) if len(input) else "", len(input)))
    return Parser(parse)


def error_position(original: Stream, error: ParseError, source_name: str = "") -> Optional[SourcePos]:
    if error.remaining is None:
        return None
    return SourcePos.from_offset(original, len(original) - error.remaining, source_name)

def run_parser(parser: Parser[T], input: Stream) -> Tuple[Optional[T], Optional[ParseError]]:
    res = parser(input)
    if isinstance(res, Failure):
        return None, res.error
    return res.value, None

def parse_all(parser: Parser[T], input: Stream, source_name: str = "") -> T:
    """
    Run a parser over the whole input and return its value. Raises
    ParseFailedError if it fails or leaves input behind.
    """
    res = parser(input)
    if isinstance(res, Failure):
        raise ParseFailedError(res.error, error_position(input, res.error, source_name))
    if len(res.rest) > 0:
        err = UnexpectedToken("end of input", show_token(peek(res.rest)), len(res.rest))
        raise ParseFailedError(err, error_position(input, err, source_name))
    return res.value
