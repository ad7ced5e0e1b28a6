from typing import Any, Callable, Generic, List, Optional, Tuple

from .Result import Failure, ParseError, ParseResult, Success, ZeroWidthMatch, T, U
from .Stream import Stream, consumed


class Parser(Generic[T]):
    """
    A parser is a function from an input stream to a ParseResult, wrapped so it
    can be combined with the operators below. Parsers are immutable: every
    combinator returns a new Parser and never modifies the ones it was given.

        a & b    sequence, result is the pair (a, b)
        a > b    sequence, keep only b's result
        a < b    sequence, keep only a's result
        a | b    ordered choice with full backtracking
        a >> f   bind, f receives a's result and returns the next parser

    Note that `a > b > c` is a chained comparison in Python; parenthesize, or
    use `skip_left` / `skip_right`.
    """
    __slots__ = ('_parse_fn', 'name')

    def __init__(self, parse_fn: Callable[[Stream], ParseResult[T]], name: Optional[str] = None):
        self._parse_fn = parse_fn
        self.name = name

    def parse(self, input: Stream) -> ParseResult[T]:
        return self._parse_fn(input)

    def __call__(self, input: Stream) -> ParseResult[T]:
        return self._parse_fn(input)

    def __repr__(self) -> str:
        if self.name:
            return f"<Parser {self.name}>"
        return f"<Parser at {id(self):#x}>"

    def named(self, name: str) -> 'Parser[T]':
        """The same parser under a name used by repr and tracing."""
        return Parser(self._parse_fn, name)

    # Functor map
    def map(self, f: Callable[[T], U]) -> 'Parser[U]':
        def parse(input: Stream) -> ParseResult[U]:
            res = self(input)
            if isinstance(res, Failure):
                return res
            return Success(f(res.value), res.rest)
        return Parser(parse)

    def filter(self, check: Callable[[T], Optional[ParseError]]) -> 'Parser[T]':
        """
        Run `check` on every successful result. If it returns an error the
        parse fails with that error and whatever the underlying parser consumed
        is given back.
        """
        def parse(input: Stream) -> ParseResult[T]:
            res = self(input)
            if isinstance(res, Failure):
                return res
            err = check(res.value)
            if err is not None:
                return Failure(err.located(len(input)))
            return res
        return Parser(parse)

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        def parse(input: Stream) -> ParseResult[U]:
            res = self(input)
            if isinstance(res, Failure):
                return res
            return f(res.value)(res.rest)
        return Parser(parse)

    def __rshift__(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        return self.bind(f)

    # Sequence (~)
    def then(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        def parse(input: Stream) -> ParseResult[Tuple[T, U]]:
            res1 = self(input)
            if isinstance(res1, Failure):
                return res1
            res2 = other(res1.rest)
            if isinstance(res2, Failure):
                return res2
            return Success((res1.value, res2.value), res2.rest)
        return Parser(parse)

    def __and__(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        return self.then(other)

    # Sequence (>~), keeps the right result
    def skip_left(self, other: 'Parser[U]') -> 'Parser[U]':
        def parse(input: Stream) -> ParseResult[U]:
            res1 = self(input)
            if isinstance(res1, Failure):
                return res1
            return other(res1.rest)
        return Parser(parse)

    def __gt__(self, other: 'Parser[U]') -> 'Parser[U]':
        return self.skip_left(other)

    # Sequence (~>), keeps the left result
    def skip_right(self, other: 'Parser[Any]') -> 'Parser[T]':
        def parse(input: Stream) -> ParseResult[T]:
            res1 = self(input)
            if isinstance(res1, Failure):
                return res1
            res2 = other(res1.rest)
            if isinstance(res2, Failure):
                return res2
            return Success(res1.value, res2.rest)
        return Parser(parse)

    def __lt__(self, other: 'Parser[Any]') -> 'Parser[T]':
        return self.skip_right(other)

    # Ordered choice (|)
    def or_else(self, other: 'Parser[T]') -> 'Parser[T]':
        def parse(input: Stream) -> ParseResult[T]:
            res = self(input)
            if isinstance(res, Success):
                return res
            # Both sides see the same input; a failure never consumed anything.
            return other(input)
        return Parser(parse)

    def __or__(self, other: 'Parser[T]') -> 'Parser[T]':
        return self.or_else(other)

    # Repetition
    def at_least_once(self) -> 'Parser[List[T]]':
        """One or more occurrences. Fails with the first failure if there are none."""
        return _repeat(self, 1, "at_least_once")

    def many(self) -> 'Parser[List[T]]':
        """Zero or more occurrences. Never fails unless the parser matches empty."""
        return _repeat(self, 0, "many")

    def exactly(self, count: int) -> 'Parser[List[T]]':
        if count < 0:
            raise ValueError(f"exactly: count must not be negative, got {count}")

        def parse(input: Stream) -> ParseResult[List[T]]:
            results: List[T] = []
            current = input
            for _ in range(count):
                res = self(current)
                if isinstance(res, Failure):
                    return res
                results.append(res.value)
                current = res.rest
            return Success(results, current)
        return Parser(parse)

    def optional(self) -> 'Parser[Optional[T]]':
        """The parser's value, or None without consuming anything if it fails."""
        def parse(input: Stream) -> ParseResult[Optional[T]]:
            res = self(input)
            if isinstance(res, Failure):
                return Success(None, input)
            return res
        return Parser(parse)


def _repeat(p: Parser[T], minimum: int, combinator: str) -> Parser[List[T]]:
    def parse(input: Stream) -> ParseResult[List[T]]:
        results: List[T] = []
        current = input
        while True:
            res = p(current)
            if isinstance(res, Failure):
                if len(results) < minimum:
                    return res
                return Success(results, current)
            if consumed(current, res.rest) <= 0:
                # Repeating a parser that matches empty would never terminate.
                return Failure(ZeroWidthMatch(combinator, len(current)))
            results.append(res.value)
            current = res.rest
    return Parser(parse)
