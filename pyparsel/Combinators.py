import logging
from typing import Any, Callable, List, Optional

from .Parser import Parser, _repeat
from .Prim import fail, pure, show_token
from .Result import Failure, Message, ParseResult, Success, UnexpectedToken, T
from .Stream import Stream, peek, take

log = logging.getLogger("pyparsel")

OpFuncType = Callable[[T, T], T]


# 1. choice: Tries parsers in order until one succeeds
def choice(parsers: List[Parser[T]]) -> Parser[T]:
    """
    Applies a list of parsers in order until one succeeds.
    Fails with the error of the last alternative if none succeed.
    """
    if not parsers:
        return fail("no alternatives")
    result = parsers[0]
    for p in parsers[1:]:
        result = result | p
    return result

# 2. count: Parses n occurrences of a parser
def count(n: int, p: Parser[T]) -> Parser[List[T]]:
    return p.exactly(n)

# 3. between: Parses an opening parser, a main parser, and a closing parser
def between(open: Parser[Any], close: Parser[Any], p: Parser[T]) -> Parser[T]:
    """
    Parses 'open', then 'p', then 'close', returning the result of 'p'.
    """
    return open.skip_left(p).skip_right(close)

# 4. option: Tries a parser, returning a default value on failure
def option(x: T, p: Parser[T]) -> Parser[T]:
    return p | pure(x)

# 5. optional: Tries a parser, returning None on failure
def optional(p: Parser[T]) -> Parser[Optional[T]]:
    return p.optional()

# 6. many / many1
def many(p: Parser[T]) -> Parser[List[T]]:
    return p.many()

def many1(p: Parser[T]) -> Parser[List[T]]:
    return p.at_least_once()

# 7. skipMany / skipMany1: Repetition that discards results
def skip_many(p: Parser[Any]) -> Parser[None]:
    return _repeat(p, 0, "skip_many").map(lambda _: None)

def skip_many1(p: Parser[Any]) -> Parser[None]:
    return _repeat(p, 1, "skip_many1").map(lambda _: None)

# 8. sepBy1: Parses one or more occurrences separated by a separator
def sep_by1(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    """
    Parses one or more occurrences of p separated by sep, returning a list of p's results.
    A trailing separator is left unconsumed.
    """
    return (p & many(sep > p)).map(lambda pair: [pair[0]] + pair[1])

# 9. sepBy: Parses zero or more occurrences separated by a separator
def sep_by(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    return sep_by1(p, sep) | pure([])

# 10. chainl1: Left-associative operator chain
def chainl1(p: Parser[T], op: Parser[OpFuncType]) -> Parser[T]:
    """
    Parses one or more p separated by op, applying op left-associatively.
    An op that is not followed by a p fails the whole chain.
    """
    def parse(input: Stream) -> ParseResult[T]:
        res = p(input)
        if isinstance(res, Failure):
            return res
        acc, current = res.value, res.rest

        while True:
            res_op = op(current)
            if isinstance(res_op, Failure):
                return Success(acc, current)
            res_next = p(res_op.rest)
            if isinstance(res_next, Failure):
                return res_next
            acc = res_op.value(acc, res_next.value)
            current = res_next.rest
    return Parser(parse)

# 11. chainr1: Right-associative operator chain
def chainr1(p: Parser[T], op: Parser[OpFuncType]) -> Parser[T]:
    """
    Parses one or more p separated by op, applying op right-associatively.
    """
    def parse(input: Stream) -> ParseResult[T]:
        res = p(input)
        if isinstance(res, Failure):
            return res
        terms = [res.value]
        ops: List[OpFuncType] = []
        current = res.rest

        while True:
            res_op = op(current)
            if isinstance(res_op, Failure):
                break
            res_next = p(res_op.rest)
            if isinstance(res_next, Failure):
                return res_next
            ops.append(res_op.value)
            terms.append(res_next.value)
            current = res_next.rest

        acc = terms[-1]
        for func, term in zip(reversed(ops), reversed(terms[:-1])):
            acc = func(term, acc)
        return Success(acc, current)
    return Parser(parse)

# 12. eof: Succeeds only at the end of input
def eof() -> Parser[None]:
    def parse(input: Stream) -> ParseResult[None]:
        if len(input) == 0:
            return Success(None, input)
        return Failure(UnexpectedToken("end of input", show_token(peek(input)), len(input)))
    return Parser(parse, "eof")

# 13. lookAhead: Parse without consuming input
def look_ahead(p: Parser[T]) -> Parser[T]:
    def parse(input: Stream) -> ParseResult[T]:
        res = p(input)
        if isinstance(res, Failure):
            return res
        return Success(res.value, input)
    return Parser(parse)

# 14. notFollowedBy: Succeeds, consuming nothing, only where p fails
def not_followed_by(p: Parser[Any]) -> Parser[None]:
    def parse(input: Stream) -> ParseResult[None]:
        res = p(input)
        if isinstance(res, Failure):
            return Success(None, input)
        return Failure(Message(f"unexpected {show_token(res.value)}", len(input)))
    return Parser(parse)

# 15. parserTrace: Logs the remaining input and consumes nothing
def parser_trace(label: str) -> Parser[None]:
    def parse(input: Stream) -> ParseResult[None]:
        log.debug('%s: %r%s', label, take(input, 30), '...' if len(input) > 30 else '')
        return Success(None, input)
    return Parser(parse)

# 16. parserTraced: Logs entry to p, and whether it matched or backtracked
def parser_traced(label: str, p: Parser[T]) -> Parser[T]:
    def parse(input: Stream) -> ParseResult[T]:
        log.debug('%s: trying %r at %r', label, p, take(input, 30))
        res = p(input)
        if isinstance(res, Failure):
            log.debug('%s: backtracked, %s', label, res.error)
        else:
            log.debug('%s: matched %r, %d left', label, res.value, len(res.rest))
        return res
    return Parser(parse, label)
