# Core
from .Stream import Stream, SourcePos, peek, drop, take, has_prefix, consumed
from .Result import (
    ParseError, UnexpectedToken, Message, ZeroWidthMatch, ParseFailedError,
    Success, Failure, ParseResult, only_successes, only_failures
)
from .Parser import Parser
from .Prim import pure, fail, lazy, satisfy, token, tokens, run_parser, parse_all, error_position

# Combinators
from .Combinators import (
    choice, count, between, option, optional, many, many1,
    skip_many, skip_many1, sep_by, sep_by1, chainl1, chainr1,
    eof, look_ahead, not_followed_by, parser_trace, parser_traced
)

# Flat N-ary sequencing
from .Sequence import (
    MAX_ARITY, make_sequencer, sequence,
    sequence2, sequence3, sequence4, sequence5, sequence6,
    sequence7, sequence8, sequence9, sequence10
)

# Lexical parsers are imported from pyparsel.Lexical
from . import Lexical
