"""
Flat N-tuple sequencing.

`a & b & c` produces ((a, b), c). The operators here run N parsers left to
right and hand back a flat (a, b, c) instead. Each one is built from binary
sequencing followed by a flattening step, so it has exactly the semantics of
the nested form: each parser consumes from the remainder of its predecessor,
and the first failure is the failure of the whole sequence.
"""
from typing import Any, Callable, Tuple

from .Parser import Parser

# Largest arity for which a sequencing operator is provided.
MAX_ARITY = 10


def _flattener(arity: int) -> Callable[[Any], Tuple[Any, ...]]:
    def flatten(nested: Any) -> Tuple[Any, ...]:
        # Unpack exactly arity - 1 levels so tuples produced by the
        # parsers themselves are left alone.
        items = []
        for _ in range(arity - 1):
            nested, last = nested
            items.append(last)
        items.append(nested)
        items.reverse()
        return tuple(items)
    return flatten

def make_sequencer(arity: int) -> Callable[..., Parser[Tuple[Any, ...]]]:
    """Build the sequencing operator that combines exactly `arity` parsers."""
    if not 2 <= arity <= MAX_ARITY:
        raise ValueError(f"sequence arity must be between 2 and {MAX_ARITY}, got {arity}")
    flatten = _flattener(arity)

    def sequencer(*parsers: Parser[Any]) -> Parser[Tuple[Any, ...]]:
        if len(parsers) != arity:
            raise TypeError(f"sequence{arity} takes {arity} parsers, got {len(parsers)}")
        nested = parsers[0]
        for p in parsers[1:]:
            nested = nested & p
        return nested.map(flatten)

    sequencer.__name__ = sequencer.__qualname__ = f"sequence{arity}"
    return sequencer


(sequence2, sequence3, sequence4, sequence5, sequence6,
 sequence7, sequence8, sequence9, sequence10) = (make_sequencer(n) for n in range(2, 11))

def sequence(*parsers: Parser[Any]) -> Parser[Tuple[Any, ...]]:
    """Combine 2 to MAX_ARITY parsers into one yielding a flat tuple."""
    return make_sequencer(len(parsers))(*parsers)
