from dataclasses import dataclass, fields, is_dataclass, replace
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar, Union

from .Stream import SourcePos, Stream

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


class ParseError:
    """
    Base for everything a failed parse can report.

    Subclasses only have to implement `describe`. `remaining` is the length of
    the input at the point where parsing diverged, when it is known; it lets a
    caller turn the error into a line/column against the original input.
    """
    remaining: Optional[int] = None

    def describe(self) -> str:
        return self.__class__.__name__

    def located(self, remaining: int) -> 'ParseError':
        """Return this error with its position filled in, unless it already has one."""
        if self.remaining is not None or not is_dataclass(self):
            return self
        if "remaining" not in {f.name for f in fields(self)}:
            return self
        return replace(self, remaining=remaining)

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class UnexpectedToken(ParseError):
    """Something other than `expected` was found."""
    expected: str
    got: str
    remaining: Optional[int] = None

    def describe(self) -> str:
        return f"expected {self.expected}, got {self.got if self.got else 'end of input'}"


@dataclass(frozen=True)
class Message(ParseError):
    text: str
    remaining: Optional[int] = None

    def describe(self) -> str:
        return self.text


@dataclass(frozen=True)
class ZeroWidthMatch(ParseError):
    """A repeated parser succeeded without consuming input."""
    combinator: str
    remaining: Optional[int] = None

    def describe(self) -> str:
        return f"{self.combinator}: applied parser succeeded without consuming input"


class ParseFailedError(Exception):
    """Raised only when a caller explicitly asks for a value out of a Failure."""
    def __init__(self, error: ParseError, pos: Optional[SourcePos] = None):
        self.error = error
        self.pos = pos
        if pos is not None:
            super().__init__(f"Parse error at {pos}: {error}")
        else:
            super().__init__(f"Parse error: {error}")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The parser consumed a prefix of its input; `rest` is what is left."""
    value: T
    rest: Stream

    ok = True

    @property
    def error(self) -> None:
        return None

    def value_or(self, default: Any) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> 'Success[U]':
        return Success(f(self.value), self.rest)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """The parser did not match. A failure never carries a remainder."""
    error: ParseError

    ok = False

    @property
    def value(self) -> None:
        return None

    @property
    def rest(self) -> None:
        return None

    def value_or(self, default: U) -> U:
        return default

    def map(self, f: Callable[[Any], Any]) -> 'Failure':
        return self

    def unwrap(self) -> Any:
        raise ParseFailedError(self.error)


ParseResult = Union[Success[T], Failure]


def only_successes(results: Iterable[ParseResult[T]]) -> List[Success[T]]:
    return [r for r in results if isinstance(r, Success)]

def only_failures(results: Iterable[ParseResult[Any]]) -> List[Failure]:
    return [r for r in results if isinstance(r, Failure)]
