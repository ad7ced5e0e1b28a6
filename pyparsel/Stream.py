from dataclasses import dataclass
from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

S = TypeVar('S', bound='Stream')

@runtime_checkable
class Stream(Protocol):
    """
    Anything the combinators can consume: str, bytes, list, tuple, or any other
    sliceable sequence. Slicing must return a fresh value of the same kind.
    """
    def __len__(self) -> int: ...
    def __getitem__(self, index: Any) -> Any: ...


def peek(s: Stream) -> Any:
    """First element of the stream, or None when it is empty."""
    if len(s) == 0:
        return None
    return s[0]

def drop(s: S, n: int = 1) -> S:
    """The stream without its first n elements."""
    return s[n:]

def take(s: S, k: int) -> S:
    """The first k elements of the stream (fewer if it is shorter)."""
    return s[:k]

def has_prefix(s: Stream, prefix: Sequence[Any]) -> bool:
    """True if the stream starts with the given prefix."""
    if isinstance(s, (str, bytes)) and isinstance(prefix, type(s)):
        return s.startswith(prefix)
    if len(prefix) > len(s):
        return False
    return all(a == b for a, b in zip(s[:len(prefix)], prefix))

def consumed(original: Stream, rest: Stream) -> int:
    """Number of elements consumed to get from original to rest."""
    return len(original) - len(rest)


@dataclass(frozen=True)
class SourcePos:
    """A human readable position, derived from an offset into the original input."""
    line: int = 1
    column: int = 1
    name: str = ""

    def update(self, token: Any) -> 'SourcePos':
        if token == '\n':
            return SourcePos(self.line + 1, 1, self.name)
        if token == '\t':
            return SourcePos(self.line, self.column + 8 - ((self.column - 1) % 8), self.name)
        return SourcePos(self.line, self.column + 1, self.name)

    @classmethod
    def from_offset(cls, original: Stream, offset: int, name: str = "") -> 'SourcePos':
        # Only text has lines; every other stream is a single line of tokens.
        if not isinstance(original, str):
            return cls(1, offset + 1, name)
        prefix = original[:offset]
        line = prefix.count('\n') + 1
        pos = cls(line, 1, name)
        for ch in prefix[prefix.rfind('\n') + 1:]:
            pos = pos.update(ch)
        return pos

    def __str__(self) -> str:
        if self.name:
            return f"{self.name} line {self.line}, column {self.column}"
        return f"line {self.line}, column {self.column}"
