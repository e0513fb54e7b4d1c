from dataclasses import dataclass, field
from dataslots import with_slots
from typing import Tuple, Union


@with_slots
@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` range of offsets into the source text."""
    start: int
    end: int

    def __len__(self):
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)

    def of(self, source: str) -> str:
        return source[self.start:self.end]


@with_slots
@dataclass(frozen=True)
class Name:
    span: Span
    source: str = field(repr=False)

    @property
    def name(self) -> str:
        return self.span.of(self.source)

    def __str__(self):
        return self.name


@with_slots
@dataclass(frozen=True)
class StrLit:
    span: Span
    source: str = field(repr=False)

    @property
    def val(self) -> str:
        # Drop the surrounding quotes; the body is taken verbatim.
        return self.source[self.span.start + 1:self.span.end - 1]

    @property
    def body_start(self) -> int:
        return self.span.start + 1

    def __str__(self):
        return self.val


@with_slots
@dataclass(frozen=True)
class Macro:
    name: Name
    args: Tuple[StrLit, ...] = ()

    def __str__(self):
        return '{}({})'.format(self.name, ', '.join(repr(arg.val) for arg in self.args))


@with_slots
@dataclass(frozen=True)
class Main:
    statements: Tuple[Macro, ...] = ()

    def __iter__(self):
        return iter(self.statements)


@with_slots
@dataclass(frozen=True)
class FmtLit:
    span: Span
    val: str


@with_slots
@dataclass(frozen=True)
class FmtArg:
    span: Span


FmtSpec = Union[FmtLit, FmtArg]
