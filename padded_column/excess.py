"""
Excess handling: what to write when a value is wider than its padded field.

When the measured width of a value exceeds the requested total width there is
no room for padding, and the decision is delegated to an excess handler. A
handler is any callable taking an Excess record and the output sink:

    def handler(excess: Excess, sink: TextSink) -> None: ...

Handlers own all output in this case; the padding engine writes nothing itself.

Handlers:
    ForbidExcess: Raise ExcessError, write nothing (the default)
    IgnoreExcess: Write the value as is, overflowing the field
    TruncateExcess: Write only the first total_width columns of the value

Example:
    >>> from padded_column.item import PaddedValue
    >>> str(PaddedValue("abcdefgh", total_width=5, handle_excess=TruncateExcess()))
    'abcde'
    >>> str(PaddedValue("abcdefgh", total_width=5, handle_excess=lambda excess, sink: sink.write("#" * 5)))
    '#####'
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Final, Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .display import Display, TextSink, Truncatable
from .repeat import Repeat

__all__ = [
    'Excess',
    'ExcessError',
    'ExcessHandler',
    'ForbidExcess',
    'IgnoreExcess',
    'TruncateExcess',
    'UnsupportedTruncation',
    'forbid_excess',
    'ignore_excess',
    'truncate_excess',
]


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Excess:
    """
    Information about a value that does not fit its padded field.

    Attributes:
        value: The value being padded, as a Display object.
        value_width: Measured width of value.
        total_width: Requested total width, always less than value_width.
        pad_unit: The pad unit that would have been repeated, as a Display object.
    """
    value: Display
    value_width: int
    total_width: int
    pad_unit: Display

    @property
    def overflow(self) -> int:
        """Number of columns by which the value exceeds the field."""
        return self.value_width - self.total_width


class ExcessError(ValueError):
    """Raised when a value is wider than the total width and excess is forbidden."""

    def __init__(self, excess: Excess):
        self.excess = excess
        super().__init__(f"value width {excess.value_width} exceeds total width {excess.total_width}")


class UnsupportedTruncation(TypeError):
    """Raised when truncation is requested for a value that cannot write a width-bounded prefix."""

    def __init__(self, excess: Excess):
        self.excess = excess
        super().__init__(f"{type(excess.value).__name__} does not support truncated writing "
                         f"(value width {excess.value_width}, total width {excess.total_width})")


@runtime_checkable
class ExcessHandler(Protocol):
    """Protocol for excess handlers: named policies, plain functions and lambdas alike."""

    def __call__(self, excess: Excess, sink: TextSink) -> None: ...


@dataclass(frozen=True)
class ForbidExcess:
    """Reject values wider than the field by raising ExcessError."""

    def __call__(self, excess: Excess, sink: TextSink) -> None:
        raise ExcessError(excess)


@dataclass(frozen=True)
class IgnoreExcess:
    """Write the value unpadded and let it overflow the field."""

    def __call__(self, excess: Excess, sink: TextSink) -> None:
        excess.value.write_to(sink)


@dataclass(frozen=True)
class TruncateExcess:
    """
    Write only as much of the value as fits in total_width columns.

    A wide character straddling the cut is dropped, so the written prefix can be
    one column short. With fill=True that shortfall is made up with the pad unit
    after the prefix.

    Attributes:
        fill: Pad a short prefix up to total_width.

    Raises:
        UnsupportedTruncation: If the value does not implement write_truncated();
            nothing is written in that case.
    """
    fill: bool = False

    def __call__(self, excess: Excess, sink: TextSink) -> None:
        value = excess.value
        if not isinstance(value, Truncatable):
            raise UnsupportedTruncation(excess)

        written = value.write_truncated(sink, excess.total_width)
        if self.fill and written < excess.total_width:
            Repeat(excess.pad_unit, excess.total_width - written).write_to(sink)


# Handler Objects ------------------------------------------------------------------------------------------------------

forbid_excess: Final[ForbidExcess] = ForbidExcess()
ignore_excess: Final[IgnoreExcess] = IgnoreExcess()
truncate_excess: Final[TruncateExcess] = TruncateExcess()
