"""
Pad a single value to a fixed display width.

PaddedValue is a one-shot padding request: it measures its value, then either
writes the fill and the value in the requested order, or hands the value over
to an excess handler when it is too wide to pad.
"""

# ## Pad units wider than one column
#
# The fill count is always total_width - value_width, one pad unit per missing
# column. With a pad unit of width 1 the output width is exactly total_width.
# With a wider pad unit it is value_width + pad_count * pad_unit_width instead,
# overshooting the field. This is left to the caller; the builder warns about it.
#
# Example:
#   str(PaddedValue("ab", total_width=4, pad_unit="=="))  ->  "====ab" (width 6)

# Standard library -----------------------------------------------------------------------------------------------------
import io
import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .display import PadConf, TextSink, as_display, text_width
from .excess import Excess, ExcessHandler, forbid_excess
from .repeat import Repeat

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

class PadDirection(StrEnum):
    """
    Where the fill is placed relative to the value.

    BEFORE right-aligns the value, AFTER left-aligns it. LEFT and RIGHT are aliases
    naming the side the pad goes on. Lookup by name or value is case-insensitive.

    Example:
        >>> PadDirection("left") is PadDirection.BEFORE
        True
    """
    BEFORE = "before"
    AFTER = "after"
    LEFT = "before"
    RIGHT = "after"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.upper()
            if key in cls.__members__:
                return cls.__members__[key]
        return None


@dataclass(frozen=True)
class PaddedValue:
    """
    A value padded with a repeated pad unit to a total display width.

    Rendering writes to a text sink incrementally: the fill is a lazy Repeat of
    the pad unit and no intermediate string is built. str() renders into a buffer.

    A value exactly as wide as total_width is written bare (zero pad units) and
    does not reach the excess handler. A value wider than total_width is passed
    to handle_excess as an Excess record, and the handler decides what, if
    anything, is written.

    Attributes:
        value: Value to be padded. A str, any Display object (width() and write_to()),
            or any other object, which is padded as str(value).
        total_width: Total width to fulfill, in columns; int >= 0.
        pad_unit: Unit of the pad, expected to have width 1. Defaults to a space.
        direction: Where to place the pad; PadDirection or its name/value as str.
        handle_excess: Called as handle_excess(excess, sink) when the value is wider
            than total_width. Defaults to forbid_excess.

    Examples:
        >>> str(PaddedValue("abcdef", total_width=9, pad_unit="-"))
        '---abcdef'
        >>> str(PaddedValue("abcdef", total_width=9, pad_unit="-", direction="after"))
        'abcdef---'
        >>> str(PaddedValue("abcdefgh", total_width=5, pad_unit="-"))
        Traceback (most recent call last):
        ...
        padded_column.excess.ExcessError: value width 8 exceeds total width 5

    Raises:
        TypeError: Invalid field types (e.g. float total_width, non-callable handle_excess).
        ValueError: Invalid field values (e.g. negative total_width, unknown direction).
    """
    value: Any
    total_width: int
    pad_unit: Any = PadConf.PAD_UNIT
    direction: PadDirection | str = PadConf.DIRECTION
    handle_excess: ExcessHandler = forbid_excess

    def __post_init__(self):
        """Validate and set fields"""

        if isinstance(self.total_width, bool) or not isinstance(self.total_width, int):
            raise TypeError(f"total_width must be an int, but found {type(self.total_width).__name__}")
        if self.total_width < 0:
            raise ValueError(f"total_width must be >= 0, but found {self.total_width}")

        object.__setattr__(self, "direction", PadDirection(self.direction))

        if not callable(self.handle_excess):
            raise TypeError(f"handle_excess must be callable, but found {type(self.handle_excess).__name__}")

    def __str__(self) -> str:
        sink = io.StringIO()
        self.render(sink)
        return sink.getvalue()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return format(str(self), format_spec)

    def render(self, sink: TextSink) -> Any:
        """
        Write the padded value to sink.

        Returns None after padding. For an excess value returns whatever
        handle_excess returns; the built-in handlers return None and report
        failure by raising.

        Exceptions raised by the sink or by the excess handler propagate unchanged;
        output already written before the failure stays in the sink.
        """
        value = as_display(self.value)
        pad_unit = as_display(self.pad_unit)
        total_width = self.total_width
        value_width = value.width()

        if total_width < value_width:
            logger.debug("value width %d exceeds total width %d, delegating to %r",
                         value_width, total_width, self.handle_excess)
            excess = Excess(value=value, value_width=value_width, total_width=total_width, pad_unit=pad_unit)
            return self.handle_excess(excess, sink)

        pad = Repeat(pad_unit, total_width - value_width)
        if self.direction is PadDirection.BEFORE:
            pad.write_to(sink)
            value.write_to(sink)
        else:
            value.write_to(sink)
            pad.write_to(sink)

    def write_to(self, sink: TextSink) -> None:
        self.render(sink)

    def width(self) -> int:
        """
        Width of the rendered padding, for use of a PaddedValue as a value itself.

        Returns total_width for a value that fits and a pad unit of width 1.
        For an excess value the handler decides the output, so it is rendered
        and measured; a handler that raises propagates its error here too.
        """
        value_width = as_display(self.value).width()
        if self.total_width < value_width:
            return text_width(str(self))
        return value_width + Repeat(self.pad_unit, self.total_width - value_width).width()


# Methods --------------------------------------------------------------------------------------------------------------

def pad_value(value: Any,
              total_width: int,
              pad_unit: Any = PadConf.PAD_UNIT,
              direction: PadDirection | str = PadConf.DIRECTION,
              handle_excess: ExcessHandler | None = None) -> str:
    """
    Pad value to total_width and return the result as a string.

    Args:
        value: Value to be padded.
        total_width: Total width to fulfill.
        pad_unit: Unit of the pad, expected to have width 1.
        direction: Where to place the pad.
        handle_excess: Excess handler; forbid_excess if None.

    Returns:
        The padded string.

    Raises:
        ExcessError: If value is wider than total_width and handle_excess is None.

    Examples:
        >>> pad_value(42, 5, pad_unit="0")
        '00042'
        >>> pad_value("name", 8, direction="after") + "|"
        'name    |'
    """
    handle_excess = forbid_excess if handle_excess is None else handle_excess
    return str(PaddedValue(value, total_width=total_width, pad_unit=pad_unit,
                           direction=direction, handle_excess=handle_excess))
