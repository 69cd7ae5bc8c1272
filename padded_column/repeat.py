"""
Lazy repetition of a display unit.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import io
from dataclasses import dataclass
from itertools import repeat
from typing import Any, Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .display import Display, TextSink, as_display


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Repeat:
    """
    A unit repeated count times, produced on demand.

    The repetition is never joined into one string: write_to() writes the unit
    count times and iteration yields it count times. Each call starts over, so
    the same Repeat can be written to any number of sinks.

    Attributes:
        unit: The repeated item; str or any Display object.
        count: Number of repetitions, >= 0.

    Examples:
        >>> str(Repeat("-", 3))
        '---'
        >>> len(Repeat("ab", 2)), Repeat("ab", 2).width()
        (2, 4)

    Raises:
        TypeError: If count is not an int.
        ValueError: If count is negative.
    """
    unit: Any
    count: int

    def __post_init__(self):
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError(f"count must be an int, but found {type(self.count).__name__}")
        if self.count < 0:
            raise ValueError(f"count must be >= 0, but found {self.count}")
        object.__setattr__(self, "unit", as_display(self.unit))

    def __iter__(self) -> Iterator[Display]:
        return repeat(self.unit, self.count)

    def __len__(self) -> int:
        return self.count

    def __str__(self) -> str:
        sink = io.StringIO()
        self.write_to(sink)
        return sink.getvalue()

    def width(self) -> int:
        if not self.count:
            return 0
        return self.count * self.unit.width()

    def write_to(self, sink: TextSink) -> None:
        for unit in self:
            unit.write_to(sink)
