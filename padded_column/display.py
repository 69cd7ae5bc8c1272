"""
Display capabilities for padding: width measurement, writing to a text sink,
and width-bounded (truncated) writing.

A padded field is composed from parts that know two things about themselves:
how many terminal columns they occupy, and how to write themselves to a sink.
These are modelled as small independent protocols rather than a base class,
so any object providing the methods takes part (including a PaddedValue,
which makes padded fields nestable).
"""

# ## Width units
#
# Widths are terminal columns as reported by `wcwidth`: CJK ideographs and
# most emoji count 2, combining marks and zero-width joiners count 0.
# Non-printable control characters are counted as 0 instead of failing the
# whole measurement, which differs from `wcwidth.wcswidth` returning -1.

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

# Third-party ----------------------------------------------------------------------------------------------------------
import wcwidth


# Classes --------------------------------------------------------------------------------------------------------------

class PadConf:
    """
    Default configuration constants for padding.

    Attributes:
        PAD_UNIT: Filler written to make up the width difference. A single space,
            which has width 1, so the padded output hits the total width exactly.
        DIRECTION: Where the fill goes by default. "before" right-aligns the value,
            which is the usual choice for numeric columns.
    """
    PAD_UNIT = " "
    DIRECTION = "before"


@runtime_checkable
class TextSink(Protocol):
    """Protocol for text output streams such as io.StringIO, sys.stdout or text files."""

    def write(self, s: str, /) -> Any: ...


@runtime_checkable
class Width(Protocol):
    """Protocol for objects that report their display width in terminal columns."""

    def width(self) -> int: ...


@runtime_checkable
class Writable(Protocol):
    """Protocol for objects that write their display form to a text sink."""

    def write_to(self, sink: TextSink) -> None: ...


@runtime_checkable
class Display(Width, Writable, Protocol):
    """Protocol for objects that can be both measured and written."""


@runtime_checkable
class Truncatable(Protocol):
    """
    Protocol for objects that can write a width-bounded prefix of themselves.

    `write_truncated` writes at most `width` columns and returns the number of
    columns actually written, which can fall short of `width` when a wide
    character straddles the cut.
    """

    def write_truncated(self, sink: TextSink, width: int) -> int: ...


@dataclass(frozen=True)
class Text:
    """
    Plain string adapter implementing Display and Truncatable.

    Example:
        >>> Text("你好").width()
        4
        >>> import io; sink = io.StringIO()
        >>> Text("abcdef").write_truncated(sink, 3), sink.getvalue()
        (3, 'abc')
    """
    text: str

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"text must be a str, but found {type(self.text).__name__}")

    def __str__(self) -> str:
        return self.text

    def width(self) -> int:
        return text_width(self.text)

    def write_to(self, sink: TextSink) -> None:
        sink.write(self.text)

    def write_truncated(self, sink: TextSink, width: int) -> int:
        cropped, cropped_width = text_crop(self.text, width)
        sink.write(cropped)
        return cropped_width


# Methods --------------------------------------------------------------------------------------------------------------

def as_display(obj: Any) -> Display:
    """
    Coerce an object into something that can be measured and written.

    Dispatch Logic:
        - str → Text(obj)
        - objects with width() and write_to() → returned as is
        - all others → Text(str(obj))

    Examples:
        >>> as_display("abc")
        Text(text='abc')
        >>> as_display(42)
        Text(text='42')
    """
    if isinstance(obj, str):
        return Text(obj)
    if isinstance(obj, Display):
        return obj
    return Text(str(obj))


def text_width(text: str) -> int:
    """
    Return the number of terminal columns occupied by text.

    Examples:
        >>> text_width("abcdef")
        6
        >>> text_width("日本")
        4
        >>> text_width("tab\\there")
        7
    """
    width = wcwidth.wcswidth(text)
    if width >= 0:
        return width
    # Non-printables make wcswidth give up, count them as zero columns instead
    return sum(_char_width(char) for char in text)


def text_crop(text: str, width: int) -> tuple[str, int]:
    """
    Return the longest prefix of text that fits in width columns, and its width.

    Prefixes are measured with text_width, so the cut agrees with the measured
    width of the whole text: combining marks stay with their base and ZWJ emoji
    sequences are kept or dropped as a whole.

    Raises:
        ValueError: If width is negative.

    Examples:
        >>> text_crop("abcdef", 4)
        ('abcd', 4)
        >>> text_crop("日本語", 5)
        ('日本', 4)
    """
    if width < 0:
        raise ValueError(f"width must be >= 0, but found {width}")

    used = 0
    for end in range(1, len(text) + 1):
        prefix_width = text_width(text[:end])
        if prefix_width > width:
            return text[:end - 1], used
        used = prefix_width
    return text, used


# Private methods ------------------------------------------------------------------------------------------------------

def _char_width(char: str) -> int:
    return max(wcwidth.wcwidth(char), 0)
