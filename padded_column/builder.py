"""
Fluent construction of PaddedValue.

Example:
    >>> from padded_column.excess import ForbidExcess
    >>> padded = (PaddedValueBuilder()
    ...           .value("abcdef")
    ...           .pad_unit("-")
    ...           .total_width(9)
    ...           .direction("before")
    ...           .handle_excess(ForbidExcess())
    ...           .build())
    >>> str(padded)
    '---abcdef'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import warnings
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .display import PadConf, as_display
from .excess import ExcessHandler, forbid_excess
from .item import PadDirection, PaddedValue
from .sentinels import UNSET, ifnotunset


# Classes --------------------------------------------------------------------------------------------------------------

class UninitializedFieldError(ValueError):
    """Raised by build() when a required field was never set."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"`{field_name}` must be initialized")


class PadUnitWidthWarning(UserWarning):
    """Pad unit width is not 1, so the padded output will not match total_width exactly."""


class PaddedValueBuilder:
    """
    Builder for PaddedValue.

    Setters return the builder, so calls chain. Each setter can be called again
    to override an earlier value; the builder can build any number of times.

    Required fields: value, total_width.
    Optional fields: pad_unit (PadConf.PAD_UNIT), direction (PadConf.DIRECTION),
    handle_excess (forbid_excess).
    """

    def __init__(self) -> None:
        self._value: Any = UNSET
        self._pad_unit: Any = UNSET
        self._total_width: Any = UNSET
        self._direction: Any = UNSET
        self._handle_excess: Any = UNSET

    def value(self, value: Any) -> Self:
        self._value = value
        return self

    def pad_unit(self, pad_unit: Any) -> Self:
        self._pad_unit = pad_unit
        return self

    def total_width(self, total_width: int) -> Self:
        self._total_width = total_width
        return self

    def direction(self, direction: PadDirection | str) -> Self:
        self._direction = direction
        return self

    def handle_excess(self, handle_excess: ExcessHandler) -> Self:
        self._handle_excess = handle_excess
        return self

    def build(self) -> PaddedValue:
        """
        Build a PaddedValue from the fields set so far.

        Raises:
            UninitializedFieldError: If value or total_width was not set.
            TypeError, ValueError: If PaddedValue rejects a field.

        Warns:
            PadUnitWidthWarning: If the pad unit width is not 1.
        """
        if self._value is UNSET:
            raise UninitializedFieldError("value")
        if self._total_width is UNSET:
            raise UninitializedFieldError("total_width")

        pad_unit = ifnotunset(self._pad_unit, default=PadConf.PAD_UNIT)
        pad_unit_width = as_display(pad_unit).width()
        if pad_unit_width != 1:
            warnings.warn(
                f"pad unit {pad_unit!r} has width {pad_unit_width}, "
                f"padded output width will differ from total_width",
                PadUnitWidthWarning,
                stacklevel=2,
            )

        return PaddedValue(
            value=self._value,
            total_width=self._total_width,
            pad_unit=pad_unit,
            direction=ifnotunset(self._direction, default=PadConf.DIRECTION),
            handle_excess=ifnotunset(self._handle_excess, default=forbid_excess),
        )
