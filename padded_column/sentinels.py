"""
Sentinel objects for builder fields that have not been assigned yet.

The builder needs to tell "never set" apart from "explicitly set to None",
because None is a legitimate value to pad (it renders as 'None').
All sentinels use identity checks (using 'is') rather than equality checks.

Sentinels:
    UNSET: Represents a builder field that was never assigned

Helper Functions:
    ifnotunset: Return default if value is UNSET, otherwise return value

Example:
    >>> builder_value = UNSET
    >>> ifnotunset(builder_value, default=" ")
    ' '
"""

from typing import Any, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifnotunset',
]


# Sentinel Type --------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton, falsy and compared by identity.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing a field that was not provided.

Use with identity check: `if field is UNSET:`
"""


# Helper Functions -----------------------------------------------------------------------------------------------------

def ifnotunset(value: Any, *, default: Any = None) -> Any:
    """
    Return value if it's not UNSET, otherwise return default.

    Args:
        value: The value to check. If not UNSET, this value is returned.
        default: The fallback value when value is UNSET.

    Returns:
        The value itself if not UNSET, otherwise the default.
    """
    if value is not UNSET:
        return value
    return default
