"""
Sentinel for distinguishing an omitted argument from an explicit None.

Used by the merge() methods of configuration dataclasses, where every override
defaults to UNSET and only explicitly passed values replace the current ones.

Example:
    >>> def merge(self, mode: str | UnsetType = UNSET):
    ...     mode = ifnotunset(mode, default=self.mode)
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Final

__all__ = ['UNSET', 'UnsetType', 'ifnotunset']


# Classes --------------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Singleton type of UNSET.

    Falsy, compared by identity, and pickled back to the same instance.
    """
    __slots__ = ()
    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        return (self.__class__, ())


UNSET: Final = UnsetType()


# Methods --------------------------------------------------------------------------------------------------------------

def ifnotunset(value: Any, *, default: Any) -> Any:
    """Return default if value is UNSET, otherwise return value."""
    return default if value is UNSET else value
