"""
Sentinel for distinguishing an unprovided override from an explicit None.

Used by the merge() methods of the immutable configuration classes:

    >>> cfg.merge(sigfigs=UNSET)      # keep current sigfigs
    >>> cfg.merge(sigfigs=5)          # override
"""

from typing import Any, Final

__all__ = [
    'UNSET',
    'UnsetType',
]


class UnsetType:
    """
    Singleton type of UNSET.

    Falsy, compares by identity and survives pickling as the same instance.
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

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __reduce__(self) -> tuple:
        return (self.__class__, ())


UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing an unprovided optional argument.

Use with identity check: `if arg is UNSET:`
"""
