"""
Abstract interface for element hashers.

A slice hash is built by folding the hashes of the slice's elements in
traversal order. The function that hashes a single element is pluggable: the
infrastructure layer keeps a registry of named element hashers, and this
module defines the contract that registry implements.

Element hashers must be consistent with element equality: two elements that
compare equal must hash to the same integer. They are *not* required to be
collision-free; the grouping algorithm verifies every merge by content.
"""

from typing import Any, Callable, ClassVar, Dict, TypeVar
from abc import ABC


T = TypeVar("T", bound=Callable[[Any], int])


class _ElementHasher(ABC):
    """
    Abstract base class for element hasher dispatchers.

    Design notes
    ------------
    - Hashers are identified by string names.
    - Each hasher is a callable mapping one array element to an integer.
      Negative or oversized integers are allowed; callers reduce them to
      64 bits.
    - This class does not prescribe how hashers are stored; it only defines
      the expected interface.
    """

    HASHERS: ClassVar[Dict[str, Callable[[Any], int]]]
    """Name -> hasher registry, provided by the concrete subclass."""

    def __init__(self, hasher_name: str) -> None:
        """
        Construct an element hasher dispatcher.

        Parameters
        ----------
        hasher_name:
            The string key identifying a registered hasher.
        """
        ...

    @classmethod
    def register_hasher(cls, name: str, *, overwrite: bool = False) -> Callable[[T], T]:
        """
        Register an element hasher under a given name.

        Parameters
        ----------
        name:
            Name used to identify the hasher.
        overwrite:
            Whether to allow overwriting an existing registration.

        Returns
        -------
        Callable
            A decorator that registers the hasher function.
        """
        ...

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """
        Return the names of all registered hashers.

        Returns
        -------
        tuple[str, ...]
            A sorted tuple of registered hasher names.
        """
        ...

    @classmethod
    def get(cls, name: str) -> Callable[[Any], int]:
        """
        Get a registered hasher callable by name.

        Parameters
        ----------
        name:
            Name of the hasher.
        """
        ...

    def __call__(self, element: Any) -> int:
        """
        Hash a single array element.

        Parameters
        ----------
        element:
            One element of the array being grouped.

        Returns
        -------
        int
            The element hash.
        """
        ...
