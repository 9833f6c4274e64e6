"""
Element hasher registry and dispatch utilities.

This module defines the concrete `ElementHasher` used by the slice hashing
pass to turn individual array elements into integers before they are folded
into a slice hash.

Design
------
- Hashers are registered by string name via a decorator-based registry.
- Each hasher is a callable ``element -> int`` that must agree with element
  equality (equal elements, equal hashes).
- The dispatcher resolves a hasher by name at construction time and invokes
  it via `__call__`.

Usage example
-------------
Registering a hasher:

    @ElementHasher.register_hasher("builtin")
    def builtin(element) -> int:
        return hash(element)

Resolving one:

    hasher = ElementHasher("builtin")
    hasher(3.0)

Notes
-----
- Registration keys must be unique unless explicitly overwritten.
- `resolve_hasher` also accepts plain callables, so ad-hoc hashers do not
  need to be registered.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Optional, TypeVar, Union

from ...domain._hasher import _ElementHasher
from ._constants import DEFAULT_HASHER

T = TypeVar("T", bound=Callable[[Any], int])


class ElementHasher(_ElementHasher):
    """
    Registry-backed element hasher dispatcher.

    Usage
    -----
    Register:
        @ElementHasher.register_hasher("constant")
        def constant(element) -> int: ...

    Dispatch:
        hasher = ElementHasher("constant")
        hasher(element)
    """

    HASHERS: ClassVar[Dict[str, Callable[[Any], int]]] = {}

    def __init__(self, hasher_name: str) -> None:
        try:
            self._hasher: Callable[[Any], int] = self.HASHERS[hasher_name]
        except KeyError as e:
            available = ", ".join(sorted(self.HASHERS)) or "<none>"
            raise ValueError(
                f"Unsupported hasher name: {hasher_name!r}. " f"Available: {available}"
            ) from e
        self.name = hasher_name

    @classmethod
    def register_hasher(
        cls, name: str, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Decorator to register an element hasher under `name`.

        Parameters
        ----------
        name:
            Registry key used to retrieve the hasher later.
        overwrite:
            If False (default), raises if `name` is already registered.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Hasher name must be a non-empty string")

        def decorator(func: T) -> T:
            if not overwrite and name in cls.HASHERS:
                raise ValueError(f"Hasher already registered: {name!r}")
            cls.HASHERS[name] = func
            return func

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return registered hasher names (sorted)."""
        return tuple(sorted(cls.HASHERS))

    @classmethod
    def get(cls, name: str) -> Callable[[Any], int]:
        """Get a registered hasher callable by name."""
        return cls.HASHERS[name]

    def __call__(self, element: Any) -> int:
        return self._hasher(element)

    def __repr__(self) -> str:
        return f"ElementHasher({self.name!r})"


HasherSpec = Optional[Union[str, Callable[[Any], int]]]


def resolve_hasher(hasher: HasherSpec) -> Callable[[Any], int]:
    """
    Turn a hasher argument into a callable.

    Parameters
    ----------
    hasher:
        ``None`` for the default hasher, a registered hasher name, or any
        callable ``element -> int``.

    Returns
    -------
    Callable[[Any], int]
        The element hash function.

    Raises
    ------
    ValueError
        If `hasher` is a name that is not registered.
    TypeError
        If `hasher` is neither a string nor callable.
    """
    if hasher is None:
        return ElementHasher(DEFAULT_HASHER)
    if isinstance(hasher, str):
        return ElementHasher(hasher)
    if callable(hasher):
        return hasher
    raise TypeError(
        f"hasher must be None, a registered name or a callable, got {type(hasher).__name__}"
    )
