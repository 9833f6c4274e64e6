"""
Domain-level structural typing for the arrays whose slices are grouped.

This module defines :class:`NDArrayLike`, a backend-agnostic Protocol for
objects that behave like NumPy ``ndarray`` instances, so the domain layer can
describe the inputs of the grouping operations without importing NumPy.

Only the surface the grouping operations actually read is modelled: the
shape metadata, element indexing, and conversion through ``__array__``
(which is how the infrastructure layer turns an input into an ndarray view).

Typical implementers include:
- ``numpy.ndarray``
- array views or wrappers that emulate ndarray semantics
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Tuple, Union, runtime_checkable


@runtime_checkable
class NDArrayLike(Protocol):
    """
    Structural interface for NumPy-like n-dimensional arrays.

    Notes
    -----
    - This is a *Protocol*, not a concrete base class.
    - Grouping operations treat the array as read-only. Implementers are not
      required to support item assignment.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """Size of each dimension."""
        ...

    @property
    def ndim(self) -> int:
        """Number of dimensions (rank)."""
        ...

    @property
    def size(self) -> int:
        """Total number of elements."""
        ...

    @property
    def dtype(self) -> Any:
        """Backend-defined element type descriptor (e.g. ``numpy.dtype``)."""
        ...

    def __getitem__(self, key: Any) -> Any:
        """
        Return an element or a sub-array.

        Parameters
        ----------
        key : Any
            Integer, slice, or tuple index.
        """
        ...

    def __array__(self, dtype: Any = ...) -> Any:
        """
        Return a backend-native array representation.

        This enables ``numpy.asarray(obj)`` to read the data, ideally without
        copying.
        """
        ...


ArrayInput = Union[NDArrayLike, Sequence[Any]]
"""Anything the grouping operations accept as an array: ndarrays or nested sequences."""
