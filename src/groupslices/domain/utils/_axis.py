"""
Axis validation helpers shared by the slice-grouping operations.
"""

from __future__ import annotations

import operator

from .._errors import InvalidAxisError


def normalize_axis(axis: int, ndim: int) -> int:
    """
    Validate `axis` against `ndim` and return its non-negative form.

    Parameters
    ----------
    axis : int
        Requested axis. Any object supporting ``__index__`` is accepted.
        Negative values count from the last dimension.
    ndim : int
        Dimensionality of the array.

    Returns
    -------
    int
        The axis in ``[0, ndim)``.

    Raises
    ------
    TypeError
        If `axis` is not an integer.
    InvalidAxisError
        If `axis` is outside ``[-ndim, ndim)``.
    """
    if isinstance(axis, bool):
        raise TypeError(f"axis must be an integer, got {type(axis).__name__}")
    axis = operator.index(axis)
    if not -ndim <= axis < ndim:
        raise InvalidAxisError(axis, ndim)
    return axis + ndim if axis < 0 else axis
