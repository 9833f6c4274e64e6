"""
Extraction of the distinct slices of an array.

`unique_slices` materializes one slice per group, in group-id order, by
selecting the first occurrence of each group. The input is left untouched;
the result is a new array.
"""

from __future__ import annotations

import numpy as np

from .group_slices_cpu import group_slices
from .grouping_views_cpu import first_indices
from ..hashing._base import HasherSpec
from ...domain.types._numpy import ArrayInput
from ...domain.utils._axis import normalize_axis


def unique_slices(
    array: ArrayInput, axis: int, *, hasher: HasherSpec = None
) -> np.ndarray:
    """
    Return the distinct slices of `array` along `axis`.

    Parameters
    ----------
    array : ArrayInput
        Input array (or nested sequence).
    axis : int
        Axis along which slices are taken. Negative values count from the end.
    hasher : str or Callable or None, optional
        Element hasher forwarded to `group_slices`.

    Returns
    -------
    np.ndarray
        New array whose size along `axis` is the number of distinct slices,
        ordered by first occurrence. For ``labels = group_slices(array, axis)``,
        ``numpy.take(result, labels, axis=axis)`` equals `array`.

    Raises
    ------
    InvalidAxisError
        If `axis` is out of range.
    """
    a = np.asarray(array)
    axis = normalize_axis(axis, a.ndim)
    labels = group_slices(a, axis, hasher=hasher)
    return np.take(a, first_indices(labels), axis=axis)
