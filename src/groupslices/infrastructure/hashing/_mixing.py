"""
Order-sensitive slice hashing.

A slice is the sub-array obtained by fixing one index along the grouping axis.
Its hash is computed by visiting its elements in C order over the remaining
dimensions and folding each element hash into a 64-bit accumulator:

    h = HASH_SEED
    for e in slice (C order):
        h = mix_hash(h, element_hash(e))

`mix_hash` is an FNV-1a style step, so the fold is non-commutative: the same
elements in a different order usually hash differently, while identical
content in identical order always hashes identically.

Slices are addressed through a `numpy.moveaxis` view of the input; the source
array is never copied or modified.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from ._base import HasherSpec, resolve_hasher
from ._constants import FNV_PRIME_64, HASH_MASK, HASH_SEED
from ...domain.types._numpy import ArrayInput
from ...domain.utils._axis import normalize_axis


def mix_hash(h: int, element_hash: int) -> int:
    """
    Fold one element hash into a running slice hash.

    Parameters
    ----------
    h : int
        Current slice hash, an unsigned 64-bit value.
    element_hash : int
        Hash of the next element. Any Python int; it is reduced to its low
        64 bits (two's complement for negatives) first.

    Returns
    -------
    int
        The updated unsigned 64-bit slice hash.
    """
    return ((h ^ (element_hash & HASH_MASK)) * FNV_PRIME_64) & HASH_MASK


def hash_slice(slice_view: np.ndarray, element_hash: Callable[[Any], int]) -> int:
    """
    Hash the content of one slice.

    Parameters
    ----------
    slice_view : np.ndarray
        The slice, as an ndarray view (0-d for slices of a 1-D array).
    element_hash : Callable[[Any], int]
        Function hashing a single element.

    Returns
    -------
    int
        The slice hash. An empty slice hashes to ``HASH_SEED``.
    """
    h = HASH_SEED
    for element in slice_view.flat:
        h = mix_hash(h, element_hash(element))
    return h


def slice_view(array: ArrayInput, axis: int) -> np.ndarray:
    """
    Return a view of `array` with the grouping axis moved to the front.

    ``slice_view(a, axis)[k, ...]`` is slice `k`; iterating its ``.flat``
    visits the remaining dimensions in their natural (C) order.

    Raises
    ------
    InvalidAxisError
        If `axis` is out of range for `array`.
    """
    a = np.asarray(array)
    axis = normalize_axis(axis, a.ndim)
    return np.moveaxis(a, axis, 0)


def hash_slices(
    array: ArrayInput, axis: int, *, hasher: HasherSpec = None
) -> np.ndarray:
    """
    Compute the content hash of every slice along `axis`.

    Parameters
    ----------
    array : ArrayInput
        Input array (or nested sequence) of hashable, equatable elements.
    axis : int
        Axis along which slices are taken. Negative values count from the end.
    hasher : str or Callable or None, optional
        Element hasher: a registered name, a callable, or None for the default.

    Returns
    -------
    np.ndarray
        1-D ``uint64`` array of length ``array.shape[axis]``.

    Raises
    ------
    InvalidAxisError
        If `axis` is out of range. Raised before any element is hashed.
    """
    view = slice_view(array, axis)
    element_hash = resolve_hasher(hasher)

    n = view.shape[0]
    hashes = np.zeros(n, dtype=np.uint64)
    for k in range(n):
        hashes[k] = hash_slice(view[k, ...], element_hash)
    return hashes
