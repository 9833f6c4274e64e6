"""
CPU implementation of slice grouping (NumPy backend).

Given an n-dimensional array and an axis, this module labels every slice
along that axis so that two slices share a label iff they are element-wise
equal. It is the array analogue of deduplicating the rows of a table.

Algorithm
---------
1. Hash every slice (order-sensitive fold of element hashes, see
   :mod:`groupslices.infrastructure.hashing`).
2. Provisional representatives: one ordered pass over the slices with a map
   keyed by the raw hash value; the first slice seen with a hash represents
   every later slice with the same hash.
3. Collision detection: every slice is compared element-wise with its
   representative. Slices that differ are marked collided.
4. Collision resolution: steps 2 and 3 are repeated on the collided slices
   only, with a fresh map, until no slice differs from its representative.
   Each round the first collided slice of every hash bucket becomes its own
   representative, so the collided set strictly shrinks.
5. Representatives are renumbered ``0..K-1`` in discovery order.

Design notes
------------
- Hash equality is never trusted as proof of equality; every surviving merge
  has been verified by `numpy.array_equal`.
- Slices are read through a `numpy.moveaxis` view, so the source array is
  never copied or modified.
- Element comparison follows ``==``: a slice containing NaN equals no other
  slice, but always stays in its own group.
"""

from __future__ import annotations

import warnings
from typing import Dict, List, Sequence

import numpy as np

from ..hashing import hash_slices, slice_view
from ..hashing._base import HasherSpec
from ...domain._errors import HashCollisionWarning
from ...domain.types._numpy import ArrayInput


def _assign_representatives(
    candidates: Sequence[int], hashes: Sequence[int], uniquerow: List[int]
) -> None:
    """
    Point every candidate slice at the first candidate sharing its hash.

    Parameters
    ----------
    candidates : Sequence[int]
        Slice indices to (re)assign, in ascending order.
    hashes : Sequence[int]
        Slice hash per slice index.
    uniquerow : list[int]
        Representative per slice index, updated in place for `candidates`.
    """
    firstrow: Dict[int, int] = {}
    for k in candidates:
        uniquerow[k] = firstrow.setdefault(hashes[k], k)


def _find_collisions(
    view: np.ndarray, candidates: Sequence[int], uniquerow: List[int]
) -> List[int]:
    """
    Return the candidates whose content differs from their representative.

    Slices that represent themselves are skipped.
    """
    return [
        k
        for k in candidates
        if uniquerow[k] != k
        and not np.array_equal(view[k, ...], view[uniquerow[k], ...])
    ]


def slice_representatives(
    array: ArrayInput, axis: int, *, hasher: HasherSpec = None
) -> np.ndarray:
    """
    Compute the content-verified representative of every slice along `axis`.

    Parameters
    ----------
    array : ArrayInput
        Input array (or nested sequence). Read-only.
    axis : int
        Axis along which slices are taken. Negative values count from the end.
    hasher : str or Callable or None, optional
        Element hasher: a registered name, a callable ``element -> int``, or
        None for the default (``"builtin"``).

    Returns
    -------
    np.ndarray
        1-D ``intp`` array ``uniquerow`` of length ``array.shape[axis]``.
        ``uniquerow[k]`` is the index of the slice representing slice `k`;
        it is always ``<= k`` and slices with equal content share it.

    Raises
    ------
    InvalidAxisError
        If `axis` is out of range. Raised before any hashing.

    Warns
    -----
    HashCollisionWarning
        If slices with equal hashes but different content were found.
    """
    view = slice_view(array, axis)
    hashes = hash_slices(view, 0, hasher=hasher).tolist()

    n = len(hashes)
    uniquerow = list(range(n))
    _assign_representatives(range(n), hashes, uniquerow)
    collided = _find_collisions(view, range(n), uniquerow)

    n_collided = len(collided)
    rounds = 0
    while collided:
        rounds += 1
        _assign_representatives(collided, hashes, uniquerow)
        collided = _find_collisions(view, collided, uniquerow)

    if n_collided:
        warnings.warn(
            f"{n_collided} of {n} slices collided with a slice of different "
            f"content; resolved after {rounds} round(s).",
            HashCollisionWarning,
            stacklevel=2,
        )

    return np.asarray(uniquerow, dtype=np.intp)


def group_slices(
    array: ArrayInput, axis: int, *, hasher: HasherSpec = None
) -> np.ndarray:
    """
    Label every slice along `axis` by the group of identical slices it is in.

    Parameters
    ----------
    array : ArrayInput
        Input array (or nested sequence). Read-only.
    axis : int
        Axis along which slices are taken. Negative values count from the end.
    hasher : str or Callable or None, optional
        Element hasher: a registered name, a callable ``element -> int``, or
        None for the default.

    Returns
    -------
    np.ndarray
        1-D ``intp`` label vector of length ``array.shape[axis]`` with values
        in ``0..K-1`` (K distinct slices). ``labels[i] == labels[j]`` iff
        slices `i` and `j` are element-wise equal. Ids are assigned in the
        order their representatives are discovered, so the first slice always
        gets 0.

    Raises
    ------
    InvalidAxisError
        If `axis` is out of range. Raised before any hashing.

    Examples
    --------
    >>> group_slices([[1, 2], [3, 4], [1, 2], [5, 6], [3, 4]], 0)
    array([0, 1, 0, 2, 1])

    With ``u = unique_slices(a, axis)``, ``numpy.take(u, labels, axis)``
    reconstructs ``a``.
    """
    return compact_labels(slice_representatives(array, axis, hasher=hasher))


def compact_labels(representatives: np.ndarray) -> np.ndarray:
    """
    Renumber a representative vector to group ids ``0..K-1``.

    Ids are assigned in the order distinct representatives are first seen.
    """
    ids: Dict[int, int] = {}
    labels = np.empty(len(representatives), dtype=np.intp)
    for k, rep in enumerate(np.asarray(representatives).tolist()):
        labels[k] = ids.setdefault(rep, len(ids))
    return labels
