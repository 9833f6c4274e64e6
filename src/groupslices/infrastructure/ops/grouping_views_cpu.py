"""
Derived views over a slice label vector.

These functions consume the label vector produced by
:func:`group_slices` (or any vector of hashable labels) and build the
structures callers usually need next:

- ``group_membership``: group id -> ordered slice indices
- ``first_indices``: group id -> first slice index
- ``last_indices``: group id -> last slice index

Group ids are renumbered ``0..K-1`` by first discovery in the label vector.
For vectors produced by `group_slices` this is the identity, since those ids
are already assigned in discovery order.

Preconditions
-------------
Labels must be hashable scalars (integers in practice) and membership lists
must be non-empty. Nothing is validated beyond that; malformed input gives
unspecified results.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Union

import numpy as np

LabelsLike = Union[np.ndarray, Sequence[Any]]
Membership = Sequence[Sequence[int]]


def _label_list(labels: LabelsLike) -> List[Any]:
    if isinstance(labels, np.ndarray):
        return labels.tolist()
    return list(labels)


def _is_membership(obj: Union[LabelsLike, Membership]) -> bool:
    """True if `obj` is a sequence of index sequences rather than a label vector."""
    if isinstance(obj, np.ndarray):
        return False
    return len(obj) > 0 and np.ndim(obj[0]) > 0


def group_membership(labels: LabelsLike) -> List[List[int]]:
    """
    Group slice indices by label.

    Parameters
    ----------
    labels : np.ndarray or Sequence
        Label per slice index.

    Returns
    -------
    list[list[int]]
        ``groups[g]`` holds, in ascending order, the indices of the slices in
        group `g`. Group ids follow first discovery in `labels`. The lists
        partition ``range(len(labels))``.

    Examples
    --------
    >>> group_membership([0, 1, 0, 2, 1])
    [[0, 2], [1, 4], [3]]
    """
    ids: Dict[Any, int] = {}
    groups: List[List[int]] = []
    for index, label in enumerate(_label_list(labels)):
        gid = ids.get(label)
        if gid is None:
            gid = ids[label] = len(groups)
            groups.append([])
        groups[gid].append(index)
    return groups


def first_indices(labels_or_groups: Union[LabelsLike, Membership]) -> np.ndarray:
    """
    Return the first slice index of every group.

    Parameters
    ----------
    labels_or_groups : label vector or membership list
        Either a label vector (as from `group_slices`) or a membership list
        (as from `group_membership`).

    Returns
    -------
    np.ndarray
        1-D ``intp`` array; entry `g` is the lowest slice index in group `g`.
        These are exactly the slices `unique_slices` keeps.
    """
    if _is_membership(labels_or_groups):
        return np.asarray([g[0] for g in labels_or_groups], dtype=np.intp)

    seen = set()
    first: List[int] = []
    for index, label in enumerate(_label_list(labels_or_groups)):
        if label not in seen:
            seen.add(label)
            first.append(index)
    return np.asarray(first, dtype=np.intp)


def last_indices(labels_or_groups: Union[LabelsLike, Membership]) -> np.ndarray:
    """
    Return the last slice index of every group.

    Parameters
    ----------
    labels_or_groups : membership list or label vector
        A membership list, or a label vector that is grouped first.

    Returns
    -------
    np.ndarray
        1-D ``intp`` array; entry `g` is the highest slice index in group `g`.
    """
    if _is_membership(labels_or_groups):
        groups = labels_or_groups
    else:
        groups = group_membership(labels_or_groups)
    return np.asarray([g[-1] for g in groups], dtype=np.intp)
