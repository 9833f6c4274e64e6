"""
Result object bundling a slice grouping and its derived views.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import List

import numpy as np

from .hashing._base import HasherSpec
from .ops.group_slices_cpu import compact_labels, slice_representatives
from .ops.grouping_views_cpu import first_indices, group_membership, last_indices
from ..domain.types._numpy import ArrayInput
from ..domain.utils._axis import normalize_axis


@dataclass(frozen=True, eq=False)
class SliceGrouping:
    """
    Grouping of the slices of one array along one axis.

    Attributes
    ----------
    axis : int
        Normalized (non-negative) grouping axis.
    representatives : np.ndarray
        ``representatives[k]`` is the index of the slice standing for slice `k`.
    labels : np.ndarray
        Compact group id per slice, ``0..n_groups-1`` in discovery order.

    Derived views (`groups`, `first`, `last`, `counts`) are computed on first
    access and cached.
    """

    axis: int
    representatives: np.ndarray
    labels: np.ndarray

    @classmethod
    def from_array(
        cls, array: ArrayInput, axis: int, *, hasher: HasherSpec = None
    ) -> "SliceGrouping":
        """
        Group the slices of `array` along `axis`.

        Raises
        ------
        InvalidAxisError
            If `axis` is out of range.
        """
        a = np.asarray(array)
        axis = normalize_axis(axis, a.ndim)
        reps = slice_representatives(a, axis, hasher=hasher)
        return cls(axis=axis, representatives=reps, labels=compact_labels(reps))

    @property
    def n_slices(self) -> int:
        return int(self.labels.shape[0])

    @cached_property
    def groups(self) -> List[List[int]]:
        return group_membership(self.labels)

    @property
    def n_groups(self) -> int:
        return len(self.groups)

    @cached_property
    def first(self) -> np.ndarray:
        return first_indices(self.groups)

    @cached_property
    def last(self) -> np.ndarray:
        return last_indices(self.groups)

    @cached_property
    def counts(self) -> np.ndarray:
        """Number of slices in each group."""
        return np.asarray([len(g) for g in self.groups], dtype=np.intp)

    def __len__(self) -> int:
        return self.n_slices

    def __repr__(self) -> str:
        return (
            f"SliceGrouping(axis={self.axis}, n_slices={self.n_slices}, "
            f"n_groups={self.n_groups})"
        )
