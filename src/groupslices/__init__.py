"""
groupslices: find duplicate slices of n-dimensional arrays.

Given an array and an axis, `group_slices` labels every slice along that axis
so that two slices share a label iff they are element-wise equal. The
grouping views (`group_membership`, `first_indices`, `last_indices`) and
`unique_slices` are built on top of that label vector.

    >>> import numpy as np
    >>> from groupslices import group_slices, group_membership
    >>> a = np.array([[1, 2], [3, 4], [1, 2], [5, 6], [3, 4]])
    >>> labels = group_slices(a, 0)
    >>> group_membership(labels)
    [[0, 2], [1, 4], [3]]
"""

from .domain._errors import HashCollisionWarning, InvalidAxisError
from .infrastructure.hashing import ElementHasher, hash_slices
from .infrastructure.ops import (
    compact_labels,
    first_indices,
    group_membership,
    group_slices,
    last_indices,
    slice_representatives,
    unique_slices,
)
from .infrastructure._grouping import SliceGrouping

__version__ = "0.1.0"

__all__ = [
    HashCollisionWarning.__name__,
    InvalidAxisError.__name__,
    ElementHasher.__name__,
    hash_slices.__name__,
    compact_labels.__name__,
    first_indices.__name__,
    group_membership.__name__,
    group_slices.__name__,
    last_indices.__name__,
    slice_representatives.__name__,
    unique_slices.__name__,
    SliceGrouping.__name__,
]
