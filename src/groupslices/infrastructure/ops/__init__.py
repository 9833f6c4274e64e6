from .group_slices_cpu import compact_labels, group_slices, slice_representatives
from .grouping_views_cpu import first_indices, group_membership, last_indices
from .unique_slices_cpu import unique_slices

__all__ = [
    compact_labels.__name__,
    group_slices.__name__,
    slice_representatives.__name__,
    first_indices.__name__,
    group_membership.__name__,
    last_indices.__name__,
    unique_slices.__name__,
]
