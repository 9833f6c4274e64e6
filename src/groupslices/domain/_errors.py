"""
Argument- and hashing-related exceptions and warnings for groupslices.

This module defines the custom error raised when a slice-grouping operation
is invoked with an axis that does not exist on the input array, and the
warning category emitted when slice hashes collide and have to be resolved
by direct content comparison.

Axis errors are raised before any hashing work starts, so a caller never
observes partial output.
"""


class InvalidAxisError(ValueError):
    """
    Raised when the requested axis is outside the array's dimensionality.

    Valid axes follow NumPy conventions: ``-ndim <= axis < ndim``. Negative
    axes count from the last dimension. Out-of-range values are never
    clamped.

    Attributes
    ----------
    axis : int
        The axis value that was requested.
    ndim : int
        Number of dimensions of the array the axis was checked against.
    """

    def __init__(self, axis: int, ndim: int) -> None:
        """
        Initialize the InvalidAxisError.

        Parameters
        ----------
        axis : int
            The rejected axis value.
        ndim : int
            Dimensionality of the input array.
        """
        if ndim == 0:
            msg = f"axis {axis} is out of bounds for a 0-dimensional array."
        else:
            msg = (
                f"axis {axis} is out of bounds for an array of dimension {ndim}; "
                f"expected {-ndim} <= axis < {ndim}."
            )
        super().__init__(msg)
        self.axis = axis
        self.ndim = ndim


class HashCollisionWarning(RuntimeWarning):
    """
    Emitted when slices with equal hashes turned out to have different content.

    Collisions never affect the grouping result (every merge is verified by an
    element-wise comparison), but frequent collisions make the resolution loop
    slower and usually point at a weak element hasher.
    """
