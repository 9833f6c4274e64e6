"""
Built-in element hashers.

This module defines the element hashers shipped with groupslices and
registers them with the global `ElementHasher` registry.

Provided hashers
----------------
- ``builtin``:
    Python's ``hash``. Consistent with ``==`` for NumPy scalars and ordinary
    Python objects (``hash(0.0) == hash(-0.0)``, ``hash(1) == hash(1.0)``).
    NaN floats and complex numbers with a NaN part all hash to
    ``sys.hash_info.nan``, since ``hash`` of a NaN depends on object identity.
    This is the default.
- ``constant``:
    Always 0, so every slice shares one hash bucket and every distinct slice
    has to be separated by the collision-resolution loop.
- ``parity``:
    Lowest bit of the ``builtin`` hash. Two buckets only; useful for
    exercising collision resolution on inputs that still hash partially apart.

``constant`` and ``parity`` are deliberately weak and exist for testing and
benchmarking the collision path.
"""

import sys
from typing import Any

import numpy as np

from ._base import ElementHasher

_INEXACT_TYPES = (float, complex, np.inexact)


@ElementHasher.register_hasher("builtin")
def builtin(element: Any) -> int:
    """
    Hash an element with Python's built-in ``hash``.

    Float and complex NaNs (NaN in either part) hash to
    ``sys.hash_info.nan``, so the hash of a slice holding NaNs is the same on
    every call.

    Raises
    ------
    TypeError
        If the element is unhashable (e.g. a list stored in an object array).
    """
    if isinstance(element, _INEXACT_TYPES) and element != element:
        return sys.hash_info.nan
    return hash(element)


@ElementHasher.register_hasher("constant")
def constant(element: Any) -> int:
    """Return 0 for every element."""
    return 0


@ElementHasher.register_hasher("parity")
def parity(element: Any) -> int:
    """Return the lowest bit of the element's ``builtin`` hash."""
    return builtin(element) & 1


__all__ = [
    builtin.__name__,
    constant.__name__,
    parity.__name__,
]
