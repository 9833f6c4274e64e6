"""
Slice hashing public API.

Importing this package registers the built-in element hashers
(``builtin``, ``constant``, ``parity``) with `ElementHasher` via import side
effects, and exposes the order-sensitive slice hashing helpers.
"""

from ._builtin import *
from ._base import ElementHasher, resolve_hasher
from ._mixing import hash_slice, hash_slices, mix_hash, slice_view

__all__ = [
    ElementHasher.__name__,
    resolve_hasher.__name__,
    hash_slice.__name__,
    hash_slices.__name__,
    mix_hash.__name__,
    slice_view.__name__,
]
