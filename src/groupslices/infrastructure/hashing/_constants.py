"""
Constants used by the slice hashing pass.

Slice hashes are 64-bit unsigned integers. Element hashes are folded into the
running slice hash with an FNV-1a style step, starting from ``HASH_SEED``.
"""

HASH_BITS = 64
HASH_MASK = (1 << HASH_BITS) - 1

# Every slice hash starts from this value; an empty slice hashes to it.
HASH_SEED = 0

# 64-bit FNV prime (0x100000001b3).
FNV_PRIME_64 = 1099511628211

DEFAULT_HASHER = "builtin"
