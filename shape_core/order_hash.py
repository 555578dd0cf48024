"""
Deterministic hashing and global order.

Provides:
- hash64: SHA-256 canonical hash truncated to 64-bit int
- lex_min: Returns lex-min item by global order

Python's built-in hash() is salted per process, so anything that must be
stable across runs (shape fingerprints, logged identifiers) goes through
hash64 instead.
"""

import hashlib
import json
from typing import Any, Callable, Iterable, NewType, TypeVar

T = TypeVar("T")

# Hash type (64-bit from SHA-256)
Hash64 = NewType("Hash64", int)


def hash64(obj: Any) -> Hash64:
    """
    Deterministic 64-bit hash using SHA-256 on canonical JSON.

    Args:
        obj: Any JSON-serializable Python object (tuples serialize as lists)

    Returns:
        64-bit integer hash (0 to 2^64-1)

    Examples:
        >>> hash64([1, 2, 3]) == hash64([1, 2, 3])
        True
        >>> hash64([[True, False]]) == hash64(((True, False),))
        True
    """
    canonical_json = json.dumps(obj, sort_keys=True, separators=(",", ":"))

    sha = hashlib.sha256(canonical_json.encode("utf-8"))

    # First 8 bytes (64 bits) as integer
    hash_bytes = sha.digest()[:8]
    return Hash64(int.from_bytes(hash_bytes, byteorder="big", signed=False))


def lex_min(items: Iterable[T], key: Callable[[T], tuple] = lambda x: (x,)) -> T:
    """
    Returns the lexicographically minimal item by global order.

    Args:
        items: Iterable of items to compare
        key: Function extracting comparison tuple (default: identity)

    Returns:
        The lex-min item

    Raises:
        ValueError: If items is empty
    """
    items_list = list(items)
    if not items_list:
        raise ValueError("lex_min requires non-empty iterable")

    return min(items_list, key=key)
