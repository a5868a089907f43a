"""
HashIndex - string-keyed associative store with separate chaining.

Keys are polynomial hashes of the name (base 31, modulus 10 000 000 009). The
table size is fixed at construction, normally to the number of input records,
and entries are never removed.
"""

import logging
from dataclasses import dataclass
from typing import Generic, Iterator, List, Optional, TypeVar

logger = logging.getLogger(__name__)

HASH_BASE = 31
HASH_MODULUS = 10_000_000_009

V = TypeVar("V")


def _signed_code_units(name: str) -> List[int]:
    """UTF-8 bytes of the name read as signed 8-bit chars."""
    return [b - 256 if b > 127 else b for b in name.encode("utf-8")]


def _truncated_mod(value: int, modulus: int) -> int:
    """Remainder with the sign of the dividend (truncating division)."""
    remainder = abs(value) % modulus
    return remainder if value >= 0 else -remainder


def polynomial_hash(name: str) -> int:
    """
    Polynomial rolling hash of a name.

    Computes sum(c_i * 31^i) mod 10 000 000 009 over the signed UTF-8 code
    units of the name. Order-sensitive, so permutations of the same characters
    hash differently. Non-ASCII names may produce a negative value; callers
    take the absolute value before bucketing.

    Examples:
      "BB"   =>   2112
      "aA"   =>   2112
    """
    hash_value = 0
    p_pow = 1
    for code in _signed_code_units(name):
        hash_value = _truncated_mod(hash_value + code * p_pow, HASH_MODULUS)
        p_pow = (p_pow * HASH_BASE) % HASH_MODULUS
    return hash_value


@dataclass
class MapEntry(Generic[V]):
    """One link of a bucket chain."""
    key: int  # absolute hash of name
    name: str
    value: V
    next: Optional["MapEntry[V]"] = None


class HashIndex(Generic[V]):
    """
    Fixed-size hash table mapping names to entities.

    Collisions are resolved by separate chaining: new entries are prepended to
    their bucket's chain, so duplicate names coexist and search returns the
    most recently inserted one.

    With strict_keys=False, chain search compares only the stored hash values,
    so two different names whose hashes coincide are treated as the same key.
    strict_keys=True additionally compares the stored names.
    """

    def __init__(self, size: int, strict_keys: bool = True):
        if size < 1:
            raise ValueError(f"Invalid table size {size}. Size must be a positive integer.")
        self.size = size
        self.strict_keys = strict_keys
        self._heads: List[Optional[MapEntry[V]]] = [None] * size
        self._counts: List[int] = [0] * size
        self._entry_count = 0

    def _bucket(self, key: int) -> int:
        return key % self.size

    def insert(self, name: str, value: V) -> MapEntry[V]:
        """Insert a value under name. Existing entries for the same name are not checked."""
        key = abs(polynomial_hash(name))
        i = self._bucket(key)
        entry = MapEntry(key=key, name=name, value=value, next=self._heads[i])
        self._heads[i] = entry
        self._counts[i] += 1
        self._entry_count += 1
        return entry

    def search(self, name: str) -> Optional[MapEntry[V]]:
        """Return the first chain entry matching name, or None."""
        key = abs(polynomial_hash(name))
        curr = self._heads[self._bucket(key)]
        while curr is not None:
            if curr.key == key and (not self.strict_keys or curr.name == name):
                return curr
            curr = curr.next
        return None

    def get(self, name: str) -> Optional[V]:
        entry = self.search(name)
        return entry.value if entry is not None else None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.search(name) is not None

    def __len__(self) -> int:
        return self._entry_count

    def __iter__(self) -> Iterator[V]:
        for head in self._heads:
            curr = head
            while curr is not None:
                yield curr.value
                curr = curr.next

    def bucket_sizes(self) -> List[int]:
        """Chain length of every bucket, in bucket order."""
        return list(self._counts)

    @property
    def load_factor(self) -> float:
        return self._entry_count / self.size
