"""
hash_table.py — Separate-Chaining Hash Table
=============================================
Fixed number of buckets, hash(key) = key mod size, each bucket an
insertion-ordered list of keys.  Keys are unique: inserting a key that is
already present leaves the table unchanged.
"""

from typing import Iterable, List

from structures.result import OperationResult


DEFAULT_SIZE = 10
DEFAULT_KEYS: List[int] = [15, 25, 35, 7, 42]


class ChainedHashTable:
    def __init__(self, size: int = DEFAULT_SIZE, keys: Iterable[int] = ()):
        if size < 1:
            raise ValueError("Hash table needs at least one bucket")
        self.size:    int             = size
        self.buckets: List[List[int]] = [[] for _ in range(size)]
        for k in keys:
            self.insert(k)

    @classmethod
    def default(cls, size: int = DEFAULT_SIZE) -> "ChainedHashTable":
        return cls(size, DEFAULT_KEYS)

    def hash(self, key: int) -> int:
        # Python's % is always non-negative for a positive modulus
        return key % self.size

    def insert(self, key: int) -> OperationResult:
        idx = self.hash(key)
        bucket = self.buckets[idx]
        if key in bucket:
            return OperationResult(False, f"{key} already in bucket {idx}", idx)
        bucket.append(key)
        return OperationResult(True, f"hash({key}) = {key} % {self.size} = {idx}", idx)

    def search(self, key: int) -> OperationResult:
        idx = self.hash(key)
        if key in self.buckets[idx]:
            return OperationResult(True, f"Found {key} in bucket {idx}", idx)
        return OperationResult(False, f"{key} not found in bucket {idx}", idx)

    def remove(self, key: int) -> OperationResult:
        idx = self.hash(key)
        bucket = self.buckets[idx]
        if key not in bucket:
            return OperationResult(False, f"{key} not found in bucket {idx}", idx)
        bucket.remove(key)
        return OperationResult(True, f"Removed {key} from bucket {idx}", idx)

    def __len__(self) -> int:
        return sum(len(b) for b in self.buckets)

    def __contains__(self, key: int) -> bool:
        return key in self.buckets[self.hash(key)]

    @property
    def load_factor(self) -> float:
        return len(self) / self.size

    @property
    def max_chain_length(self) -> int:
        return max((len(b) for b in self.buckets), default=0)

    def clear(self) -> OperationResult:
        for b in self.buckets:
            b.clear()
        return OperationResult(True, "Hash table cleared")

    def to_dict(self) -> dict:
        return {
            "size":             self.size,
            "buckets":          [list(b) for b in self.buckets],
            "count":            len(self),
            "load_factor":      self.load_factor,
            "max_chain_length": self.max_chain_length,
        }
