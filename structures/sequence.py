"""
sequence.py — Working Arrays
=============================
Random data for the sorting and searching visualizers.  Both return plain
lists; runs sort / search them in place.
"""

import random
from typing import List, Optional


def random_sequence(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Values 10–99, as drawn by the sorting page."""
    rng = rng or random.Random()
    return [rng.randint(10, 99) for _ in range(size)]


def sorted_sequence(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Strictly increasing values spaced roughly three apart."""
    rng = rng or random.Random()
    return sorted(i * 3 + rng.randint(0, 2) + 1 for i in range(size))


def is_sorted(seq: List[int]) -> bool:
    return all(seq[i] <= seq[i + 1] for i in range(len(seq) - 1))
