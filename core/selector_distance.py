"""
Selector Distance Module
Compares the declaration sets of two selectors and builds the cross-stylesheet matrix.
"""

import logging
import math
from functools import lru_cache
from typing import Dict, List, Tuple

import numpy as np

from .models import DeclarationSet, Selector, StyleTable

logger = logging.getLogger(__name__)

PROGRESS_STEPS = 50


@lru_cache(maxsize=65536)
def levenshtein(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions and substitutions."""
    if not a:
        return len(b)
    if not b:
        return len(a)
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            cost = 0 if char_a == char_b else 1
            current.append(min(
                previous[j] + 1,         # deletion
                current[j - 1] + 1,      # insertion
                previous[j - 1] + cost,  # substitution
            ))
        previous = current
    return previous[-1]


def edit_distance(a: str, b: str) -> float:
    """Levenshtein distance scaled by the longer string, in [0, 1]."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0
    return levenshtein(a, b) / longest


def selector_distance(properties1: DeclarationSet, properties2: DeclarationSet) -> float:
    """
    Distance in [0, 1] between two declaration sets.

    Every property declared on one side only costs 1, every shared property
    costs the edit distance of its two values; the sum is divided by the
    number of distinct properties. Two empty sets are identical (0.0).
    """
    shared = [prop for prop in properties1 if prop in properties2]
    union_size = len(properties1) + len(properties2) - len(shared)
    if union_size == 0:
        return 0.0
    # fsum is exactly rounded: same result for either argument order
    total = math.fsum([union_size - len(shared)] + [edit_distance(properties1[p], properties2[p]) for p in shared])
    return total / union_size


class SelectorDistanceTable:
    """Dense (selector of A) x (selector of B) distance matrix, read-only once built."""

    def __init__(self, selectors_a: List[Selector], selectors_b: List[Selector], matrix: np.ndarray):
        self.selectors_a = selectors_a
        self.selectors_b = selectors_b
        self.index_a: Dict[Selector, int] = {s: i for i, s in enumerate(selectors_a)}
        self.index_b: Dict[Selector, int] = {s: j for j, s in enumerate(selectors_b)}
        self.matrix = matrix
        self.matrix.setflags(write=False)

    def __getitem__(self, key: Tuple[Selector, Selector]) -> float:
        selector_a, selector_b = key
        return float(self.matrix[self.index_a[selector_a], self.index_b[selector_b]])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.matrix.shape


def build_selector_distance_table(styles_a: StyleTable, styles_b: StyleTable) -> SelectorDistanceTable:
    """Compute selector_distance for every (A, B) selector pair."""
    selectors_a = list(styles_a)
    selectors_b = list(styles_b)
    matrix = np.zeros((len(selectors_a), len(selectors_b)), dtype=np.float64)
    size = matrix.size
    step = max(size // PROGRESS_STEPS, 1)
    done = 0
    for i, selector_a in enumerate(selectors_a):
        properties_a = styles_a[selector_a]
        for j, selector_b in enumerate(selectors_b):
            matrix[i, j] = selector_distance(properties_a, styles_b[selector_b])
            done += 1
            if done % step == 0:
                logger.debug("Selector distances: %.0f%%", 100.0 * done / size)
    logger.info("Selector distance matrix calculated (%d x %d)", len(selectors_a), len(selectors_b))
    return SelectorDistanceTable(selectors_a, selectors_b, matrix)
