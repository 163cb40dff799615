"""
Class Distance Module
Blends the best selector pairing with a penalty for unequal selector counts.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .models import ClassOccurrences
from .selector_distance import SelectorDistanceTable
from .selector_set_matcher import match_selector_sets
from .settings import COMPLEXITY_CEILING

logger = logging.getLogger(__name__)

DEFAULT_MIN_DISTANCE = 1.0
PROGRESS_STEPS = 50


def size_penalty(delta: int) -> float:
    """0 for equal sizes, saturating towards 1 as the size difference grows."""
    return 1 - 1 / (1 + (delta / 2) ** 2)


def class_distance(min_distance: Optional[float], m: int, n: int) -> float:
    """
    Final distance between two classes with m and n selectors.

    (min_distance + penalty * alpha) / (1 + alpha), alpha = delta / (max - delta).
    With an empty side alpha is infinite and the result is the penalty alone.
    """
    if min_distance is None:
        min_distance = DEFAULT_MIN_DISTANCE
    longest = max(m, n)
    delta = abs(m - n)
    penalty = size_penalty(delta)
    if longest == delta:
        return penalty if delta else min_distance
    alpha = delta / (longest - delta)
    return (min_distance + penalty * alpha) / (1 + alpha)


class ClassDistanceTable:
    """Dense (class of A) x (class of B) distance matrix."""

    def __init__(self, classes_a: List[str], classes_b: List[str], matrix: np.ndarray,
                 skipped_pairs: Optional[List[Tuple[str, str]]] = None):
        self.classes_a = classes_a
        self.classes_b = classes_b
        self.index_a = {c: i for i, c in enumerate(classes_a)}
        self.index_b = {c: j for j, c in enumerate(classes_b)}
        self.matrix = matrix
        self.matrix.setflags(write=False)
        self.skipped_pairs = skipped_pairs or []

    def __getitem__(self, key: Tuple[str, str]) -> float:
        class_a, class_b = key
        return float(self.matrix[self.index_a[class_a], self.index_b[class_b]])

    def row(self, class_a: str) -> List[Tuple[str, float]]:
        """Distances from one A class to every B class, in B order."""
        values = self.matrix[self.index_a[class_a]]
        return [(class_b, float(values[j])) for j, class_b in enumerate(self.classes_b)]

    def triples(self) -> List[Tuple[str, str, float]]:
        return [(class_a, class_b, dist) for class_a in self.classes_a for class_b, dist in self.row(class_a)]


def build_class_distance_table(classes_a: ClassOccurrences, classes_b: ClassOccurrences,
                               selector_table: SelectorDistanceTable,
                               ceiling: int = COMPLEXITY_CEILING) -> ClassDistanceTable:
    """Compute class_distance for every (A, B) class pair."""
    names_a = list(classes_a)
    names_b = list(classes_b)
    matrix = np.ones((len(names_a), len(names_b)), dtype=np.float64)
    skipped = []
    size = matrix.size
    step = max(size // PROGRESS_STEPS, 1)
    done = 0
    for i, class_a in enumerate(names_a):
        weights_a = classes_a[class_a]
        for j, class_b in enumerate(names_b):
            weights_b = classes_b[class_b]
            min_distance = match_selector_sets(weights_a, weights_b, selector_table, ceiling)
            if min_distance is None and weights_a and weights_b:
                skipped.append((class_a, class_b))
            matrix[i, j] = class_distance(min_distance, len(weights_a), len(weights_b))
            done += 1
            if done % step == 0:
                logger.debug("Class distances: %.0f%%", 100.0 * done / size)
    if skipped:
        logger.info("%d class pairs exceeded the complexity ceiling and use the default distance", len(skipped))
    logger.info("Class distance matrix calculated (%d x %d)", len(names_a), len(names_b))
    return ClassDistanceTable(names_a, names_b, matrix, skipped)
