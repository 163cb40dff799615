"""
Selector Set Matcher Module
Pairs the selectors of one class in A with the selectors of one class in B.
"""

import logging
import math
from itertools import permutations
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .models import Selector
from .selector_distance import SelectorDistanceTable
from .settings import COMPLEXITY_CEILING

logger = logging.getLogger(__name__)

Pairing = List[Tuple[Selector, Selector]]


def count_pairings(m: int, n: int) -> int:
    """Number of injective pairings of size min(m, n): max! / (max - min)!."""
    return math.perm(max(m, n), min(m, n))


def iter_pairings(selectors_a: Sequence[Selector], selectors_b: Sequence[Selector],
                  ceiling: int = COMPLEXITY_CEILING) -> Iterator[Pairing]:
    """
    Lazily yield every injective pairing between the two selector lists.

    Each selector of the shorter list is paired with a distinct selector of the
    longer one; pairs are always (selector of A, selector of B). Nothing is
    yielded when the number of pairings exceeds ``ceiling``.
    """
    complexity = count_pairings(len(selectors_a), len(selectors_b))
    if complexity > ceiling:
        logger.info("Too many combinations to calculate: %d", complexity)
        return
    if len(selectors_a) <= len(selectors_b):
        for chosen in permutations(selectors_b, len(selectors_a)):
            yield list(zip(selectors_a, chosen))
    else:
        for chosen in permutations(selectors_a, len(selectors_b)):
            yield list(zip(chosen, selectors_b))


def pairing_distance(pairing: Pairing, weights_a: Dict[Selector, float], weights_b: Dict[Selector, float],
                     table: SelectorDistanceTable) -> float:
    """Mean selector distance of a pairing, each pair weighted by sqrt(w_a * w_b)."""
    total = 0.0
    total_weight = 0.0
    for selector_a, selector_b in pairing:
        weight = math.sqrt(weights_a[selector_a] * weights_b[selector_b])
        total += table[selector_a, selector_b] * weight
        total_weight += weight
    return total / total_weight


def match_selector_sets(weights_a: Dict[Selector, float], weights_b: Dict[Selector, float],
                        table: SelectorDistanceTable,
                        ceiling: int = COMPLEXITY_CEILING) -> Optional[float]:
    """
    Smallest pairing distance between two classes' selector sets.

    Returns None when no pairing was evaluated: one side is empty or the
    enumeration was skipped by the complexity ceiling.
    """
    if not weights_a or not weights_b:
        return None
    best = None
    for pairing in iter_pairings(list(weights_a), list(weights_b), ceiling):
        dist = pairing_distance(pairing, weights_a, weights_b, table)
        if best is None or dist < best:
            best = dist
        if best == 0.0:
            break
    return best
