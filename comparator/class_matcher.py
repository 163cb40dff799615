"""
Class Matcher Module
Picks, for every class of stylesheet A, its closest class in stylesheet B.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from core.class_distance import ClassDistanceTable
from core.models import Match
from core.settings import DISTANCE_THRESHOLD


class ClassMatcher:
    def __init__(self, threshold: float = DISTANCE_THRESHOLD):
        self.threshold = threshold

    def rank_candidates(self, class_a: str, candidates: Sequence[Tuple[str, float]],
                        classes_a: Set[str]) -> List[Tuple[str, float]]:
        """
        Order B candidates for one A class, closest first.

        Equal distances prefer the candidate named like class_a itself, then
        candidates that are not also class names of A; remaining ties keep
        their input order.
        """
        return sorted(candidates, key=lambda item: (item[1], item[0] != class_a, item[0] in classes_a))

    def best_match(self, class_a: str, candidates: Sequence[Tuple[str, float]],
                   classes_a: Set[str]) -> Optional[Match]:
        ranked = self.rank_candidates(class_a, candidates, classes_a)
        if not ranked:
            return None
        class_b, dist = ranked[0]
        return Match(class_a, class_b, dist)

    def select_best_matches(self, table: ClassDistanceTable) -> List[Match]:
        """One Match per A class (none when B has no classes), in A order."""
        classes_a = set(table.classes_a)
        matches = []
        for class_a in table.classes_a:
            match = self.best_match(class_a, table.row(class_a), classes_a)
            if match is not None:
                matches.append(match)
        return matches

    def filter_pairs(self, matches: Iterable[Match]) -> Dict[str, str]:
        """classA -> classB for matches strictly closer than the threshold."""
        return {m.class_a: m.class_b for m in matches if m.distance < self.threshold}

    def all_pairs(self, table: ClassDistanceTable) -> List[Tuple[str, str, float]]:
        return table.triples()
