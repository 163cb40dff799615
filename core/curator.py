"""
Main Curator Interface
Runs the full class matching pipeline on two stylesheets.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .class_distance import ClassDistanceTable, build_class_distance_table
from .class_occurrence import extract_class_occurrences
from .models import ClassOccurrences, Match, StyleTable
from .selector_distance import SelectorDistanceTable, build_selector_distance_table
from .settings import MatchSettings
from .style_table import StyleTableBuilder
from comparator.class_matcher import ClassMatcher

logger = logging.getLogger(__name__)


@dataclass
class CurationResult:
    styles_a: StyleTable
    styles_b: StyleTable
    classes_a: ClassOccurrences
    classes_b: ClassOccurrences
    selector_distances: SelectorDistanceTable
    class_distances: ClassDistanceTable
    matches: List[Match] = field(default_factory=list)
    pairs: Dict[str, str] = field(default_factory=dict)
    all_pairs: List[Tuple[str, str, float]] = field(default_factory=list)

    @property
    def skipped_pairs(self) -> List[Tuple[str, str]]:
        return self.class_distances.skipped_pairs

    @property
    def rejected_matches(self) -> List[Match]:
        """Best matches that did not make it under the threshold."""
        return [m for m in self.matches if m.class_a not in self.pairs]


class ClassCurator:
    def __init__(self, settings: Optional[MatchSettings] = None):
        self.settings = settings or MatchSettings()
        self.builder = StyleTableBuilder()
        self.matcher = ClassMatcher(threshold=self.settings.cutoff)
        self.last_result: Optional[CurationResult] = None

    def curate(self, styles_a: StyleTable, styles_b: StyleTable) -> CurationResult:
        """Match the classes of two already built style tables."""
        pattern = self.settings.compiled_pattern()
        classes_a = extract_class_occurrences(styles_a, pattern)
        classes_b = extract_class_occurrences(styles_b, pattern)
        logger.info("Styles parsed and loaded: %d/%d selectors, %d/%d classes",
                    len(styles_a), len(styles_b), len(classes_a), len(classes_b))

        selector_distances = build_selector_distance_table(styles_a, styles_b)
        class_distances = build_class_distance_table(
            classes_a, classes_b, selector_distances, self.settings.complexity_ceiling)

        matches = self.matcher.select_best_matches(class_distances)
        pairs = self.matcher.filter_pairs(matches)
        logger.info("Matched %d of %d classes", len(pairs), len(classes_a))

        self.last_result = CurationResult(
            styles_a=styles_a,
            styles_b=styles_b,
            classes_a=classes_a,
            classes_b=classes_b,
            selector_distances=selector_distances,
            class_distances=class_distances,
            matches=matches,
            pairs=pairs,
            all_pairs=self.matcher.all_pairs(class_distances),
        )
        return self.last_result

    def curate_css(self, css_a: str, css_b: str) -> CurationResult:
        return self.curate(self.builder.parse_style_table(css_a), self.builder.parse_style_table(css_b))

    def curate_files(self, path_a: Union[str, Path], path_b: Union[str, Path]) -> CurationResult:
        """Load both stylesheets (any read or parse error is fatal) and match them."""
        styles_a = self.builder.load_style_table(path_a)
        styles_b = self.builder.load_style_table(path_b)
        return self.curate(styles_a, styles_b)
