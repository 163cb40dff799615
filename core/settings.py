"""
Settings Module
Tunable constants of the matching engine.
"""

import re
import sys
from dataclasses import dataclass
from typing import Pattern

DISTANCE_THRESHOLD = 0.1
COMPLEXITY_CEILING = 100000
CLASS_PATTERN = r'\b\w{20}\b'


@dataclass(frozen=True)
class MatchSettings:
    distance_threshold: float = DISTANCE_THRESHOLD
    complexity_ceiling: int = COMPLEXITY_CEILING
    class_pattern: str = CLASS_PATTERN
    # Cut off at threshold - machine epsilon instead of the threshold itself
    epsilon_compat: bool = False

    @property
    def cutoff(self) -> float:
        """Value a match distance must stay strictly below."""
        if self.epsilon_compat:
            return self.distance_threshold - sys.float_info.epsilon
        return self.distance_threshold

    def compiled_pattern(self) -> Pattern[str]:
        # ASCII keeps \w to [A-Za-z0-9_] so tokens do not depend on the locale
        return re.compile(self.class_pattern, re.ASCII)
