"""
Class Occurrence Module
Finds class-name tokens in selectors and weighs each selector per class.
"""

import re
from collections import Counter
from typing import Iterable, Pattern, Union

from .models import ClassOccurrences
from .settings import CLASS_PATTERN


def extract_class_occurrences(selectors: Iterable[str],
                              pattern: Union[str, Pattern[str]] = CLASS_PATTERN) -> ClassOccurrences:
    """
    Map every class token to {selector: weight}.

    The weight is the share of the selector's class tokens taken by the class:
    a token found k times among n tokens of a selector gets k / n. Selectors
    without tokens contribute nothing.
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern, re.ASCII)
    classes: ClassOccurrences = {}
    for selector in selectors:
        counts = Counter(match.group(0) for match in pattern.finditer(selector))
        total = sum(counts.values())
        for class_name, count in counts.items():
            classes.setdefault(class_name, {})[selector] = count / total
    return classes
