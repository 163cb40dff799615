"""
Models Module
Shared types passed between the matching stages.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

Selector = str
DeclarationSet = Dict[str, str]
StyleTable = Dict[Selector, DeclarationSet]
ClassOccurrences = Dict[str, Dict[Selector, float]]


@dataclass
class ParsedRule:
    selectors: List[str] = field(default_factory=list)
    declarations: List[Tuple[str, str]] = field(default_factory=list)


@dataclass(frozen=True)
class Match:
    class_a: str
    class_b: str
    distance: float
