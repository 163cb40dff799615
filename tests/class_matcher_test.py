import sys
import os
import numpy as np
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from comparator.class_matcher import ClassMatcher
from core.class_distance import ClassDistanceTable
from core.models import Match
from core.settings import MatchSettings

def test_closest_candidate_first():
    matcher = ClassMatcher()
    ranked = matcher.rank_candidates('x', [('y', 0.5), ('x', 0.5), ('z', 0.2)], {'x'})
    assert [name for name, _ in ranked] == ['z', 'x', 'y']

def test_tie_prefers_own_name():
    matcher = ClassMatcher()
    ranked = matcher.rank_candidates('x', [('y', 0.0), ('x', 0.0)], {'x'})
    assert ranked[0] == ('x', 0.0)

def test_tie_prefers_name_not_in_a():
    matcher = ClassMatcher()
    ranked = matcher.rank_candidates('x', [('a', 0.3), ('b', 0.3)], {'x', 'a'})
    assert [name for name, _ in ranked] == ['b', 'a']

def test_remaining_ties_keep_input_order():
    matcher = ClassMatcher()
    ranked = matcher.rank_candidates('x', [('c', 0.3), ('b', 0.3), ('d', 0.3)], {'x'})
    assert [name for name, _ in ranked] == ['c', 'b', 'd']

def test_b_class_can_be_reused():
    table = ClassDistanceTable(['a1', 'a2'], ['b1', 'b2'], np.array([[0.0, 0.5], [0.01, 0.5]]))
    matcher = ClassMatcher()
    matches = matcher.select_best_matches(table)
    assert matches == [Match('a1', 'b1', 0.0), Match('a2', 'b1', 0.01)]
    assert matcher.filter_pairs(matches) == {'a1': 'b1', 'a2': 'b1'}

def test_threshold_is_strict():
    matcher = ClassMatcher(threshold=0.1)
    matches = [Match('a', 'b', 0.1), Match('c', 'd', 0.0999), Match('e', 'f', 0.5)]
    assert matcher.filter_pairs(matches) == {'c': 'd'}

def test_epsilon_compat_cutoff():
    assert MatchSettings().cutoff == 0.1
    cutoff = MatchSettings(epsilon_compat=True).cutoff
    assert cutoff < 0.1
    matcher = ClassMatcher(threshold=cutoff)
    assert matcher.filter_pairs([Match('a', 'b', 0.1), Match('c', 'd', 0.05)]) == {'c': 'd'}

def test_all_pairs_is_complete():
    table = ClassDistanceTable(['a1', 'a2'], ['b1', 'b2', 'b3'], np.full((2, 3), 0.5))
    triples = ClassMatcher().all_pairs(table)
    assert len(triples) == 6
    assert triples[0] == ('a1', 'b1', 0.5)
    assert triples[-1] == ('a2', 'b3', 0.5)

def test_no_b_classes():
    table = ClassDistanceTable(['a1'], [], np.ones((1, 0)))
    assert ClassMatcher().select_best_matches(table) == []
