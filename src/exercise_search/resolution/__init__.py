"""
Exercise name resolution layer.

Reconciles a single externally proposed exercise name (typed by a user or
extracted from a workout video) to one catalog record with a confidence.

Key components:
- CatalogMatcher: Protocol for resolution layers
- ResolutionResult: Immutable result with confidence scoring
- Matchers: Exact, Keyword, Ranked, Abbreviation, SignificantWord, Fuzzy
- ResolutionPolicy: First-hit escalation through the layers
"""
from .semantic_resolver import CatalogMatcher, ResolutionResult, DEFAULT_CONFIDENCE_THRESHOLD
from .exact_matcher import ExactNameMatcher, KeywordMatcher
from .ranked_matcher import (
    RankedMatcher,
    AbbreviationMatcher,
    SignificantWordMatcher,
    word_overlap_confidence,
)
from .fuzzy_matcher import FuzzyNameMatcher
from .resolution_policy import ResolutionPolicy
from .exercise_resolver import ExerciseResolver, resolve
from .resolver_factory import create_exercise_resolver

__all__ = [
    "CatalogMatcher",
    "ResolutionResult",
    "DEFAULT_CONFIDENCE_THRESHOLD",
    "ExactNameMatcher",
    "KeywordMatcher",
    "RankedMatcher",
    "AbbreviationMatcher",
    "SignificantWordMatcher",
    "word_overlap_confidence",
    "FuzzyNameMatcher",
    "ResolutionPolicy",
    "ExerciseResolver",
    "resolve",
    "create_exercise_resolver",
]
