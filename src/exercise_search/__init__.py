"""
Exercise search and matching engine.

Ranks an exercise catalog against free-text queries and resolves externally
proposed exercise names to a single record with a confidence score.
"""
from .models import ExerciseRecord, ExerciseTranslation, ScoredMatch
from .config import SearchConfig
from .exceptions import ExerciseSearchError, ConfigurationError, ImportValidationError
from .search import rank, score, score_catalog
from .resolution import ExerciseResolver, ResolutionResult, create_exercise_resolver, resolve
from .reconciliation import ImportedExercise, MatchResult, match_exercises_to_catalog

__all__ = [
    "ExerciseRecord",
    "ExerciseTranslation",
    "ScoredMatch",
    "SearchConfig",
    "ExerciseSearchError",
    "ConfigurationError",
    "ImportValidationError",
    "rank",
    "score",
    "score_catalog",
    "ExerciseResolver",
    "ResolutionResult",
    "create_exercise_resolver",
    "resolve",
    "ImportedExercise",
    "MatchResult",
    "match_exercises_to_catalog",
]
