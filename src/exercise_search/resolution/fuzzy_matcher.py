"""
Fuzzy matching strategy for exercise resolution using rapidfuzz.

Handles typos and near-misses ("romainan dedlift") that the scoring layers
cannot see. Results are always capped below the acceptance threshold so a
fuzzy guess is never accepted without the user.
"""
from typing import Mapping, Optional, Sequence
from rapidfuzz import fuzz, process

from ..models import ExerciseRecord, ExerciseTranslation
from .semantic_resolver import CatalogMatcher, ResolutionResult


class FuzzyNameMatcher(CatalogMatcher):
    """
    Fuzzy match strategy over record names using rapidfuzz.
    
    Uses rapidfuzz's process.extractOne for best match finding.
    """
    
    strategy_name = "fuzzy"
    max_confidence = 0.45
    
    def __init__(
        self,
        threshold: float = 0.75,
        scorer: str = "token_sort_ratio",
    ):
        """
        Initialize fuzzy matcher.
        
        :param threshold: Minimum similarity (0.0-1.0) for a candidate to count
        :param scorer: rapidfuzz scorer to use ("ratio", "partial_ratio", "token_sort_ratio", "token_set_ratio")
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"Threshold must be between 0.0 and 1.0, got {threshold}")
        
        self._scorer_map = {
            "ratio": fuzz.ratio,
            "partial_ratio": fuzz.partial_ratio,
            "token_sort_ratio": fuzz.token_sort_ratio,
            "token_set_ratio": fuzz.token_set_ratio,
        }
        
        if scorer not in self._scorer_map:
            raise ValueError(
                f"Unknown scorer '{scorer}'. "
                f"Must be one of: {list(self._scorer_map.keys())}"
            )
        
        self.threshold = threshold
        self.scorer = scorer
    
    def match(
        self,
        query: str,
        catalog: Sequence[ExerciseRecord],
        translations: Optional[Mapping[str, ExerciseTranslation]] = None,
    ) -> ResolutionResult:
        if not catalog or not query.strip():
            return ResolutionResult.no_match(query, self.strategy_name)
        
        labels = [record.label.lower() for record in catalog]
        result = process.extractOne(
            query,
            labels,
            scorer=self._scorer_map[self.scorer],
            score_cutoff=self.threshold * 100,
        )
        
        if result is None:
            return ResolutionResult.no_match(query, self.strategy_name)
        
        _, similarity, index = result
        return ResolutionResult(
            record=catalog[index],
            confidence=round(self.max_confidence * similarity / 100.0, 4),
            strategy_used=self.strategy_name,
            original_query=query,
        )
