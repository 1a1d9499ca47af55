"""
Exact matching strategies: canonical name equality and keyword equality.
"""
from typing import Mapping, Optional, Sequence

from ..models import ExerciseRecord, ExerciseTranslation
from .semantic_resolver import CatalogMatcher, ResolutionResult


class ExactNameMatcher(CatalogMatcher):
    """
    Case-insensitive equality against ``name`` or ``display_name``.
    
    Most trusted layer, always tried first.
    """
    
    strategy_name = "exact"
    confidence = 1.0
    
    def match(
        self,
        query: str,
        catalog: Sequence[ExerciseRecord],
        translations: Optional[Mapping[str, ExerciseTranslation]] = None,
    ) -> ResolutionResult:
        for record in catalog:
            names = (record.name, record.display_name)
            if any(name and name.strip().lower() == query for name in names):
                return ResolutionResult(
                    record=record,
                    confidence=self.confidence,
                    strategy_used=self.strategy_name,
                    original_query=query,
                )
        
        return ResolutionResult.no_match(query, self.strategy_name)


class KeywordMatcher(CatalogMatcher):
    """Case-insensitive equality against any of a record's keywords."""
    
    strategy_name = "keyword"
    confidence = 0.9
    
    def match(
        self,
        query: str,
        catalog: Sequence[ExerciseRecord],
        translations: Optional[Mapping[str, ExerciseTranslation]] = None,
    ) -> ResolutionResult:
        for record in catalog:
            if any(keyword.strip().lower() == query for keyword in record.keywords or []):
                return ResolutionResult(
                    record=record,
                    confidence=self.confidence,
                    strategy_used=self.strategy_name,
                    original_query=query,
                )
        
        return ResolutionResult.no_match(query, self.strategy_name)
