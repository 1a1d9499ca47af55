"""
Ranker-backed matching strategies.

These layers delegate to the catalog ranker and differ only in what they
feed it and how much they trust its top result.
"""
import logging
from typing import Mapping, Optional, Sequence

from ..models import ExerciseRecord, ExerciseTranslation
from ..search.ranker import rank
from ..search.synonyms import expand_abbreviations
from .semantic_resolver import CatalogMatcher, ResolutionResult

logger = logging.getLogger(__name__)

RANKED_BASE_CONFIDENCE = 0.5
RANKED_OVERLAP_WEIGHT = 0.45
RANKED_MAX_CONFIDENCE = 0.95


def word_overlap_confidence(query: str, label: str) -> float:
    """
    Confidence from the share of query words found in a result label.
    
    A query word counts when it is a substring of some label word or vice
    versa. Ranges from 0.5 (no overlap) to 0.95 (full overlap).
    
    :param query: Normalized query
    :param label: Name of the top-ranked record
    :return: Confidence in [0.5, 0.95]
    """
    query_words = query.lower().split()
    if not query_words:
        return RANKED_BASE_CONFIDENCE
    
    label_words = label.lower().split()
    matched = [
        query_word
        for query_word in query_words
        if any(label_word in query_word or query_word in label_word for label_word in label_words)
    ]
    
    overlap = len(matched) / len(query_words)
    return min(
        RANKED_MAX_CONFIDENCE,
        RANKED_BASE_CONFIDENCE + RANKED_OVERLAP_WEIGHT * overlap,
    )


class RankedMatcher(CatalogMatcher):
    """
    Top result of the full ranker, trusted by word overlap with the query.
    """
    
    strategy_name = "ranked"
    
    def match(
        self,
        query: str,
        catalog: Sequence[ExerciseRecord],
        translations: Optional[Mapping[str, ExerciseTranslation]] = None,
    ) -> ResolutionResult:
        if not query.strip():
            return ResolutionResult.no_match(query, self.strategy_name)
        
        ranked = rank(catalog, query, translations)
        if not ranked:
            return ResolutionResult.no_match(query, self.strategy_name)
        
        top = ranked[0]
        return ResolutionResult(
            record=top,
            confidence=word_overlap_confidence(query, top.label),
            strategy_used=self.strategy_name,
            original_query=query,
        )


class AbbreviationMatcher(CatalogMatcher):
    """
    Expands gym shorthand ("rdl", "db", "ohp") and re-ranks.
    
    Skipped when expansion leaves the query unchanged.
    """
    
    strategy_name = "abbreviation"
    confidence = 0.75
    
    def match(
        self,
        query: str,
        catalog: Sequence[ExerciseRecord],
        translations: Optional[Mapping[str, ExerciseTranslation]] = None,
    ) -> ResolutionResult:
        expanded = expand_abbreviations(query)
        if expanded == query or not expanded.strip():
            return ResolutionResult.no_match(query, self.strategy_name)
        
        logger.debug(f"Expanded abbreviations: '{query}' -> '{expanded}'")
        
        ranked = rank(catalog, expanded, translations)
        if not ranked:
            return ResolutionResult.no_match(query, self.strategy_name)
        
        return ResolutionResult(
            record=ranked[0],
            confidence=self.confidence,
            strategy_used=self.strategy_name,
            original_query=query,
        )


class SignificantWordMatcher(CatalogMatcher):
    """
    Lowest-trust layer: the first long word that matches anything.
    
    "squat" out of "goblet squat variation b" is enough to surface a
    candidate, but never enough to accept it without the user.
    """
    
    strategy_name = "significant_word"
    confidence = 0.4
    min_word_length = 4
    
    def match(
        self,
        query: str,
        catalog: Sequence[ExerciseRecord],
        translations: Optional[Mapping[str, ExerciseTranslation]] = None,
    ) -> ResolutionResult:
        words = [word for word in query.split() if len(word) >= self.min_word_length]
        
        for word in words:
            ranked = rank(catalog, word, translations)
            if ranked:
                logger.debug(f"Significant word '{word}' matched '{ranked[0].label}'")
                return ResolutionResult(
                    record=ranked[0],
                    confidence=self.confidence,
                    strategy_used=self.strategy_name,
                    original_query=query,
                )
        
        return ResolutionResult.no_match(query, self.strategy_name)
