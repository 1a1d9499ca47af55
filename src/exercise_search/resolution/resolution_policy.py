"""
Resolution policy for matcher escalation.

Implements the layered fallback: exact -> keyword -> ranked -> abbreviation
-> significant word (-> fuzzy, when enabled).
"""
import logging
from typing import List, Mapping, Optional, Sequence

from ..models import ExerciseRecord, ExerciseTranslation
from .semantic_resolver import CatalogMatcher, ResolutionResult

logger = logging.getLogger(__name__)


class ResolutionPolicy:
    """
    Policy for escalating through multiple matching layers.
    
    Layers are ordered from most to least trusted. The first layer that
    produces a record wins, even if a later layer would report a higher
    confidence, so trust is decided by layer order alone.
    """
    
    def __init__(self, matchers: List[CatalogMatcher]):
        """
        Initialize resolution policy.
        
        :param matchers: Matchers to try in order (most trusted first)
        """
        if not matchers:
            raise ValueError("At least one matcher must be provided")
        
        self._matchers = list(matchers)
    
    @property
    def strategies(self) -> List[str]:
        return [matcher.strategy_name for matcher in self._matchers]
    
    def resolve(
        self,
        query: str,
        catalog: Sequence[ExerciseRecord],
        translations: Optional[Mapping[str, ExerciseTranslation]] = None,
    ) -> ResolutionResult:
        """
        Resolve a normalized query by trying matchers in order.
        
        :param query: Trimmed, lowercased exercise name
        :param catalog: Exercise records to match against
        :param translations: Optional active-locale translations keyed by record id
        :return: First ResolutionResult carrying a record, or a no-match result
        """
        for matcher in self._matchers:
            result = matcher.match(query, catalog, translations)
            if result.record is not None:
                logger.debug(
                    f"Resolved '{query}' via {result.strategy_used} -> "
                    f"'{result.record.label}' (confidence={result.confidence:.2f})"
                )
                return result
        
        logger.debug(f"No layer matched '{query}'")
        return ResolutionResult.no_match(query)
