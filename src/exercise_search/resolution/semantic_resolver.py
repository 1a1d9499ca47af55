"""
Core abstractions for exercise name resolution.

Defines the matcher protocol and the result type shared by every layer.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from ..models import ExerciseRecord, ExerciseTranslation

DEFAULT_CONFIDENCE_THRESHOLD = 0.5


@dataclass(frozen=True)
class ResolutionResult:
    """
    Immutable result of exercise name resolution.
    
    Attributes:
        record: The resolved catalog record, or None when nothing matched
        confidence: Confidence score between 0.0 and 1.0
        strategy_used: Name of the matching layer that produced the result
        original_query: The free-text name that was resolved
    """
    record: Optional[ExerciseRecord]
    confidence: float
    strategy_used: str
    original_query: str
    
    def is_confident(self, threshold: float = DEFAULT_CONFIDENCE_THRESHOLD) -> bool:
        """Check if the match can be accepted without asking the user."""
        return self.record is not None and self.confidence >= threshold
    
    def __post_init__(self):
        """Validate confidence score."""
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be between 0.0 and 1.0, got {self.confidence}")
    
    @classmethod
    def no_match(cls, query: str, strategy_used: str = "none") -> "ResolutionResult":
        return cls(
            record=None,
            confidence=0.0,
            strategy_used=strategy_used,
            original_query=query,
        )


class CatalogMatcher(ABC):
    """
    Protocol for one layer of the resolution strategy.
    
    Each layer looks for a single best record for an already-normalized
    (trimmed, lowercased) name and reports its own fixed or computed trust.
    """
    
    strategy_name = "none"
    
    @abstractmethod
    def match(
        self,
        query: str,
        catalog: Sequence[ExerciseRecord],
        translations: Optional[Mapping[str, ExerciseTranslation]] = None,
    ) -> ResolutionResult:
        """
        Match a normalized query against the catalog.
        
        :param query: Trimmed, lowercased exercise name
        :param catalog: Exercise records to match against
        :param translations: Optional active-locale translations keyed by record id
        :return: ResolutionResult; record is None when this layer found nothing
        """
        pass
