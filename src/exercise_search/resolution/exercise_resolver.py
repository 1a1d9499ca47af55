"""
Concrete resolver for externally proposed exercise names.

Combines the matching layers and policy into a complete resolution system.
"""
from typing import List, Mapping, Optional, Sequence

from ..config import SearchConfig
from ..models import ExerciseRecord, ExerciseTranslation
from .exact_matcher import ExactNameMatcher, KeywordMatcher
from .fuzzy_matcher import FuzzyNameMatcher
from .ranked_matcher import AbbreviationMatcher, RankedMatcher, SignificantWordMatcher
from .resolution_policy import ResolutionPolicy
from .semantic_resolver import ResolutionResult


class ExerciseResolver:
    """
    Resolves a single free-text exercise name to one catalog record.
    
    Combines:
    - ExactNameMatcher (1.0)
    - KeywordMatcher (0.9)
    - RankedMatcher (0.5-0.95, by word overlap)
    - AbbreviationMatcher (0.75)
    - SignificantWordMatcher (0.4)
    - FuzzyNameMatcher (below 0.5, only when enabled)
    
    Usage:
        resolver = ExerciseResolver()
        result = resolver.resolve("bb hip thrust", catalog)
        if result.is_confident():
            exercise = result.record
    """
    
    def __init__(self, config: Optional[SearchConfig] = None):
        """
        Initialize exercise resolver.
        
        :param config: SearchConfig; defaults apply when omitted
        """
        self.config = config or SearchConfig()
        
        matchers = [
            ExactNameMatcher(),
            KeywordMatcher(),
            RankedMatcher(),
            AbbreviationMatcher(),
            SignificantWordMatcher(),
        ]
        if self.config.enable_fuzzy_matching:
            matchers.append(
                FuzzyNameMatcher(
                    threshold=self.config.fuzzy_threshold,
                    scorer=self.config.fuzzy_scorer,
                )
            )
        
        self._policy = ResolutionPolicy(matchers)
    
    @property
    def strategies(self) -> List[str]:
        return self._policy.strategies
    
    def resolve(
        self,
        free_text_name: str,
        catalog: Sequence[ExerciseRecord],
        translations: Optional[Mapping[str, ExerciseTranslation]] = None,
    ) -> ResolutionResult:
        """
        Resolve an exercise name against the catalog.
        
        :param free_text_name: Name to resolve (e.g., "RDL", "goblet squat variation b")
        :param catalog: Exercise records to match against
        :param translations: Optional active-locale translations keyed by record id
        :return: ResolutionResult with the best record and its confidence
        """
        normalized = free_text_name.strip().lower()
        if not normalized or not catalog:
            return ResolutionResult.no_match(free_text_name)
        
        return self._policy.resolve(normalized, catalog, translations)
    
    def is_match(self, result: ResolutionResult) -> bool:
        """Apply the configured acceptance threshold to a result."""
        return result.is_confident(self.config.match_confidence_threshold)
    
    def resolve_multiple(
        self,
        names: List[str],
        catalog: Sequence[ExerciseRecord],
        translations: Optional[Mapping[str, ExerciseTranslation]] = None,
    ) -> List[ResolutionResult]:
        """
        Resolve multiple names in batch.
        
        :param names: Names to resolve
        :param catalog: Exercise records to match against
        :return: One ResolutionResult per name, in order
        """
        return [self.resolve(name, catalog, translations) for name in names]


_default_resolver = ExerciseResolver()


def resolve(
    free_text_name: str,
    catalog: Sequence[ExerciseRecord],
    translations: Optional[Mapping[str, ExerciseTranslation]] = None,
) -> ResolutionResult:
    """Resolve a name with the default layered strategy."""
    return _default_resolver.resolve(free_text_name, catalog, translations)
