"""
Catalog ranking for free-text exercise queries.

Splits the query into words, widens each word with its synonyms, and orders
records so that word coverage always dominates raw per-word score.
"""
import logging
from typing import List, Mapping, Optional, Sequence

from ..models import ExerciseRecord, ExerciseTranslation, ScoredMatch
from .scorer import SearchableFields, score_fields
from .synonyms import synonyms_for

logger = logging.getLogger(__name__)

# Any record matching one more query word outranks every record matching fewer.
WORD_COVERAGE_WEIGHT = 1000

Translations = Mapping[str, ExerciseTranslation]


def _best_variant_score(fields: SearchableFields, word: str) -> int:
    return max(
        score_fields(fields, variant)
        for variant in (word,) + synonyms_for(word)
    )


def _total_score(fields: SearchableFields, query_words: List[str]) -> int:
    if len(query_words) == 1:
        return _best_variant_score(fields, query_words[0])

    matched_words = 0
    matched_points = 0
    for word in query_words:
        best = _best_variant_score(fields, word)
        if best > 0:
            matched_words += 1
            matched_points += best
    return matched_words * WORD_COVERAGE_WEIGHT + matched_points


def _sort_key(match: ScoredMatch):
    return (
        -match.score,
        -(match.record.popularity or 0),
        match.record.label.lower(),
    )


def score_catalog(
    catalog: Sequence[ExerciseRecord],
    query: str,
    translations: Optional[Translations] = None,
) -> List[ScoredMatch]:
    """
    Score every record against the query and return the non-zero matches, best first.

    :param catalog: Exercise records to search
    :param query: Free-text query; must not be blank
    :param translations: Optional active-locale translations keyed by record id
    :return: Sorted ScoredMatch list
    """
    query_words = query.strip().lower().split()
    if not query_words:
        return []

    matches: List[ScoredMatch] = []
    for record in catalog:
        translation = translations.get(record.id) if translations else None
        fields = SearchableFields.from_record(record, translation)
        total = _total_score(fields, query_words)
        if total > 0:
            matches.append(ScoredMatch(record=record, score=total))

    matches.sort(key=_sort_key)
    return matches


def rank(
    catalog: Sequence[ExerciseRecord],
    query: str,
    translations: Optional[Translations] = None,
) -> Sequence[ExerciseRecord]:
    """
    Rank catalog records by relevance to a free-text query.

    A blank query means "no filter": the catalog is returned unchanged.
    Otherwise records that match nothing are dropped and the rest are ordered
    by score, then popularity, then name.

    :param catalog: Exercise records to search (never mutated)
    :param query: Free-text query typed by a user or produced by a pipeline
    :param translations: Optional active-locale translations keyed by record id
    :return: Ordered records, best match first
    """
    if not query.strip():
        return catalog

    ranked = [match.record for match in score_catalog(catalog, query, translations)]
    logger.debug(f"Ranked '{query}': {len(ranked)} of {len(catalog)} records matched")
    return ranked
