"""
Per-record relevance scoring.

Scores one exercise record against one already-normalized search term.
Points from independent signals add up; keywords are alternative names for
the same exercise, so only the best keyword counts.
"""
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..models import ExerciseRecord, ExerciseTranslation
from ..muscle_groups import find_simplified_muscle_id


KEYWORD_EXACT_POINTS = 90
KEYWORD_PREFIX_POINTS = 80
KEYWORD_CONTAINS_POINTS = 40
NAME_PREFIX_POINTS = 100
WORD_EXACT_POINTS = 50
WORD_PREFIX_POINTS = 30
NAME_SUBSTRING_POINTS = 25
MUSCLE_GROUP_POINTS = 10
MAX_POPULARITY_BONUS = 5

_EDGE_PUNCTUATION = re.compile(r"^[\W_]+|[\W_]+$")


def _tokenize(text: str) -> List[str]:
    tokens = []
    for word in text.split():
        token = _EDGE_PUNCTUATION.sub("", word)
        if token:
            tokens.append(token)
    return tokens


@dataclass(frozen=True)
class SearchableFields:
    """
    Normalized, already-defaulted view of a record for scoring.

    Built once per record per search so the scoring layers never have to
    re-check optional fields.
    """
    names: Tuple[str, ...]
    tokens: Tuple[str, ...]
    keywords: Tuple[str, ...]
    muscle_terms: Tuple[str, ...]
    popularity: int

    @classmethod
    def from_record(
        cls,
        record: ExerciseRecord,
        translation: Optional[ExerciseTranslation] = None,
    ) -> "SearchableFields":
        if translation is None:
            translation = ExerciseTranslation.from_record(record)

        raw_names = [record.name, record.display_name]
        raw_keywords = list(record.keywords or [])
        if translation is not None:
            raw_names.extend([translation.name, translation.display_name])
            raw_keywords.extend(translation.keywords or [])

        names = tuple(name.lower() for name in raw_names if name)
        tokens = tuple(token for name in names for token in _tokenize(name))
        keywords = tuple(keyword.lower() for keyword in raw_keywords if keyword)

        muscle_terms: Tuple[str, ...] = ()
        if record.muscle_group:
            # Unknown tags are not searchable by the "other" fallback category.
            simplified = find_simplified_muscle_id(record.muscle_group)
            muscle_terms = tuple(
                term for term in (record.muscle_group.lower(), simplified) if term
            )

        return cls(
            names=names,
            tokens=tokens,
            keywords=keywords,
            muscle_terms=muscle_terms,
            popularity=max(record.popularity or 0, 0),
        )


def _keyword_points(keywords: Tuple[str, ...], term: str) -> int:
    best = 0
    for keyword in keywords:
        if keyword == term:
            return KEYWORD_EXACT_POINTS
        if keyword.startswith(term):
            best = max(best, KEYWORD_PREFIX_POINTS)
        elif term in keyword:
            best = max(best, KEYWORD_CONTAINS_POINTS)
    return best


def score_fields(fields: SearchableFields, term: str) -> int:
    """
    Score a normalized record view against a lowercased, trimmed term.

    :param fields: SearchableFields built for the record
    :param term: Single search term (word or phrase), not split further
    :return: Non-negative relevance score; 0 means no match
    """
    if not term:
        return 0

    total = _keyword_points(fields.keywords, term)

    if any(name.startswith(term) for name in fields.names):
        total += NAME_PREFIX_POINTS

    if any(token == term for token in fields.tokens):
        total += WORD_EXACT_POINTS
    elif any(token.startswith(term) for token in fields.tokens):
        total += WORD_PREFIX_POINTS

    if any(term in name for name in fields.names):
        total += NAME_SUBSTRING_POINTS

    if any(term in muscle for muscle in fields.muscle_terms):
        total += MUSCLE_GROUP_POINTS

    if total > 0:
        total += min(fields.popularity, MAX_POPULARITY_BONUS)

    return total


def score(
    record: ExerciseRecord,
    term: str,
    translation: Optional[ExerciseTranslation] = None,
) -> int:
    """Score a single record against a single term."""
    return score_fields(SearchableFields.from_record(record, translation), term)
