"""
Catalog search: per-record scoring, multi-word ranking and the static
synonym/abbreviation tables they share.
"""
from .scorer import SearchableFields, score, score_fields
from .ranker import rank, score_catalog, WORD_COVERAGE_WEIGHT
from .synonyms import ABBREVIATIONS, SYNONYM_GROUPS, expand_abbreviations, synonyms_for

__all__ = [
    "SearchableFields",
    "score",
    "score_fields",
    "rank",
    "score_catalog",
    "WORD_COVERAGE_WEIGHT",
    "ABBREVIATIONS",
    "SYNONYM_GROUPS",
    "expand_abbreviations",
    "synonyms_for",
]
