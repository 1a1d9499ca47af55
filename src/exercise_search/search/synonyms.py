"""
Static synonym and abbreviation tables.

Synonym groups widen single-term matching in the ranker; the abbreviation map
is a one-way gym-jargon expansion used only as a resolver fallback.
"""
import re
from typing import Dict, Tuple


SYNONYM_GROUPS: Tuple[Tuple[str, ...], ...] = (
    ("plate", "plated", "weight", "weighted"),
    ("pushup", "pressup"),
    ("abs", "abdominal", "abdominals"),
    ("lat", "lats", "latissimus"),
    ("bicep", "biceps"),
    ("tricep", "triceps"),
    ("glute", "glutes", "gluteal"),
    ("hamstring", "hamstrings"),
    ("calf", "calves"),
)

ABBREVIATIONS: Dict[str, str] = {
    "rdl": "romanian deadlift",
    "ohp": "overhead press",
    "bb": "barbell",
    "db": "dumbbell",
    "ez": "ez bar",
    "dl": "deadlift",
    "bp": "bench press",
    "sldl": "stiff leg deadlift",
    "cgbp": "close grip bench press",
    "jm": "jm press",
    "ghr": "glute ham raise",
    "rdls": "romanian deadlift",
    "hip thrust": "barbell hip thrust",
}


def _build_synonym_lookup() -> Dict[str, Tuple[str, ...]]:
    lookup: Dict[str, list] = {}
    for group in SYNONYM_GROUPS:
        for word in group:
            mates = lookup.setdefault(word, [])
            mates.extend(other for other in group if other != word and other not in mates)
    return {word: tuple(mates) for word, mates in lookup.items()}


_SYNONYM_LOOKUP = _build_synonym_lookup()

# Longest keys first so "rdls" wins over "rdl" and "hip thrust" is tried whole.
_ABBREVIATION_PATTERN = re.compile(
    r"\b("
    + "|".join(re.escape(key) for key in sorted(ABBREVIATIONS, key=len, reverse=True))
    + r")\b",
    re.IGNORECASE,
)


def synonyms_for(word: str) -> Tuple[str, ...]:
    """Return the group-mates of ``word`` (never ``word`` itself)."""
    return _SYNONYM_LOOKUP.get(word, ())


def expand_abbreviations(text: str) -> str:
    """
    Replace whole-word gym abbreviations with their expansions.
    
    Single pass, so an expansion is never expanded again, and word boundaries
    keep "db" inside "dbell" untouched.
    """
    return _ABBREVIATION_PATTERN.sub(
        lambda match: ABBREVIATIONS[match.group(0).lower()], text
    )
