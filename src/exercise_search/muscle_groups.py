"""
Simplified muscle categories.

Catalog records carry anatomical muscle tags ("pectorals", "delts"); users
think in coarser categories ("chest", "shoulders"). This table maps between
the two for both filtering and the scorer's muscle-group layer.
"""
from typing import Dict, List, Optional, Tuple


SIMPLIFIED_MUSCLE_GROUPS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("back", ("lats", "upper back", "traps", "spine")),
    ("biceps", ("biceps",)),
    ("chest", ("pectorals",)),
    ("core", ("abs",)),
    ("glutes", ("glutes",)),
    ("calves", ("calves",)),
    ("legs", ("quads", "hamstrings", "adductors", "abductors")),
    ("shoulders", ("delts", "serratus anterior")),
    ("triceps", ("triceps",)),
    ("other", ("forearms", "cardiovascular system")),
)

FALLBACK_MUSCLE_ID = "other"


def _build_reverse_lookup() -> Dict[str, str]:
    lookup: Dict[str, str] = {}
    for simplified_id, raw_values in SIMPLIFIED_MUSCLE_GROUPS:
        for raw in raw_values:
            lookup[raw.lower()] = simplified_id
    return lookup


_REVERSE_LOOKUP = _build_reverse_lookup()


def find_simplified_muscle_id(muscle_group: str) -> Optional[str]:
    """Return the simplified category of a known raw tag, or None for unknown tags."""
    return _REVERSE_LOOKUP.get(muscle_group.strip().lower())


def simplified_muscle_id(muscle_group: str) -> str:
    """Map a raw muscle tag to its simplified category id ("pectorals" -> "chest")."""
    return find_simplified_muscle_id(muscle_group) or FALLBACK_MUSCLE_ID


def expand_muscle_filter(simplified_id: str) -> List[str]:
    """
    Expand a simplified category id to the raw muscle tags it covers.
    
    Unknown ids are returned as-is so callers can filter on a raw tag directly.
    """
    for group_id, raw_values in SIMPLIFIED_MUSCLE_GROUPS:
        if group_id == simplified_id:
            return list(raw_values)
    return [simplified_id]
