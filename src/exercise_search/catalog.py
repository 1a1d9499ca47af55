"""
Catalog-level helpers used alongside search: sorting, equipment and muscle
filtering, and the curated "popular exercises" shortlist.
"""
from typing import List, Mapping, Optional, Sequence

from .models import ExerciseRecord, ExerciseTranslation
from .muscle_groups import expand_muscle_filter
from .search.ranker import rank


POPULAR_EXERCISE_NAMES = (
    # Glutes & legs
    "hip thrust",
    "romanian deadlift",
    "barbell squat",
    "bulgarian split squat",
    "hip abduction",
    "cable kickback",
    "leg press",
    "leg extension",
    "leg curl",
    "walking lunge",
    "glute bridge",
    "sumo deadlift",
    "deadlift",
    # Upper body
    "lat pulldown",
    "seated row",
    "lateral raise",
    "shoulder press",
    "tricep pushdown",
    "dumbbell curl",
    "face pull",
    "dumbbell bench press",
    # Core
    "plank",
    "cable crunch",
    "leg raise",
    "russian twist",
)

# Equipment values grouped under the "other" filter.
OTHER_EQUIPMENT = (
    "smith machine",
    "weighted",
    "exercise ball",
    "medicine ball",
    "assisted",
    "roller",
    "bosu ball",
)

BODY_WEIGHT_EQUIPMENT = ("body weight", "bodyweight")

def sort_by_display_name(catalog: Sequence[ExerciseRecord]) -> List[ExerciseRecord]:
    """Return a new list ordered by the name users see."""
    return sorted(catalog, key=lambda record: record.label.lower())


def filter_by_muscle_group(
    catalog: Sequence[ExerciseRecord],
    simplified_id: str,
) -> List[ExerciseRecord]:
    """Keep records whose raw muscle tag falls under a simplified category."""
    wanted = {value.lower() for value in expand_muscle_filter(simplified_id)}
    return [
        record
        for record in catalog
        if record.muscle_group and record.muscle_group.strip().lower() in wanted
    ]


def _overlaps(candidate: str, popular_name: str) -> bool:
    candidate = candidate.strip().lower()
    if not candidate:
        return False
    return popular_name in candidate or candidate in popular_name


def get_popular_exercises(catalog: Sequence[ExerciseRecord]) -> List[ExerciseRecord]:
    """
    Pick one record per curated popular name, in curated order.

    A record qualifies when its name or any keyword contains the popular name
    or is contained by it. Each record appears at most once.
    """
    popular: List[ExerciseRecord] = []
    seen_ids = set()

    for popular_name in POPULAR_EXERCISE_NAMES:
        for record in catalog:
            if _overlaps(record.name, popular_name) or any(
                _overlaps(keyword, popular_name) for keyword in record.keywords or []
            ):
                if record.id not in seen_ids:
                    popular.append(record)
                    seen_ids.add(record.id)
                break

    return popular


def _matches_equipment(record: ExerciseRecord, wanted: str) -> bool:
    owned = [item.strip().lower() for item in record.equipment]

    if wanted == "other":
        return any(item in OTHER_EQUIPMENT for item in owned)
    if wanted in ("body weight", "none"):
        return not owned or any(item in BODY_WEIGHT_EQUIPMENT for item in owned)
    if wanted == "machine":
        return any("machine" in item for item in owned)
    return wanted in owned


def filter_exercises(
    catalog: Sequence[ExerciseRecord],
    equipment: Optional[str] = None,
    muscles: Optional[Sequence[str]] = None,
    query: Optional[str] = None,
    translations: Optional[Mapping[str, ExerciseTranslation]] = None,
) -> List[ExerciseRecord]:
    """
    Combined library filter: equipment, then muscles, then ranked search.

    Equipment rules:
    - "all" or None: no equipment filter
    - "other": any equipment listed in OTHER_EQUIPMENT
    - "body weight" / "none": no equipment, or body weight
    - "machine": any equipment containing "machine"
    - anything else: exact (case-insensitive) equipment match

    :param catalog: Exercise records to filter (never mutated)
    :param equipment: Equipment filter value
    :param muscles: Raw muscle tags to keep (case-insensitive); empty means all
    :param query: Free-text query; blank keeps the filtered order
    :param translations: Optional active-locale translations keyed by record id
    :return: Filtered records, ranked by relevance when a query is given
    """
    filtered = list(catalog)

    if equipment and equipment.strip().lower() != "all":
        wanted = equipment.strip().lower()
        filtered = [record for record in filtered if _matches_equipment(record, wanted)]

    if muscles:
        wanted_muscles = {muscle.strip().lower() for muscle in muscles}
        filtered = [
            record
            for record in filtered
            if record.muscle_group and record.muscle_group.strip().lower() in wanted_muscles
        ]

    if query and query.strip():
        return list(rank(filtered, query, translations))

    return filtered
