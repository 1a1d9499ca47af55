from exercise_search.catalog import (
    filter_by_muscle_group,
    filter_exercises,
    get_popular_exercises,
    sort_by_display_name,
)
from exercise_search.models import ExerciseRecord
from exercise_search.muscle_groups import expand_muscle_filter, simplified_muscle_id


def test_simplified_muscle_id():
    assert simplified_muscle_id("Pectorals") == "chest"
    assert simplified_muscle_id("hamstrings") == "legs"
    assert simplified_muscle_id("neck") == "other"


def test_expand_muscle_filter():
    assert expand_muscle_filter("legs") == ["quads", "hamstrings", "adductors", "abductors"]
    assert expand_muscle_filter("neck") == ["neck"]


def test_sort_by_display_name(catalog):
    labels = [record.label for record in sort_by_display_name(catalog)]

    assert labels == [
        "Barbell Hip Thrust",
        "Goblet Squat",
        "Incline Dumbbell Bench Press",
        "Lat Pulldown",
        "Leg Press",
        "Romanian Deadlift",
    ]


def test_filter_by_muscle_group(catalog):
    legs = filter_by_muscle_group(catalog, "legs")

    assert [record.id for record in legs] == ["rdl", "leg-press", "goblet-squat"]
    assert filter_by_muscle_group(catalog, "calves") == []


def test_filter_ignores_records_without_muscle_group():
    records = [ExerciseRecord(id="1", name="plank")]

    assert filter_by_muscle_group(records, "core") == []


def test_popular_exercises_follow_curated_order(catalog):
    popular = get_popular_exercises(catalog)

    assert [record.id for record in popular] == [
        "hip-thrust",
        "rdl",
        "leg-press",
        "lat-pulldown",
        "incline-db-bench",
    ]


def test_popular_exercises_match_keywords_and_skip_duplicates():
    records = [
        ExerciseRecord(id="1", name="plank hold", keywords=["front plank"]),
        ExerciseRecord(id="2", name="conventional lift", keywords=["deadlift"]),
        ExerciseRecord(id="3", name="empty keyword", keywords=[""]),
    ]

    assert [record.id for record in get_popular_exercises(records)] == ["2", "1"]


class TestFilterExercises:
    """Tests for the combined equipment, muscle and query filter."""

    @staticmethod
    def _library():
        return [
            ExerciseRecord(id="a", name="push up", equipment=["body weight"], muscle_group="pectorals"),
            ExerciseRecord(id="b", name="plank", muscle_group="abs"),
            ExerciseRecord(id="c", name="leg press", equipment=["Sled Machine"], muscle_group="quads"),
            ExerciseRecord(id="d", name="smith squat", equipment=["smith machine"], muscle_group="quads"),
            ExerciseRecord(id="e", name="ball crunch", equipment=["exercise ball"], muscle_group="abs"),
            ExerciseRecord(id="f", name="barbell squat", equipment=["barbell"], muscle_group="quads"),
        ]

    def _ids(self, records):
        return [record.id for record in records]

    def test_no_filters_returns_everything(self):
        library = self._library()

        assert self._ids(filter_exercises(library)) == ["a", "b", "c", "d", "e", "f"]
        assert self._ids(filter_exercises(library, equipment="all")) == ["a", "b", "c", "d", "e", "f"]

    def test_other_equipment(self):
        assert self._ids(filter_exercises(self._library(), equipment="Other")) == ["d", "e"]

    def test_body_weight_and_none(self):
        library = self._library()

        assert self._ids(filter_exercises(library, equipment="body weight")) == ["a", "b"]
        assert self._ids(filter_exercises(library, equipment="none")) == ["a", "b"]

    def test_machine_matches_any_machine(self):
        assert self._ids(filter_exercises(self._library(), equipment="machine")) == ["c", "d"]

    def test_specific_equipment_needs_exact_match(self):
        library = self._library()

        assert self._ids(filter_exercises(library, equipment="Barbell")) == ["f"]
        assert filter_exercises(library, equipment="bar") == []

    def test_muscle_list_is_case_insensitive(self):
        result = filter_exercises(self._library(), muscles=["Quads", "PECTORALS"])

        assert self._ids(result) == ["a", "c", "d", "f"]

    def test_filters_then_ranks(self):
        library = self._library()

        assert self._ids(filter_exercises(library, muscles=["quads"], query="squat")) == ["f", "d"]
        assert self._ids(filter_exercises(library, equipment="machine", query="squat")) == ["d"]
        assert filter_exercises(library, muscles=["quads"], query="crunch") == []

    def test_blank_query_keeps_filtered_order(self):
        result = filter_exercises(self._library(), equipment="machine", query="   ")

        assert self._ids(result) == ["c", "d"]
