"""
Tests for reconciling imported workout exercises with the catalog.
"""
import pytest
from exercise_search.config import SearchConfig
from exercise_search.exceptions import ImportValidationError
from exercise_search.reconciliation import ImportedExercise, match_exercises_to_catalog
from exercise_search.resolution import ExerciseResolver


class TestMatchExercisesToCatalog:
    """Tests for match_exercises_to_catalog."""

    def test_matches_and_flags_each_exercise(self, catalog):
        results = match_exercises_to_catalog(
            [
                {"name": "RDL", "sets": 4, "reps": 8, "weight": "60kg"},
                {"name": "Barbell Hip Thrust"},
                {"name": "totally unknown qq"},
            ],
            catalog,
        )

        rdl, thrust, unknown = results

        assert rdl.matched_exercise.id == "rdl"
        assert rdl.confidence == 0.75
        assert rdl.matched
        assert (rdl.sets, rdl.reps, rdl.weight) == (4, 8, "60kg")

        assert thrust.matched_exercise.id == "hip-thrust"
        assert thrust.confidence == 1.0
        assert (thrust.sets, thrust.reps) == (3, 10)

        assert unknown.matched_exercise is None
        assert unknown.confidence == 0
        assert not unknown.matched

    def test_accepts_models(self, catalog):
        exercise = ImportedExercise(name="Leg Press", sets=5, reps_per_set=[12, 10, 8, 8, 6])

        [result] = match_exercises_to_catalog([exercise], catalog)

        assert result.ai_name == "Leg Press"
        assert result.reps_per_set == [12, 10, 8, 8, 6]
        assert result.matched_exercise.id == "leg-press"

    def test_zero_sets_and_reps_use_defaults(self, catalog):
        [result] = match_exercises_to_catalog([{"name": "leg press", "sets": 0, "reps": 0}], catalog)

        assert (result.sets, result.reps) == (3, 10)

    def test_config_defaults_and_threshold(self, catalog):
        config = SearchConfig(match_confidence_threshold=0.8, default_sets=5, default_reps=5)

        [result] = match_exercises_to_catalog([{"name": "rdl"}], catalog, config=config)

        assert result.confidence == 0.75
        assert not result.matched
        assert (result.sets, result.reps) == (5, 5)

    def test_custom_resolver(self, catalog):
        resolver = ExerciseResolver(SearchConfig(enable_fuzzy_matching=True))

        [result] = match_exercises_to_catalog([{"name": "romainan dedlift"}], catalog, resolver=resolver)

        assert result.matched_exercise.id == "rdl"
        assert not result.matched

    def test_empty_catalog(self):
        results = match_exercises_to_catalog([{"name": "squat"}, {"name": "plank"}], [])

        assert [result.matched for result in results] == [False, False]
        assert all(result.confidence == 0 for result in results)

    @pytest.mark.parametrize("payload", [{"sets": 3}, {"name": "   "}, {"name": "squat", "sets": -1}])
    def test_invalid_payload(self, catalog, payload):
        with pytest.raises(ImportValidationError):
            match_exercises_to_catalog([payload], catalog)

    def test_skip_invalid_keeps_valid_items(self, catalog):
        results = match_exercises_to_catalog(
            [{"name": "rdl", "reps": "8-12"}, {"name": "Leg Press"}],
            catalog,
            skip_invalid=True,
        )

        assert [result.ai_name for result in results] == ["Leg Press"]
        assert results[0].matched

    def test_one_invalid_item_rejects_batch_by_default(self, catalog):
        with pytest.raises(ImportValidationError):
            match_exercises_to_catalog([{"name": "Leg Press"}, {"name": "rdl", "reps": "8-12"}], catalog)
