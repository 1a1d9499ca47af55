import pytest
from exercise_search.models import ExerciseRecord


@pytest.fixture
def catalog():
    return [
        ExerciseRecord(
            id="hip-thrust",
            name="barbell hip thrust",
            display_name="Barbell Hip Thrust",
            keywords=["glute bridge thrust"],
            muscle_group="glutes",
            popularity=5,
        ),
        ExerciseRecord(
            id="rdl",
            name="romanian deadlift",
            display_name="Romanian Deadlift",
            keywords=["stiff leg deadlift"],
            muscle_group="hamstrings",
            popularity=4,
        ),
        ExerciseRecord(
            id="leg-press",
            name="leg press",
            display_name="Leg Press",
            muscle_group="quads",
            popularity=3,
        ),
        ExerciseRecord(
            id="goblet-squat",
            name="dumbbell goblet squat",
            display_name="Goblet Squat",
            keywords=["goblet squat"],
            muscle_group="quads",
            popularity=2,
        ),
        ExerciseRecord(
            id="incline-db-bench",
            name="incline dumbbell bench press",
            display_name="Incline Dumbbell Bench Press",
            keywords=["incline press"],
            muscle_group="pectorals",
        ),
        ExerciseRecord(
            id="lat-pulldown",
            name="lat pulldown",
            display_name="Lat Pulldown",
            keywords=["pulldown"],
            muscle_group="lats",
        ),
    ]
