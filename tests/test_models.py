from exercise_search.models import ExerciseRecord, ExerciseTranslation


def test_record_creation_with_only_required_fields():
    record = ExerciseRecord(id="1", name="plank")

    assert record.name == "plank"
    assert record.display_name is None
    assert record.keywords == ()
    assert record.equipment == ()
    assert record.popularity is None
    assert record.muscle_group is None


def test_label_prefers_display_name():
    record = ExerciseRecord(id="1", name="dumbbell goblet squat", display_name="Goblet Squat")
    assert record.label == "Goblet Squat"

    bare = ExerciseRecord(id="2", name="plank")
    assert bare.label == "plank"


def test_translation_from_record_fields():
    record = ExerciseRecord(
        id="1",
        name="squat",
        translated_name="kniebeuge",
        translated_keywords=["hocke"],
    )

    translation = ExerciseTranslation.from_record(record)

    assert translation.name == "kniebeuge"
    assert translation.display_name is None
    assert translation.keywords == ("hocke",)


def test_translation_from_record_without_translated_fields():
    assert ExerciseTranslation.from_record(ExerciseRecord(id="1", name="squat")) is None


def test_records_are_hashable():
    record = ExerciseRecord(id="1", name="squat", keywords=["back squat"], equipment=["barbell"])

    assert record.keywords == ("back squat",)
    assert record.equipment == ("barbell",)
    assert {record: "ok"}[record] == "ok"
    assert len({record, ExerciseRecord(id="1", name="squat", keywords=("back squat",), equipment=("barbell",))}) == 1
