"""
Reconciliation of AI-parsed workout exercises against the catalog.

The video-import pipeline proposes exercise names with sets/reps; each one is
resolved to a catalog record and flagged as matched or needing confirmation.
"""
import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .config import SearchConfig
from .exceptions import ImportValidationError
from .models import ExerciseRecord, ExerciseTranslation
from .resolution import ExerciseResolver, ResolutionResult

logger = logging.getLogger(__name__)


class ImportedExercise(BaseModel):
    name: str = Field(description="Exercise name as extracted from the video")
    sets: Optional[int] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)
    reps_per_set: Optional[List[int]] = None
    weight: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


@dataclass
class MatchResult:
    ai_name: str
    sets: int
    reps: int
    reps_per_set: Optional[List[int]]
    weight: Optional[str]
    notes: Optional[str]
    matched_exercise: Optional[ExerciseRecord]
    confidence: float
    matched: bool


def _validate(item: Union[ImportedExercise, Mapping[str, Any]]) -> ImportedExercise:
    if isinstance(item, ImportedExercise):
        return item
    try:
        return ImportedExercise.model_validate(item)
    except ValidationError as exc:
        raise ImportValidationError(f"Invalid imported exercise {item!r}: {exc}") from exc


def match_exercises_to_catalog(
    exercises: Iterable[Union[ImportedExercise, Mapping[str, Any]]],
    catalog: Sequence[ExerciseRecord],
    resolver: Optional[ExerciseResolver] = None,
    config: Optional[SearchConfig] = None,
    translations: Optional[Mapping[str, ExerciseTranslation]] = None,
    skip_invalid: bool = False,
) -> List[MatchResult]:
    """
    Resolve every imported exercise against the catalog.

    The batch is validated before anything is resolved: by default one invalid
    item rejects the whole import. With ``skip_invalid`` invalid items are
    logged and left out, and the rest are still matched.

    :param exercises: ImportedExercise models or raw dicts from the pipeline
    :param catalog: Exercise records to match against
    :param resolver: Resolver to use; built from ``config`` when omitted
    :param config: SearchConfig supplying thresholds and sets/reps defaults
    :param translations: Optional active-locale translations keyed by record id
    :param skip_invalid: Drop invalid items instead of raising
    :return: One MatchResult per valid imported exercise, in order
    :raises: ImportValidationError if an item fails validation and skip_invalid is False
    """
    if resolver is None:
        resolver = ExerciseResolver(config)
    config = config or resolver.config

    imported: List[ImportedExercise] = []
    for item in exercises:
        try:
            imported.append(_validate(item))
        except ImportValidationError as exc:
            if not skip_invalid:
                raise
            logger.warning(f"Skipping imported exercise: {exc}")

    if not catalog:
        logger.warning(f"Matching {len(imported)} imported exercises against an empty catalog")

    results: List[MatchResult] = []
    for exercise in imported:
        if catalog:
            resolution = resolver.resolve(exercise.name, catalog, translations)
        else:
            resolution = ResolutionResult.no_match(exercise.name)

        results.append(
            MatchResult(
                ai_name=exercise.name,
                sets=exercise.sets or config.default_sets,
                reps=exercise.reps or config.default_reps,
                reps_per_set=exercise.reps_per_set,
                weight=exercise.weight or None,
                notes=exercise.notes or None,
                matched_exercise=resolution.record,
                confidence=resolution.confidence,
                matched=resolution.is_confident(config.match_confidence_threshold),
            )
        )

    matched_count = sum(1 for result in results if result.matched)
    logger.info(f"Reconciled {len(results)} imported exercises: {matched_count} matched")
    return results
