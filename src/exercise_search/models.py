from dataclasses import dataclass, field
from typing import Optional, Tuple


def _freeze(values) -> Optional[Tuple[str, ...]]:
    return None if values is None else tuple(values)


@dataclass(frozen=True)
class ExerciseRecord:
    id: str
    name: str
    display_name: Optional[str] = None
    translated_name: Optional[str] = None
    translated_display_name: Optional[str] = None
    keywords: Tuple[str, ...] = field(default_factory=tuple)
    translated_keywords: Optional[Tuple[str, ...]] = None
    muscle_group: Optional[str] = None
    popularity: Optional[int] = None
    equipment: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Lists from the catalog are stored as tuples so records stay hashable.
        object.__setattr__(self, "keywords", _freeze(self.keywords) or ())
        object.__setattr__(self, "translated_keywords", _freeze(self.translated_keywords))
        object.__setattr__(self, "equipment", _freeze(self.equipment) or ())

    @property
    def label(self) -> str:
        """Name shown to users: display name, falling back to the canonical name."""
        return self.display_name or self.name


@dataclass(frozen=True)
class ExerciseTranslation:
    name: Optional[str] = None
    display_name: Optional[str] = None
    keywords: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, "keywords", _freeze(self.keywords))

    @classmethod
    def from_record(cls, record: ExerciseRecord) -> Optional["ExerciseTranslation"]:
        """Build a translation from the record's own translated fields, if any."""
        if not (
            record.translated_name
            or record.translated_display_name
            or record.translated_keywords
        ):
            return None
        return cls(
            name=record.translated_name,
            display_name=record.translated_display_name,
            keywords=record.translated_keywords,
        )


@dataclass(frozen=True)
class ScoredMatch:
    record: ExerciseRecord
    score: int
