class ExerciseSearchError(Exception):
    """Base exception for the exercise search engine."""


class ConfigurationError(ExerciseSearchError):
    """Raised when configuration values are missing or invalid."""


class ImportValidationError(ExerciseSearchError):
    """Raised when an imported exercise payload fails validation."""
