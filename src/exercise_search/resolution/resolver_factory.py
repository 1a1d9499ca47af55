"""
Factory for creating exercise resolvers.
"""
from typing import Optional
from ..config import SearchConfig
from ..config_loader import load_config_from_env
from .exercise_resolver import ExerciseResolver


def create_exercise_resolver(
    config: Optional[SearchConfig] = None,
) -> ExerciseResolver:
    """
    Factory function to create an ExerciseResolver.
    
    Loads configuration from the environment when none is provided.
    
    :param config: SearchConfig instance
    :return: Configured ExerciseResolver
    :raises: ConfigurationError if the environment configuration is invalid
    """
    if config is None:
        config = load_config_from_env()
    
    return ExerciseResolver(config)
