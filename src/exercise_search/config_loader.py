"""
Configuration loader with validation.
"""
from dotenv import load_dotenv
from .config import FUZZY_SCORERS, SearchConfig
from .config_validator import (
    get_bool_env,
    get_float_env,
    get_int_env,
    get_optional_env,
    validate_choice,
    validate_threshold,
)


def load_config_from_env(load_env_file: bool = True) -> SearchConfig:
    """
    Load search configuration from environment variables with validation.
    
    Usage:
        config = load_config_from_env()
        resolver = create_exercise_resolver(config)
    
    :param load_env_file: Read a local .env file first (development convenience)
    :return: Validated SearchConfig instance
    :raises: ConfigurationError if any value is malformed or out of range
    """
    if load_env_file:
        load_dotenv()
    
    defaults = SearchConfig()
    
    config = SearchConfig(
        match_confidence_threshold=get_float_env(
            "MATCH_CONFIDENCE_THRESHOLD", defaults.match_confidence_threshold
        ),
        enable_fuzzy_matching=get_bool_env(
            "ENABLE_FUZZY_MATCHING", defaults.enable_fuzzy_matching
        ),
        fuzzy_threshold=get_float_env("FUZZY_THRESHOLD", defaults.fuzzy_threshold),
        fuzzy_scorer=get_optional_env("FUZZY_SCORER", defaults.fuzzy_scorer),
        default_sets=get_int_env("DEFAULT_SETS", defaults.default_sets, minimum=1),
        default_reps=get_int_env("DEFAULT_REPS", defaults.default_reps, minimum=1),
    )
    
    validate_threshold(config.match_confidence_threshold, "MATCH_CONFIDENCE_THRESHOLD")
    validate_threshold(config.fuzzy_threshold, "FUZZY_THRESHOLD")
    validate_choice(config.fuzzy_scorer, "FUZZY_SCORER", FUZZY_SCORERS)
    
    return config
