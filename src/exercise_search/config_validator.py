"""
Configuration validation utilities.

Every helper raises ConfigurationError naming the offending variable.
"""
import os
from typing import Optional
from .exceptions import ConfigurationError


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.
    
    Blank values are treated as unset.
    
    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_bool_env(key: str, default: bool) -> bool:
    """
    Get boolean environment variable.
    
    :param key: Environment variable name
    :param default: Value used when the variable is not set
    :return: Parsed boolean
    :raises: ConfigurationError if the value is not a recognised boolean
    """
    value = get_optional_env(key)
    if value is None:
        return default
    
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    
    raise ConfigurationError(
        f"{key} must be a boolean (one of: "
        f"{', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}), got '{value}'."
    )


def get_float_env(key: str, default: float) -> float:
    """
    Get float environment variable.
    
    :raises: ConfigurationError if the value cannot be parsed
    """
    value = get_optional_env(key)
    if value is None:
        return default
    
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got '{value}'.") from None


def get_int_env(key: str, default: int, minimum: int = 0) -> int:
    """
    Get integer environment variable bounded below by ``minimum``.
    
    :raises: ConfigurationError if the value cannot be parsed or is too small
    """
    value = get_optional_env(key)
    if value is None:
        return default
    
    try:
        parsed = int(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got '{value}'.") from None
    
    if parsed < minimum:
        raise ConfigurationError(f"{key} must be at least {minimum}, got {parsed}.")
    
    return parsed


def validate_threshold(value: float, name: str) -> float:
    """
    Validate a confidence threshold.
    
    :param value: Threshold to validate
    :param name: Name of the setting (for error messages)
    :return: Validated threshold
    :raises: ConfigurationError if outside [0.0, 1.0]
    """
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(
            f"{name} must be between 0.0 and 1.0, got {value}."
        )
    return value


def validate_choice(value: str, name: str, choices) -> str:
    """
    Validate that a setting is one of a fixed set of values.
    
    :raises: ConfigurationError if ``value`` is not in ``choices``
    """
    if value not in choices:
        raise ConfigurationError(
            f"{name} must be one of: {', '.join(choices)}; got '{value}'."
        )
    return value
