import os
from typing import Dict, Mapping, Optional

from constants import DISCORD_LIMITS
from recipe_models import LimitPolicy

ENV_VARS: Dict[str, str] = {
    "max_author_name": "RECIPE_MAX_AUTHOR_NAME",
    "max_field_name": "RECIPE_MAX_FIELD_NAME",
    "max_field_data": "RECIPE_MAX_FIELD_DATA",
    "max_title": "RECIPE_MAX_TITLE",
    "max_recipe_tags_length": "RECIPE_MAX_TAGS_LENGTH",
    "max_recipe_length": "RECIPE_MAX_RECIPE_LENGTH",
    "max_message_length": "RECIPE_MAX_MESSAGE_LENGTH",
}


def _read_limit(environ: Mapping[str, str], field_name: str) -> int:
    var = ENV_VARS[field_name]
    raw = environ.get(var)
    if raw is None or not raw.strip():
        return DISCORD_LIMITS[field_name]
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got '{raw}'") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def load_limit_policy(environ: Optional[Mapping[str, str]] = None) -> LimitPolicy:
    """Build a LimitPolicy from the environment, defaulting to Discord's limits."""
    environ = os.environ if environ is None else environ
    return LimitPolicy(**{name: _read_limit(environ, name) for name in ENV_VARS})
