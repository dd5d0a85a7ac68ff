"""
Environment configuration.

    CURRENCY_DECIMAL_PLACES   fractional digits, 0..8      (default 2)
    CURRENCY_UNIT_NAME        unit appended to the words   (default «واحد»)
    CURRENCY_SHOW_WORDS       1/0, true/false, yes/no      (default true)

Entry points load `.env` with python-dotenv before calling load_options().
Values are validated by the FieldOptions model; a bad value stops startup.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from pydantic import ValidationError

from .exceptions import ConfigurationError
from .models import FieldOptions

logger = logging.getLogger(__name__)

ENV_DECIMAL_PLACES = "CURRENCY_DECIMAL_PLACES"
ENV_UNIT_NAME = "CURRENCY_UNIT_NAME"
ENV_SHOW_WORDS = "CURRENCY_SHOW_WORDS"

_ENV_FIELDS: dict[str, str] = {
    ENV_DECIMAL_PLACES: "decimal_places",
    ENV_UNIT_NAME: "unit_name",
    ENV_SHOW_WORDS: "show_words_display",
}


def load_options(environ: Mapping[str, str] | None = None) -> FieldOptions:
    """Build FieldOptions from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Raises:
        ConfigurationError: If a variable is set to an invalid value.
    """
    if environ is None:
        environ = os.environ

    raw: dict[str, Any] = {}
    for env_name, field_name in _ENV_FIELDS.items():
        value = environ.get(env_name)
        if value is not None and value.strip():
            raw[field_name] = value.strip()

    try:
        options = FieldOptions(**raw)
    except ValidationError as exc:
        errors = {
            ".".join(str(p) for p in err["loc"]): err["msg"] for err in exc.errors()
        }
        logger.warning("Rejected currency configuration: %s", errors)
        raise ConfigurationError(
            f"Invalid currency configuration: {errors}", {"errors": errors}
        ) from exc

    logger.info(
        "Currency options: decimal_places=%d unit_name=%s show_words=%s",
        options.decimal_places,
        options.unit_name,
        options.show_words_display,
    )
    return options
