"""
Package-wide defaults.

The default codec name comes from the ``COMPACTDATE_CODEC`` environment
variable (``DENSE`` when unset) and is resolved on first use.
"""

import logging
import os
from typing import Optional

from compactdate.calendar.rules import MAX_YEAR, MIN_YEAR
from compactdate.codecs.base import DateCodec
from compactdate.codecs.dense import MAX_ORDINAL
from compactdate.codecs.factory import create_codec

logger = logging.getLogger(__name__)

CODEC_ENV_VAR = "COMPACTDATE_CODEC"
_FALLBACK_CODEC = "DENSE"

_DEFAULT_CODEC: Optional[DateCodec] = None  # Will be initialized on first use

__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "MAX_ORDINAL",
    "CODEC_ENV_VAR",
    "get_default_codec",
    "set_default_codec",
    "reset_default_codec",
]


def get_default_codec() -> DateCodec:
    """Get default codec, initializing it from the environment if needed."""
    global _DEFAULT_CODEC
    if _DEFAULT_CODEC is None:
        name = os.getenv(CODEC_ENV_VAR, _FALLBACK_CODEC)
        _DEFAULT_CODEC = create_codec(name)
        logger.debug("Default date codec initialized to %s", _DEFAULT_CODEC.name)
    return _DEFAULT_CODEC


def set_default_codec(codec_name: str) -> None:
    """Set the default codec used by the ``*_with_default`` helpers."""
    global _DEFAULT_CODEC
    _DEFAULT_CODEC = create_codec(codec_name)
    logger.info("Default date codec set to %s", _DEFAULT_CODEC.name)


def reset_default_codec() -> None:
    """Forget the current default so the next lookup re-reads the environment."""
    global _DEFAULT_CODEC
    _DEFAULT_CODEC = None
