"""
Codec registry and factory functions.
"""
import logging
from typing import Dict, List, Type

from .base import DateCodec
from .dense import DenseDateCodec
from .packed import PackedDateCodec

logger = logging.getLogger(__name__)

_REGISTRY: Dict[str, Type[DateCodec]] = {
    DenseDateCodec.name: DenseDateCodec,
    PackedDateCodec.name: PackedDateCodec,
}


def create_codec(name: str) -> DateCodec:
    """
    Create a codec based on its name.

    Args:
        name: Codec name, case-insensitive (DENSE, PACKED or a registered one)

    Returns:
        A new codec instance
    """
    key = name.upper().strip()
    try:
        codec_cls = _REGISTRY[key]
    except KeyError as exc:
        raise ValueError(
            f"Unknown date codec: {name}. Available: {', '.join(available_codecs())}"
        ) from exc
    return codec_cls()


def register_codec(name: str, codec_cls: Type[DateCodec]) -> None:
    """Register a custom codec class under ``name``."""
    key = name.upper().strip()
    if key in _REGISTRY:
        raise ValueError(f"Date codec '{name}' already registered")
    if not (isinstance(codec_cls, type) and issubclass(codec_cls, DateCodec)):
        raise TypeError(f"{codec_cls!r} is not a DateCodec subclass")
    _REGISTRY[key] = codec_cls
    logger.debug("Registered date codec %s -> %s", key, codec_cls.__name__)


def unregister_codec(name: str) -> None:
    """Remove a previously registered codec. Built-in codecs cannot be removed."""
    key = name.upper().strip()
    if key in (DenseDateCodec.name, PackedDateCodec.name):
        raise ValueError(f"Cannot unregister built-in codec '{name}'")
    _REGISTRY.pop(key, None)


def available_codecs() -> List[str]:
    return sorted(_REGISTRY)
