"""Core metadata registry components."""

from .registry import MetadataRegistry
from .models import MetadataRecord, MetadataKey, Stability, META_SYMBOL
from .exceptions import MetaMagicalError, InvalidArgument

__all__ = [
    "MetadataRegistry",
    "MetadataRecord",
    "MetadataKey",
    "Stability",
    "META_SYMBOL",
    "MetaMagicalError",
    "InvalidArgument"
]
