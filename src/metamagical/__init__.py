"""Meta:Magical - Side-channel metadata for Python objects."""

from .interface import get, set, update, symbol
from .core.registry import MetadataRegistry
from .core.models import MetadataKey, Stability
from .core.exceptions import MetaMagicalError, InvalidArgument

__version__ = "1.0.0"
__all__ = [
    "get",
    "set",
    "update",
    "symbol",
    "MetadataRegistry",
    "MetadataKey",
    "Stability",
    "MetaMagicalError",
    "InvalidArgument"
]
