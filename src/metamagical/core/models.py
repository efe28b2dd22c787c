"""Data models for Meta:Magical metadata."""

from typing import Any, Dict
from enum import Enum

# A metadata record is an open-ended mapping; no key is required.
MetadataRecord = Dict[str, Any]

# Attribute under which an object may carry its own metadata record.
META_SYMBOL = "__metamagical__"


class MetadataKey(str, Enum):
    """Conventional metadata keys understood by documentation tools."""
    NAME = "name"
    DOCUMENTATION = "documentation"
    TYPE = "type"
    STABILITY = "stability"
    BELONGS_TO = "belongsTo"
    SIGNATURE = "signature"
    MODULE = "module"
    AUTHORS = "authors"
    LICENCE = "licence"
    PLATFORMS = "platforms"


class Stability(str, Enum):
    """Stability levels an object may advertise."""
    DEPRECATED = "deprecated"
    EXPERIMENTAL = "experimental"
    STABLE = "stable"
    LOCKED = "locked"
