"""Utility functions."""

from .assertions import assert_object, validate_object

__all__ = ["assert_object", "validate_object"]
