"""Pytest configuration and fixtures."""

import pytest
from metamagical import MetadataRegistry


class Thing:
    """Plain object with reference identity."""

    def __init__(self, label="thing"):
        self.label = label


class EqualThing:
    """Objects that compare and hash equal regardless of identity."""

    def __eq__(self, other):
        return isinstance(other, EqualThing)

    def __hash__(self):
        return 1


class UnhashableThing:
    """Object that cannot be used as a dictionary key."""

    __hash__ = None


@pytest.fixture
def registry():
    """Create an isolated metadata registry for testing."""
    return MetadataRegistry(shards=4)


@pytest.fixture
def thing():
    """Create a fresh object to annotate."""
    return Thing()


@pytest.fixture
def invalid_keys():
    """Values that cannot carry metadata."""
    return [42, "x", None, True, 1.5, b"bytes", (1, 2), [1, 2], {"a": 1}]
