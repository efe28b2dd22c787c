"""Tests for key assertions."""

import pickle

import pytest
from metamagical import InvalidArgument, MetaMagicalError
from metamagical.utils import assert_object, validate_object

from conftest import Thing, UnhashableThing


class TestValidateObject:
    """Test cases for validate_object."""

    @pytest.mark.parametrize("value", [Thing(), UnhashableThing(), Thing, lambda: None, pytest])
    def test_accepts_objects(self, value):
        """Test values with reference identity."""
        assert validate_object(value) is None

    def test_rejects_none(self):
        """Test None."""
        assert "None" in validate_object(None)

    @pytest.mark.parametrize("value", [0, 42, True, False, 1.5, 2j, "", "x", b"x"])
    def test_rejects_primitives(self, value):
        """Test primitive values."""
        assert "primitive" in validate_object(value)

    @pytest.mark.parametrize("value", [(1, 2), [1, 2], {"a": 1}])
    def test_rejects_values_without_weak_references(self, value):
        """Test containers that cannot be referenced weakly."""
        assert "reference identity" in validate_object(value)


class TestAssertObject:
    """Test cases for assert_object."""

    def test_passes_for_objects(self):
        """Test that valid keys do not raise."""
        assert assert_object(Thing()) is None

    def test_raises_invalid_argument(self):
        """Test the raised error kind and payload."""
        with pytest.raises(InvalidArgument) as exc_info:
            assert_object("x")

        error = exc_info.value
        assert error.value == "x"
        assert isinstance(error, MetaMagicalError)
        assert isinstance(error, TypeError)
        assert "primitive str" in str(error)

    def test_invalid_argument_survives_pickling(self):
        """Test that errors can cross process boundaries."""
        with pytest.raises(InvalidArgument) as exc_info:
            assert_object(42)

        restored = pickle.loads(pickle.dumps(exc_info.value))

        assert isinstance(restored, InvalidArgument)
        assert restored.value == 42
        assert restored.message == exc_info.value.message
        assert str(restored) == str(exc_info.value)
