"""Exceptions raised by Meta:Magical."""

from typing import Any


class MetaMagicalError(Exception):
    """Base class for all Meta:Magical errors."""


class InvalidArgument(MetaMagicalError, TypeError):
    """Exception raised when a value cannot be used as a metadata key."""

    def __init__(self, value: Any, message: str = "Expected an object"):
        self.value = value
        self.message = message
        super().__init__(f"InvalidArgument: {message}")

    def __reduce__(self):
        return (self.__class__, (self.value, self.message))
