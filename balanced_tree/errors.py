"""Errors raised by the search trees."""

from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when a key, or a sequence of keys, is None."""


class NotFoundError(KeyError):
    """Raised when a lookup or removal finds no key equal to the argument."""

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"{self.key!r} is not in the tree"
