"""Versioned handles packed into 32-bit identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

VERSION_BIT = 8
INDEX_BIT = 24
INVALID_VERSION = 0xFF
INVALID_INDEX = 0xFFFFFFFF // (INVALID_VERSION + 1)

T = TypeVar("T")


@dataclass
class ResourceHandle(Generic[T]):
    """A 24-bit index plus an 8-bit version, packable into one integer."""

    index: int = INVALID_INDEX
    version: int = INVALID_VERSION

    def __post_init__(self) -> None:
        self.index &= INVALID_INDEX
        self.version &= INVALID_VERSION

    @classmethod
    def from_id(cls, id: int) -> "ResourceHandle[T]":
        """Unpack a handle from its 32-bit identifier."""
        return cls(id & INVALID_INDEX, (id >> INDEX_BIT) & INVALID_VERSION)

    def __int__(self) -> int:
        return (self.version << INDEX_BIT) | (self.index & INVALID_INDEX)

    def is_valid(self) -> bool:
        """True if neither the index nor the version is the invalid value."""
        return self.index != INVALID_INDEX and self.version != INVALID_VERSION

    def reset(self) -> None:
        """Make the handle invalid."""
        self.index = INVALID_INDEX
        self.version = INVALID_VERSION