"""Port for one-way password hashing.

The domain only needs to hash at registration and verify at login; the
algorithm is an infrastructure concern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash suitable for storage."""

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check *password* against a stored hash."""
