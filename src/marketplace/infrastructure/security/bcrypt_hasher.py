"""bcrypt-backed implementation of PasswordHasher."""

from __future__ import annotations

import bcrypt

from marketplace.domain.exceptions import ValidationError
from marketplace.domain.service.password_hasher import PasswordHasher

# bcrypt only looks at the first 72 bytes of a password.
_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        encoded = password.encode("utf-8")
        if len(encoded) > _MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {_MAX_PASSWORD_BYTES} bytes"
            )
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        encoded = password.encode("utf-8")
        if len(encoded) > _MAX_PASSWORD_BYTES:
            return False
        return bcrypt.checkpw(encoded, password_hash.encode("ascii"))
