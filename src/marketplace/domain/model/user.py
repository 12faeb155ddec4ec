"""User aggregate: buyers, sellers and administrators."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from marketplace.domain.exceptions import AuthorizationError, ValidationError


class Role(Enum):
    BUYER = "buyer"
    SELLER = "seller"
    ADMIN = "admin"

    @staticmethod
    def parse(raw: str | None) -> Role:
        if raw is None or not raw.strip():
            return Role.BUYER
        try:
            return Role(raw.strip().lower())
        except ValueError as exc:
            raise ValidationError(f"Unknown role {raw!r}") from exc


@dataclass
class User:
    id: str
    email: str
    password_hash: str
    name: str = "Anonymous"
    role: Role = Role.BUYER
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def register(
        id: str,
        email: str,
        password_hash: str,
        name: str | None = None,
        role: Role = Role.BUYER,
    ) -> User:
        email = normalize_email(email)
        if "@" not in email:
            raise ValidationError(f"Invalid email address: {email!r}")
        return User(
            id=id,
            email=email,
            password_hash=password_hash,
            name=(name or "").strip() or "Anonymous",
            role=role,
        )

    def update_profile(self, name: str | None = None, email: str | None = None) -> None:
        """Change the display name and/or login email; omitted fields stay."""
        if email is not None:
            email = normalize_email(email)
            if "@" not in email:
                raise ValidationError(f"Invalid email address: {email!r}")
            self.email = email
        if name is not None:
            self.name = name.strip() or "Anonymous"

    def ensure_role(self, role: Role) -> None:
        """Gate an operation on the user's role (exact match)."""
        if self.role != role:
            label = role.value.capitalize()
            raise AuthorizationError(f"Access denied. {label} account required.")


def normalize_email(email: str) -> str:
    if not email or not email.strip():
        raise ValidationError("Email is required")
    return email.strip().lower()
