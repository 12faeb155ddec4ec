"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from marketplace.domain.model.user import Role, User
from marketplace.domain.model.value_objects import to_entity_id
from marketplace.domain.repository.user_repository import UserRepository
from marketplace.infrastructure.persistence.json_document import JsonDocument


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._document = JsonDocument(file_path, empty=[])

    # --- UserRepository interface ---------------------------------------------

    def next_id(self) -> str:
        numeric = [int(raw["id"]) for raw in self._load_raw() if str(raw["id"]).isdigit()]
        return str(max(numeric, default=0) + 1)

    def get_by_id(self, user_id: str) -> User | None:
        for raw in self._load_raw():
            if str(raw["id"]) == user_id:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> User | None:
        wanted = email.strip().lower()
        for raw in self._load_raw():
            if raw["email"].lower() == wanted:
                return self._to_domain(raw)
        return None

    def save(self, user: User) -> None:
        records = self._load_raw()
        replaced = False
        for i, raw in enumerate(records):
            if str(raw["id"]) == user.id:
                records[i] = self._to_raw(user)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(user))
        self._document.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "password_hash": user.password_hash,
            "role": user.role.value,
            "is_active": user.is_active,
            "created_at": user.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=to_entity_id(raw["id"]),
            email=raw["email"],
            password_hash=raw["password_hash"],
            name=raw.get("name") or "Anonymous",
            role=Role.parse(raw.get("role")),
            is_active=raw.get("is_active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    def _load_raw(self) -> list[dict]:
        return self._document.load()
