from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from schedule_handler.core.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from schedule_handler.models.users import UserRole
from schedule_handler.services.json_store import JsonStore

logger = logging.getLogger(__name__)

# Comptes créés au premier démarrage (mots de passe en clair)
DEFAULT_USERS = (
    {"name": "Admin User", "email": "admin@example.com", "password": "admin123", "role": "admin"},
    {"name": "Regular User", "email": "user@example.com", "password": "user123", "role": "user"},
)

IMMUTABLE_FIELDS = ("id", "createdAt")
UPDATABLE_FIELDS = ("name", "email", "password", "role")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def without_password(user: dict) -> dict:
    return {k: v for k, v in user.items() if k != "password"}


class UserService:
    """
    CRUD des comptes sur users.json. Unicité de l'email vérifiée à
    l'écriture par un scan complet.
    """

    def __init__(self, store: JsonStore, seed_defaults: bool = True):
        self.store = store
        if seed_defaults and not self.store.path.exists():
            self._seed()
        else:
            self.store.ensure()

    def _seed(self) -> None:
        now = _now()
        users = [
            {**u, "id": str(uuid.uuid4()), "createdAt": now, "updatedAt": now}
            for u in DEFAULT_USERS
        ]
        self.store.save(users)
        logger.info("users.json initialisé avec %d comptes par défaut", len(users))

    # ------------------------------------------------------------
    # Lecture
    # ------------------------------------------------------------
    def list_all(self) -> List[dict]:
        return self.store.load()

    def count(self) -> int:
        return len(self.store.load())

    def get(self, user_id: str) -> dict:
        user = self.store.find(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def get_by_email(self, email: str) -> Optional[dict]:
        return next((u for u in self.store.load() if u.get("email") == email), None)

    # ------------------------------------------------------------
    # Ecriture
    # ------------------------------------------------------------
    def create(self, name: str, email: str, password: str, role: Optional[str] = None) -> dict:
        now = _now()
        new_user = {
            "id": str(uuid.uuid4()),
            "name": name,
            "email": email,
            "password": password,
            "role": UserRole.admin.value if role == UserRole.admin.value else UserRole.user.value,
            "createdAt": now,
            "updatedAt": now,
        }

        def _insert(users: List[dict]) -> dict:
            if any(u.get("email") == email for u in users):
                raise ConflictError("Email already exists")
            users.append(new_user)
            self.store.save(users)
            return new_user

        created = self.store.transaction(_insert)
        logger.info("Utilisateur %s créé (%s)", created["id"], created["role"])
        return created

    def update(self, user_id: str, **fields) -> dict:
        changes = {
            k: (v.value if isinstance(v, UserRole) else v)
            for k, v in fields.items()
            if k in UPDATABLE_FIELDS and k not in IMMUTABLE_FIELDS and v is not None
        }

        def _update(users: List[dict]) -> dict:
            user = next((u for u in users if u.get("id") == user_id), None)
            if user is None:
                raise NotFoundError("User not found")

            email = changes.get("email")
            if email and email != user.get("email"):
                if any(u.get("email") == email and u.get("id") != user_id for u in users):
                    raise ConflictError("Email already exists")

            user.update(changes)
            user["updatedAt"] = _now()
            self.store.save(users)
            return user

        return self.store.transaction(_update)

    def delete(self, user_id: str) -> None:
        def _delete(users: List[dict]) -> None:
            remaining = [u for u in users if u.get("id") != user_id]
            if len(remaining) == len(users):
                raise NotFoundError("User not found")
            self.store.save(remaining)

        self.store.transaction(_delete)
        logger.info("Utilisateur %s supprimé", user_id)

    def change_role(self, user_id: str, role: str) -> dict:
        try:
            new_role = UserRole(role)
        except ValueError:
            raise ValidationError('Invalid role. Must be "admin" or "user"')

        user = self.update(user_id, role=new_role)
        logger.info("Utilisateur %s -> rôle %s", user_id, new_role.value)
        return user

    # ------------------------------------------------------------
    # Authentification
    # ------------------------------------------------------------
    def authenticate(self, email: str, password: str) -> dict:
        """
        Comparaison directe du mot de passe stocké (pas de hash, pas de token).
        """
        user = self.get_by_email(email)
        if not user or user.get("password") != password:
            raise AuthenticationError("Invalid credentials")
        return without_password(user)
