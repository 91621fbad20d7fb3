"""
Identity repository for database access.

Encapsulates Supabase queries against the ``users`` table. Identities are
provisioned by seed.py; the API itself only reads them.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import UserRecord

USERS_TABLE = "users"


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for identity lookups.

    Rows are returned as UserRecord (password hash included) so the auth
    service can verify credentials; callers outside the auth module should
    only ever see UserProfile.
    """

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Get an identity by email, or None if it doesn't exist."""
        query = self._db.table(USERS_TABLE).select("*").eq("email", email).limit(1)
        result = self._execute(query, "get_user_by_email")
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Get an identity by ID, or None if it doesn't exist."""
        query = self._db.table(USERS_TABLE).select("*").eq("id", user_id).limit(1)
        result = self._execute(query, "get_user_by_id")
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def upsert(self, name: str, email: str, password_hash: str) -> UserRecord:
        """
        Create an identity, or reset name and password if the email exists.

        Used by the provisioning command only.
        """
        now = datetime.now(timezone.utc).isoformat()
        data = {
            "name": name,
            "email": email,
            "password": password_hash,
            "updated_at": now,
        }
        query = self._db.table(USERS_TABLE).upsert(data, on_conflict="email")
        result = self._execute(query, "upsert_user")
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            name=data.get("name"),
            email=data["email"],
            password=data["password"],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
