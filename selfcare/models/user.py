from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class User(BaseModel):
    id: str
    email: str
    name: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_auth(cls, auth_user) -> "User":
        """Build from a Supabase auth user object or a decoded access-token payload."""
        if isinstance(auth_user, dict):
            user_id = auth_user.get("sub") or auth_user.get("id")
            email = auth_user.get("email") or ""
            metadata = auth_user.get("user_metadata") or {}
            created_at = auth_user.get("created_at")
        else:
            user_id = auth_user.id
            email = auth_user.email or ""
            metadata = auth_user.user_metadata or {}
            created_at = getattr(auth_user, "created_at", None)

        name = metadata.get("name") or email.split("@")[0]
        return cls(id=str(user_id), email=email, name=name, created_at=created_at)
