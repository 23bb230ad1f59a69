"""User storage for the storefront"""

import uuid
from typing import Optional

from ..models.common import utcnow
from ..models.user import User, UserCreate, UserUpdate


class UserDatabase:
    """In-memory user storage"""

    def __init__(self):
        self.users: dict[str, User] = {}

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def get_all_users(self) -> list[User]:
        return list(self.users.values())

    def add_user(self, user: User) -> User:
        self.users[user.id] = user
        return user

    def create_user(self, data: UserCreate) -> User:
        now = utcnow()
        user = User(
            id=str(uuid.uuid4()),
            email=data.email,
            name=data.name,
            address=data.address,
            created_at=now,
            updated_at=now,
        )
        return self.add_user(user)

    def update_user(self, user_id: str, update: UserUpdate) -> Optional[User]:
        user = self.get_user(user_id)
        if not user:
            return None

        fields = update.model_fields_set
        if "email" in fields and update.email is not None:
            user.email = update.email
        if "name" in fields and update.name is not None:
            user.name = update.name
        if "address" in fields:
            user.address = update.address

        user.updated_at = utcnow()
        return user

    def delete_user(self, user_id: str) -> Optional[User]:
        return self.users.pop(user_id, None)
