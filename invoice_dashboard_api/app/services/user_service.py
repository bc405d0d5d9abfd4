"""
Business logic for dashboard users.

Users only exist to sign in to the dashboard.  Registration and
password resets are performed from the management CLI; the HTTP layer
only reads users through the credentials provider.
"""

import logging
from typing import Optional, Tuple

from ..core.db import get_connection
from ..core.security import hash_password
from ..schemas.auth import UserCreate, UserRead


class UserService:
    """Access to the ``users`` table."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Create a new user with a hashed password.

        Raises ``ValueError`` if the e‑mail is already registered.
        """
        logger = logging.getLogger(__name__)
        logger.info("Registering user %s", data.email)
        conn = get_connection()
        try:
            existing = conn.execute(
                "SELECT id FROM users WHERE email = ?", (data.email,)
            ).fetchone()
            if existing:
                raise ValueError(f"User {data.email} already exists")
            rows = conn.execute(
                "INSERT INTO users (name, email, password) VALUES (?, ?, ?) RETURNING id",
                (data.name, data.email, hash_password(data.password)),
            ).fetchall()
            conn.commit()
            return UserRead(id=rows[0]["id"], name=data.name, email=data.email)
        finally:
            conn.close()

    @classmethod
    async def get_user_with_password(cls, email: str) -> Optional[Tuple[UserRead, str]]:
        """Return the user registered under ``email`` and its stored hash."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, name, email, password FROM users WHERE email = ?",
                (email,),
            ).fetchone()
        finally:
            conn.close()
        if not row:
            return None
        return UserRead(id=row["id"], name=row["name"], email=row["email"]), row["password"]

    @classmethod
    async def set_password(cls, email: str, password: str) -> None:
        """Replace the password of an existing user.

        Raises ``ValueError`` if no user has that e‑mail.
        """
        conn = get_connection()
        try:
            cursor = conn.execute(
                "UPDATE users SET password = ? WHERE email = ?",
                (hash_password(password), email),
            )
            if cursor.rowcount == 0:
                raise ValueError(f"User {email} not found")
            conn.commit()
        finally:
            conn.close()
