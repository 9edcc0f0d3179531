"""
Profile repository for database access.

Encapsulates the profile statements, including the two cross-table
transactions:
- profile insert + account is_verified flip
- account + profile soft delete
"""

from typing import Any, Optional

from sqlalchemy import insert, update
from sqlalchemy.engine import Connection

from shared.repository import BaseRepository
from shared.tables import users, user_profile


class ProfileRepository(BaseRepository[dict]):
    """
    Repository for profile data access.

    Multi-statement writes run inside a single engine.begin() block:
    they commit together or roll back together.

    Note: This repository does NOT perform authorization checks.
    The API layer is responsible for resolving the acting account.
    """

    def create_profile(
        self,
        user_id: int,
        full_name: str,
        age: Optional[int] = None,
        gender: Optional[str] = None,
    ) -> None:
        """Insert the profile and mark the owning account verified, atomically."""
        with self._engine.begin() as conn:
            conn.execute(
                insert(user_profile).values(
                    user_id=user_id,
                    full_name=full_name,
                    age=age,
                    gender=gender,
                )
            )
            self._mark_verified(conn, user_id)

    def update_profile(self, user_id: int, fields: dict[str, Any]) -> int:
        """
        Update only the given profile columns.

        The identity predicate is always the last clause of the statement.

        Returns:
            Number of profile rows matched.

        Raises:
            ValueError: If fields is empty (an UPDATE without SET is invalid)
        """
        if not fields:
            raise ValueError("update_profile requires at least one field")

        stmt = (
            update(user_profile)
            .values(**fields)
            .where(user_profile.c.user_id == user_id)
        )
        with self._engine.begin() as conn:
            return conn.execute(stmt).rowcount

    def soft_delete(self, user_id: int) -> bool:
        """
        Flag the account and its profile as deleted in one transaction.

        Returns:
            False if no account row exists, True otherwise.
        """
        with self._engine.begin() as conn:
            result = conn.execute(
                update(users).where(users.c.id == user_id).values(is_delete=True)
            )
            if result.rowcount == 0:
                return False

            conn.execute(
                update(user_profile)
                .where(user_profile.c.user_id == user_id)
                .values(is_delete=True)
            )
        return True

    def _mark_verified(self, conn: Connection, user_id: int) -> None:
        conn.execute(
            update(users).where(users.c.id == user_id).values(is_verified=True)
        )
