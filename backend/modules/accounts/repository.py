"""
Account repository for database access.

Encapsulates all statements against the users table and its LEFT JOIN
with user_profile.
"""

from typing import Any, Optional

from sqlalchemy import false, insert, select

from shared.repository import BaseRepository
from shared.tables import users, user_profile
from .models import Account, AccountCredentials, AccountDetail, AccountProfile


class AccountRepository(BaseRepository[Account]):
    """
    Repository for account data access.

    All methods return Pydantic models mapped from database rows.
    SQLAlchemy errors propagate to the service layer unchanged.
    """

    def create_account(self, username: str, email: str, password_hash: str) -> int:
        """
        Insert a new account.

        Uniqueness of username and email is left to the table constraints,
        so a concurrent duplicate fails here with an IntegrityError.

        Returns:
            The generated account ID.
        """
        stmt = insert(users).values(
            username=username,
            email=email,
            password_hash=password_hash,
        )
        with self._engine.begin() as conn:
            result = conn.execute(stmt)
            return result.inserted_primary_key[0]

    def list_accounts(self) -> list[Account]:
        """Return every account row ordered by ID."""
        stmt = select(
            users.c.id,
            users.c.username,
            users.c.email,
            users.c.is_verified,
            users.c.is_delete,
        ).order_by(users.c.id)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [self._map_to_account(row) for row in rows]

    def get_account_detail(self, account_id: int) -> Optional[AccountDetail]:
        """
        Get an account LEFT JOINed with its profile.

        Returns:
            AccountDetail, or None if no account row exists.
        """
        stmt = (
            select(
                users.c.id,
                users.c.username,
                users.c.email,
                users.c.is_verified,
                users.c.is_delete,
                user_profile.c.full_name,
                user_profile.c.age,
                user_profile.c.gender,
            )
            .select_from(users.outerjoin(user_profile, user_profile.c.user_id == users.c.id))
            .where(users.c.id == account_id)
        )
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()

        if row is None:
            return None

        return AccountDetail(
            user=self._map_to_account(row),
            profile=AccountProfile(
                full_name=row["full_name"] or "",
                age=row["age"] or 0,
                gender=row["gender"] or "",
            ),
        )

    def get_credentials(self, username: str) -> Optional[AccountCredentials]:
        """
        Get the stored credentials of a non-deleted account.

        Returns:
            AccountCredentials, or None if no live account has this username.
        """
        stmt = select(
            users.c.id,
            users.c.password_hash,
            users.c.is_verified,
        ).where(
            users.c.username == username,
            users.c.is_delete == false(),
        )
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()

        if row is None:
            return None

        return AccountCredentials(
            id=row["id"],
            password_hash=row["password_hash"],
            is_verified=row["is_verified"],
        )

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_account(self, row: Any) -> Account:
        return Account(
            id=row["id"],
            username=row["username"],
            email=row["email"],
            is_verified=row["is_verified"],
            is_deleted=row["is_delete"],
        )
