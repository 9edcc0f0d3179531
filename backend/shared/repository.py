"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
engine access and leaving error translation to the service layer.
"""

from typing import TypeVar, Generic
from sqlalchemy.engine import Engine


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - SQLAlchemy engine access via self._engine
    - Generic type parameter for model type hints

    Subclasses implement domain-specific statements and map rows to
    Pydantic models internally. SQLAlchemy exceptions are allowed to
    propagate; services classify them.

    Example:
        class AccountRepository(BaseRepository[Account]):
            def get_by_id(self, account_id: int) -> Optional[Account]:
                with self._engine.connect() as conn:
                    row = conn.execute(
                        select(users).where(users.c.id == account_id)
                    ).mappings().first()
                return self._map_to_account(row) if row else None
    """

    def __init__(self, engine: Engine) -> None:
        """
        Initialize the repository with a SQLAlchemy engine.

        Args:
            engine: Engine created once at application startup.
        """
        self._engine = engine
