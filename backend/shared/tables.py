"""
SQLAlchemy Core table definitions.

Mirrors migrations/001_create_accounts.sql. The PostgreSQL schema is owned by
the migration files; this metadata is used by the repositories to build
statements and by tests (and ACCOUNTS_AUTO_CREATE_SCHEMA) to create the tables.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    false,
)

metadata = MetaData()


users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(255), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("is_verified", Boolean, nullable=False, default=False, server_default=false()),
    Column("is_delete", Boolean, nullable=False, default=False, server_default=false()),
)


user_profile = Table(
    "user_profile",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        unique=True,  # one profile per account
    ),
    Column("full_name", String(255), nullable=False),
    Column("age", Integer, nullable=True),
    Column("gender", String(64), nullable=True),
    Column("is_delete", Boolean, nullable=False, default=False, server_default=false()),
)
