"""
Tests for shared models.
"""

import pytest
from pydantic import ValidationError

from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    """Tests for the AuthenticatedUser model in shared."""

    def test_create_with_id(self):
        """Should create user from an account ID."""
        user = AuthenticatedUser(id=42)
        assert user.id == 42

    def test_id_required(self):
        """Should require the account ID."""
        with pytest.raises(ValidationError):
            AuthenticatedUser()

    def test_immutable(self):
        """Should be immutable (frozen)."""
        user = AuthenticatedUser(id=1)
        with pytest.raises(ValidationError):
            user.id = 2

    def test_ignores_extra_fields(self):
        """Should ignore unknown fields."""
        user = AuthenticatedUser(id=1, role="admin")
        assert not hasattr(user, "role")
