"""
Tests for AccountService.

Store-backed tests use the in-memory database; failure paths use a mocked
repository.
"""

import pytest
from unittest.mock import MagicMock
from sqlalchemy.exc import IntegrityError, OperationalError

from modules.accounts.service import AccountService
from modules.accounts.interfaces import IAccountService
from modules.accounts.models import RegisterRequest
from modules.accounts.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    MissingAccountFieldsError,
)
from modules.auth.passwords import verify_password
from shared.exceptions import StorageError


def _request(**overrides) -> RegisterRequest:
    data = {"username": "alice", "email": "alice@example.com", "password": "pw"}
    data.update(overrides)
    return RegisterRequest(**data)


@pytest.fixture
def service(account_repository):
    return AccountService(account_repository)


class TestRegister:
    def test_implements_interface(self, service):
        assert isinstance(service, IAccountService)

    def test_register_success(self, service):
        response = service.register(_request())
        assert response.id > 0
        assert response.is_verified is False
        assert response.message == "Account created successfully"

    def test_password_is_hashed(self, service, account_repository):
        """The stored secret should be a hash that verifies the password."""
        service.register(_request())
        credentials = account_repository.get_credentials("alice")
        assert credentials.password_hash != "pw"
        assert verify_password(credentials.password_hash, "pw")

    @pytest.mark.parametrize("field", ["username", "email", "password"])
    def test_missing_field(self, service, field):
        with pytest.raises(MissingAccountFieldsError) as exc_info:
            service.register(_request(**{field: ""}))
        assert exc_info.value.message == "username, email, and password are required"

    def test_duplicate_username(self, service):
        service.register(_request())
        with pytest.raises(DuplicateAccountError):
            service.register(_request(email="other@example.com"))

    def test_duplicate_email(self, service):
        service.register(_request())
        with pytest.raises(DuplicateAccountError):
            service.register(_request(username="alice2"))

    def test_other_integrity_error(self):
        """Non-unique integrity failures should surface as StorageError."""
        repository = MagicMock()
        repository.create_account.side_effect = IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed"))
        with pytest.raises(StorageError) as exc_info:
            AccountService(repository).register(_request())
        assert exc_info.value.message == "failed to create user"

    def test_store_failure(self):
        repository = MagicMock()
        repository.create_account.side_effect = OperationalError("INSERT", {}, Exception("down"))
        with pytest.raises(StorageError):
            AccountService(repository).register(_request())


class TestReads:
    def test_list_accounts(self, service):
        service.register(_request())
        service.register(_request(username="bob", email="bob@example.com"))
        assert [a.username for a in service.list_accounts()] == ["alice", "bob"]

    def test_list_store_failure(self):
        repository = MagicMock()
        repository.list_accounts.side_effect = OperationalError("SELECT", {}, Exception("down"))
        with pytest.raises(StorageError) as exc_info:
            AccountService(repository).list_accounts()
        assert exc_info.value.message == "failed to retrieve users"

    def test_get_account(self, service):
        account_id = service.register(_request()).id
        detail = service.get_account(account_id)
        assert detail.user.id == account_id
        assert detail.profile.age == 0

    def test_get_missing_account(self, service):
        with pytest.raises(AccountNotFoundError) as exc_info:
            service.get_account(12345)
        assert exc_info.value.status_code == 404

    def test_get_store_failure(self):
        repository = MagicMock()
        repository.get_account_detail.side_effect = OperationalError("SELECT", {}, Exception("down"))
        with pytest.raises(StorageError) as exc_info:
            AccountService(repository).get_account(1)
        assert exc_info.value.message == "failed to retrieve user"
