"""
Hauge API — User Service Unit Tests
====================================

What:  Tests for UserService storage logic.
How:   Uses mock DB sessions (no real database).

What we test:
    ✅ Create returns the stored representation
    ✅ Unique-constraint violations become ConflictError
    ✅ "No row matched" becomes NotFoundError on every write
    ✅ An empty partial update issues no UPDATE
    ✅ Other database failures become DatabaseError
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from app.exceptions import ConflictError, DatabaseError, NotFoundError
from app.schemas.user import UserCreate, UserUpdate
from app.services.user_service import UserService


def _user(user_id=5, username="alice", email="a@b.com"):
    user = MagicMock()
    user.id = user_id
    user.username = username
    user.email = email
    return user


class TestUserServiceCreate:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_create_user_success(self, mock_db_session):
        mock_db_session.add.side_effect = lambda obj: setattr(obj, "id", 7)

        result = await self.service.create_user(
            mock_db_session, UserCreate(username="alice", email="a@b.com")
        )

        assert result.id == 7
        assert result.username == "alice"
        assert result.email == "a@b.com"
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_user_duplicate_email(self, mock_db_session):
        mock_db_session.flush.side_effect = IntegrityError(
            "INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.email")
        )

        with pytest.raises(ConflictError):
            await self.service.create_user(
                mock_db_session, UserCreate(username="alice", email="a@b.com")
            )

    @pytest.mark.asyncio
    async def test_create_user_database_down(self, mock_db_session):
        mock_db_session.flush.side_effect = OperationalError(
            "INSERT INTO users", {}, Exception("connection refused")
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_user(
                mock_db_session, UserCreate(username="alice", email="a@b.com")
            )
        assert exc_info.value.message == "Internal server error"


class TestUserServiceRead:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_get_user_found(self, mock_db_session):
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = _user()

        result = await self.service.get_user(mock_db_session, 5)

        assert result.id == 5
        assert result.username == "alice"

    @pytest.mark.asyncio
    async def test_get_user_not_found(self, mock_db_session):
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get_user(mock_db_session, 999)
        assert exc_info.value.message == "User not found"

    @pytest.mark.asyncio
    async def test_list_users(self, mock_db_session):
        mock_db_session.execute.return_value.scalars.return_value.all.return_value = [
            _user(1, "al", "al@b.com"),
            _user(2, "bo", "bo@b.com"),
        ]

        result = await self.service.list_users(mock_db_session)

        assert [u.id for u in result] == [1, 2]


class TestUserServiceWrite:

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_replace_returns_payload(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=1)

        result = await self.service.replace_user(
            mock_db_session, 5, UserCreate(username="bob", email="bob@b.com")
        )

        assert (result.id, result.username, result.email) == (5, "bob", "bob@b.com")

    @pytest.mark.asyncio
    async def test_replace_missing_user(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=0)

        with pytest.raises(NotFoundError):
            await self.service.replace_user(
                mock_db_session, 999, UserCreate(username="bob", email="bob@b.com")
            )

    @pytest.mark.asyncio
    async def test_empty_patch_issues_no_update(self, mock_db_session):
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = _user()

        result = await self.service.update_user(mock_db_session, 5, UserUpdate())

        assert result.username == "alice"
        # Only the re-fetch
        assert mock_db_session.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_patch_missing_user(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=0)

        with pytest.raises(NotFoundError):
            await self.service.update_user(mock_db_session, 999, UserUpdate(username="bob"))

    @pytest.mark.asyncio
    async def test_patch_duplicate_email(self, mock_db_session):
        mock_db_session.execute.side_effect = IntegrityError(
            "UPDATE users", {}, Exception("UNIQUE constraint failed: users.email")
        )

        with pytest.raises(ConflictError):
            await self.service.update_user(mock_db_session, 5, UserUpdate(email="c@b.com"))

    @pytest.mark.asyncio
    async def test_delete_missing_user(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=0)

        with pytest.raises(NotFoundError):
            await self.service.delete_user(mock_db_session, 999)

    @pytest.mark.asyncio
    async def test_delete_database_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError(
            "DELETE FROM users", {}, Exception("connection reset")
        )

        with pytest.raises(DatabaseError):
            await self.service.delete_user(mock_db_session, 5)


class TestUserServiceIdRange:
    """Ids past the INTEGER key range never reach the driver."""

    TOO_LARGE = 99999999999999999999

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_get_user_out_of_range(self, mock_db_session):
        with pytest.raises(NotFoundError):
            await self.service.get_user(mock_db_session, self.TOO_LARGE)
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_writes_out_of_range(self, mock_db_session):
        with pytest.raises(NotFoundError):
            await self.service.replace_user(
                mock_db_session, self.TOO_LARGE, UserCreate(username="bob", email="bob@b.com")
            )
        with pytest.raises(NotFoundError):
            await self.service.update_user(mock_db_session, self.TOO_LARGE, UserUpdate())
        with pytest.raises(NotFoundError):
            await self.service.delete_user(mock_db_session, self.TOO_LARGE)
        mock_db_session.execute.assert_not_awaited()
