# =============================================================================
# tests/test_user_service.py - User Data Access Tests
# =============================================================================
# Tests UserService against the in-memory collection from conftest.py.
# Driver failures are injected with `fail` / `fail_on`.
# =============================================================================

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.exceptions import (
    DatabaseError,
    DuplicateEmailError,
    InvalidUpdateError,
    UserNotFoundError,
)
from core.models.user import CreateUserRequest, UpdateUserRequest
from core.services.user_service import LIST_BATCH_SIZE, UserService


@pytest.fixture
def service(users_collection):
    return UserService(users_collection)


@pytest.fixture
def create_request(sample_user_payload):
    return CreateUserRequest(**sample_user_payload)


# =============================================================================
# List
# =============================================================================

class TestListUsers:
    """Tests for UserService.list_users."""

    @pytest.mark.asyncio
    async def test_empty(self, service):
        assert await service.list_users() == []

    @pytest.mark.asyncio
    async def test_uses_batch_size(self, service, users_collection):
        await service.list_users()

        assert users_collection.find_kwargs == {"batch_size": LIST_BATCH_SIZE}

    @pytest.mark.asyncio
    async def test_skips_malformed_documents(self, service, users_collection, create_request):
        """One bad document doesn't abort the listing."""
        user_id = await service.create_user(create_request)
        users_collection.documents.append({"_id": ObjectId(), "first_name": "Broken"})
        users_collection.documents.append({"_id": "string-id", "first_name": "A", "last_name": "B", "email": "x@y.z"})

        users = await service.list_users()

        assert [u.id for u in users] == [user_id]

    @pytest.mark.asyncio
    async def test_find_failure(self, service, users_collection):
        users_collection.fail = True

        with pytest.raises(DatabaseError):
            await service.list_users()

    @pytest.mark.asyncio
    async def test_cursor_failure(self, service, users_collection, create_request):
        await service.create_user(create_request)
        users_collection.cursor_fail_after = 0

        with pytest.raises(DatabaseError):
            await service.list_users()


# =============================================================================
# Get
# =============================================================================

class TestGetUser:
    """Tests for UserService.get_user."""

    @pytest.mark.asyncio
    async def test_found(self, service, create_request):
        user_id = await service.create_user(create_request)

        user = await service.get_user(user_id)

        assert user.id == user_id
        assert user.email == "ada@example.com"
        assert user.age == 36

    @pytest.mark.asyncio
    async def test_absent(self, service):
        missing = str(ObjectId())

        with pytest.raises(UserNotFoundError) as exc_info:
            await service.get_user(missing)

        assert exc_info.value.message == f"User not found for id {missing}"

    @pytest.mark.asyncio
    async def test_invalid_id_is_not_found(self, service, users_collection):
        """Unparsable ids never reach the database."""
        users_collection.fail = True

        with pytest.raises(UserNotFoundError):
            await service.get_user("not-an-id")

    @pytest.mark.asyncio
    async def test_query_failure(self, service, users_collection):
        users_collection.fail_on = {"find_one"}

        with pytest.raises(DatabaseError):
            await service.get_user(str(ObjectId()))


# =============================================================================
# Create
# =============================================================================

class TestCreateUser:
    """Tests for UserService.create_user."""

    @pytest.mark.asyncio
    async def test_returns_hex_id(self, service, users_collection, create_request):
        user_id = await service.create_user(create_request)

        assert ObjectId.is_valid(user_id)
        assert users_collection.documents[0]["_id"] == ObjectId(user_id)

    @pytest.mark.asyncio
    async def test_absent_age_not_stored(self, service, users_collection):
        await service.create_user(
            CreateUserRequest(first_name="Grace", last_name="Hopper", email="grace@example.com")
        )

        assert "age" not in users_collection.documents[0]

    @pytest.mark.asyncio
    async def test_duplicate_email(self, service, users_collection, create_request):
        await service.create_user(create_request)

        with pytest.raises(DuplicateEmailError):
            await service.create_user(create_request)

        assert len(users_collection.documents) == 1

    @pytest.mark.asyncio
    async def test_lookup_failure_refused_as_duplicate(self, service, users_collection, create_request):
        users_collection.fail_on = {"find_one"}

        with pytest.raises(DuplicateEmailError):
            await service.create_user(create_request)

        assert users_collection.documents == []

    @pytest.mark.asyncio
    async def test_insert_failure(self, service, users_collection, create_request):
        users_collection.fail_on = {"insert_one"}

        with pytest.raises(DatabaseError):
            await service.create_user(create_request)

    @pytest.mark.asyncio
    async def test_unique_index_violation(self, service, create_request):
        """With the unique index enabled a lost race is still a duplicate."""
        service.collection = MagicMock()
        service.collection.find_one = AsyncMock(return_value=None)
        service.collection.insert_one = AsyncMock(side_effect=DuplicateKeyError("E11000"))

        with pytest.raises(DuplicateEmailError):
            await service.create_user(create_request)


# =============================================================================
# Update
# =============================================================================

class TestUpdateUser:
    """Tests for UserService.update_user."""

    @pytest.mark.asyncio
    async def test_partial_update(self, service, create_request):
        user_id = await service.create_user(create_request)

        user = await service.update_user(user_id, UpdateUserRequest(first_name="Augusta"))

        assert user.first_name == "Augusta"
        assert user.last_name == "Lovelace"
        assert user.email == "ada@example.com"
        assert user.age == 36

    @pytest.mark.asyncio
    async def test_sends_set_with_after(self, service):
        oid = ObjectId()
        service.collection = MagicMock()
        service.collection.find_one_and_update = AsyncMock(return_value={
            "_id": oid, "first_name": "X", "last_name": "Y", "email": "x@y.z",
        })

        await service.update_user(str(oid), UpdateUserRequest(first_name="X"))

        service.collection.find_one_and_update.assert_awaited_once_with(
            {"_id": oid},
            {"$set": {"first_name": "X"}},
            upsert=False,
            return_document=ReturnDocument.AFTER,
        )

    @pytest.mark.asyncio
    async def test_absent(self, service):
        with pytest.raises(UserNotFoundError):
            await service.update_user(str(ObjectId()), UpdateUserRequest(age=3))

    @pytest.mark.asyncio
    async def test_invalid_id(self, service):
        with pytest.raises(UserNotFoundError):
            await service.update_user("nope", UpdateUserRequest(age=3))

    @pytest.mark.asyncio
    async def test_empty_update(self, service, create_request):
        user_id = await service.create_user(create_request)

        with pytest.raises(InvalidUpdateError):
            await service.update_user(user_id, UpdateUserRequest())

    @pytest.mark.asyncio
    async def test_update_failure(self, service, users_collection, create_request):
        user_id = await service.create_user(create_request)
        users_collection.fail_on = {"find_one_and_update"}

        with pytest.raises(DatabaseError):
            await service.update_user(user_id, UpdateUserRequest(age=3))


# =============================================================================
# Delete
# =============================================================================

class TestDeleteUser:
    """Tests for UserService.delete_user."""

    @pytest.mark.asyncio
    async def test_delete_then_get(self, service, create_request):
        user_id = await service.create_user(create_request)

        await service.delete_user(user_id)

        with pytest.raises(UserNotFoundError):
            await service.get_user(user_id)

    @pytest.mark.asyncio
    async def test_delete_twice(self, service, create_request):
        user_id = await service.create_user(create_request)

        await service.delete_user(user_id)
        await service.delete_user(user_id)

    @pytest.mark.asyncio
    async def test_delete_invalid_id(self, service, users_collection):
        users_collection.fail = True

        await service.delete_user("not-an-id")

    @pytest.mark.asyncio
    async def test_delete_failure(self, service, users_collection):
        users_collection.fail_on = {"delete_one"}

        with pytest.raises(DatabaseError):
            await service.delete_user(str(ObjectId()))
