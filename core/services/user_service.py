# =============================================================================
# core/services/user_service.py - User Data Access
# =============================================================================
# Translates user CRUD operations into MongoDB queries on the `users`
# collection. Separates HTTP concerns from database logic: routes call this
# service and never touch the collection directly.
#
# Failure classes:
# - UserNotFoundError: document absent, or the id isn't a valid ObjectId
# - DuplicateEmailError: email taken, or the uniqueness lookup itself failed
# - InvalidUpdateError: update request with no fields
# - DatabaseError: any other driver failure (logged here, generic to clients)
# =============================================================================

import logging
from typing import Any

from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.exceptions import (
    DatabaseError,
    DuplicateEmailError,
    InvalidUpdateError,
    UserNotFoundError,
)
from core.models.user import CreateUserRequest, UpdateUserRequest, User, UserResponse
from lib.utils import parse_object_id

logger = logging.getLogger(__name__)

# Documents fetched per network round trip when listing
LIST_BATCH_SIZE = 100


class UserService:
    """
    Service for user management operations.

    Holds a reference to the shared users collection; one instance is built
    per request by the `get_user_service` dependency.
    """

    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    async def list_users(self) -> list[UserResponse]:
        """
        List every user.

        Documents that don't validate as a User are logged and skipped.

        Raises:
            DatabaseError: If the query fails
        """
        users: list[UserResponse] = []
        try:
            cursor = self.collection.find({}, batch_size=LIST_BATCH_SIZE)
            async for document in cursor:
                try:
                    users.append(User.from_document(document).to_response())
                except ValidationError as e:
                    logger.error(f"Not valid user {document.get('_id')}: {e}")
        except PyMongoError as e:
            logger.error(f"Error running find: {e}")
            raise DatabaseError() from e

        return users

    async def get_user(self, user_id: str) -> UserResponse:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If the ID is invalid or no user matches
            DatabaseError: If the query fails
        """
        object_id = parse_object_id(user_id)
        if object_id is None:
            raise UserNotFoundError(user_id)

        try:
            document = await self.collection.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Failed to fetch user {user_id}: {e}")
            raise DatabaseError(f"Generic error finding id {user_id}") from e

        if document is None:
            raise UserNotFoundError(user_id)

        return self._to_response(document, user_id)

    async def create_user(self, request: CreateUserRequest) -> str:
        """
        Create a user after checking the email isn't taken.

        The check and the insert are separate operations, so two concurrent
        creates with the same email can both succeed unless the unique index
        is enabled (MONGODB_CREATE_INDEXES).

        Returns:
            Hex string of the new user's ObjectId

        Raises:
            DuplicateEmailError: If the email exists or the lookup fails
            DatabaseError: If the insert fails
        """
        try:
            existing = await self.collection.find_one({"email": request.email})
        except PyMongoError as e:
            # A failed lookup can't prove the email is free
            logger.error(f"Email lookup failed for {request.email}: {e}")
            raise DuplicateEmailError(request.email) from e

        if existing is not None:
            raise DuplicateEmailError(request.email)

        user = request.to_user()
        try:
            result = await self.collection.insert_one(user.to_document())
        except DuplicateKeyError as e:
            raise DuplicateEmailError(request.email) from e
        except PyMongoError as e:
            logger.error(f"Error inserting user: {e}")
            raise DatabaseError("Failed to insert user") from e

        user_id = str(result.inserted_id)
        logger.info(f"Created user: {user_id}")
        return user_id

    async def update_user(self, user_id: str, request: UpdateUserRequest) -> UserResponse:
        """
        Apply a partial update and return the updated user.

        Raises:
            InvalidUpdateError: If the request has no fields to set
            UserNotFoundError: If the ID is invalid or no user matches
            DuplicateEmailError: If the unique index rejects the new email
            DatabaseError: If the update fails
        """
        fields = request.to_update_fields()
        if not fields:
            raise InvalidUpdateError()

        object_id = parse_object_id(user_id)
        if object_id is None:
            raise UserNotFoundError(user_id)

        try:
            document = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": fields},
                upsert=False,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise DuplicateEmailError(fields.get("email", "")) from e
        except PyMongoError as e:
            logger.error(f"Failed to update user {user_id}: {e}")
            raise DatabaseError(f"Generic error finding id {user_id}") from e

        if document is None:
            raise UserNotFoundError(user_id)

        logger.info(f"Updated user: {user_id} ({', '.join(sorted(fields))})")
        return self._to_response(document, user_id)

    async def delete_user(self, user_id: str) -> None:
        """
        Delete a user by ID.

        Deleting a missing or unparsable ID is not an error.

        Raises:
            DatabaseError: If the delete fails
        """
        object_id = parse_object_id(user_id)
        if object_id is None:
            logger.debug(f"Delete skipped, not an ObjectId: {user_id}")
            return

        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Failed to delete user {user_id}: {e}")
            raise DatabaseError(f"Delete failed for id {user_id}") from e

        logger.info(f"Deleted user: {user_id} (matched {result.deleted_count})")

    @staticmethod
    def _to_response(document: dict[str, Any], user_id: str) -> UserResponse:
        try:
            return User.from_document(document).to_response()
        except ValidationError as e:
            logger.error(f"Not valid user {user_id}: {e}")
            raise DatabaseError(f"Generic error finding id {user_id}") from e
