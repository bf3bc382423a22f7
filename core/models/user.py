# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define both the stored shape and the API contract for users:
# - User: the document as persisted in the `users` collection
# - UserResponse: what clients see (hex id, age omitted when absent)
# - UserIdResponse: returned after a successful create
# - CreateUserRequest / UpdateUserRequest: request bodies
#
# The persisted entity and the DTOs are kept separate so the ObjectId never
# leaks into JSON and the request shapes can evolve independently.
# =============================================================================

from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

# Collection holding user documents
USERS_COLLECTION = "users"

# Ages are stored as a small unsigned integer. Booleans are not ages.
MIN_AGE = 0
MAX_AGE = 255


class User(BaseModel):
    """
    A user document as stored in MongoDB.

    Example document:
        {
            "_id": ObjectId("65a4f0c2e1b2c3d4e5f60718"),
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "age": 36
        }
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    id: ObjectId = Field(..., alias="_id")
    first_name: str
    last_name: str
    email: str
    age: int | None = Field(default=None, ge=MIN_AGE, le=MAX_AGE, strict=True)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "User":
        """Validate a raw MongoDB document. Raises ValidationError if malformed."""
        return cls.model_validate(document)

    def to_document(self) -> dict[str, Any]:
        """Dump to a MongoDB document, leaving out an absent age."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_response(self) -> "UserResponse":
        return UserResponse(
            id=str(self.id),
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            age=self.age,
        )


class UserResponse(BaseModel):
    """
    User as returned to clients.

    `age` is dropped from the JSON body when None (see app/responses.py).
    """

    id: str = Field(..., examples=["65a4f0c2e1b2c3d4e5f60718"])
    first_name: str = Field(..., examples=["Ada"])
    last_name: str = Field(..., examples=["Lovelace"])
    email: str = Field(..., examples=["ada@example.com"])
    age: int | None = Field(default=None, examples=[36])


class UserIdResponse(BaseModel):
    """Response when creating a user."""
    id: str = Field(..., examples=["65a4f0c2e1b2c3d4e5f60718"])


class CreateUserRequest(BaseModel):
    """Request body for POST /users."""

    first_name: str = Field(..., examples=["Ada"])
    last_name: str = Field(..., examples=["Lovelace"])
    email: str = Field(..., examples=["ada@example.com"])
    age: int | None = Field(default=None, ge=MIN_AGE, le=MAX_AGE, strict=True, examples=[36])

    def to_user(self) -> User:
        """Build a new User with a freshly generated ObjectId."""
        return User(
            _id=ObjectId(),
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            age=self.age,
        )


class UpdateUserRequest(BaseModel):
    """
    Request body for PATCH /users/{id}.

    Every field is optional. Only fields that are present (and not null)
    are written; everything else keeps its stored value.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    age: int | None = Field(default=None, ge=MIN_AGE, le=MAX_AGE, strict=True)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"first_name": "Augusta"},
                {"email": "ada@analytical.engine", "age": 37},
            ]
        }
    }

    def to_update_fields(self) -> dict[str, Any]:
        """Fields to put in the $set clause."""
        return self.model_dump(exclude_none=True)
