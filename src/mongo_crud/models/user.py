"""User models and validation."""

import re
from typing import Any, ClassVar

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel, ConfigDict, Field

from mongo_crud.errors import UserValidationError

_OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


class UserCreate(BaseModel):
    """Request body for creating a user.

    Missing fields fall back to empty values so that ``validate_user`` reports
    them; wrong JSON types are rejected while parsing.
    """

    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        json_schema_extra={"example": {"name": "Alice", "age": 30}},
    )

    name: str = Field(default="", description="Full name of the user")
    age: int = Field(default=0, ge=-(2**63), le=2**63 - 1, description="Age in years")

    def to_document(self) -> dict[str, Any]:
        """Build the document inserted into the users collection."""
        return {"name": self.name, "age": self.age}


class User(BaseModel):
    """User entity model."""

    id: str = Field(..., description="Hex encoded ObjectId assigned by the store")
    name: str = Field(..., description="Full name of the user")
    age: int = Field(..., description="Age in years")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": "652f1c2e9b1e8a3d4c5b6a79",
                "name": "Alice",
                "age": 30,
            }
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "User":
        """Build a User from a stored document."""
        return cls(id=str(doc["_id"]), name=doc.get("name", ""), age=doc.get("age", 0))


def parse_user_id(raw: str) -> ObjectId:
    """Convert a hex identifier from the URL into an ObjectId.

    Raises:
        bson.errors.InvalidId: if ``raw`` is not a 24 character hex string
    """
    if not _OBJECT_ID_PATTERN.fullmatch(raw):
        raise InvalidId(f"{raw!r} is not a valid ObjectId, it must be a 24-character hex string")
    return ObjectId(raw)


def validate_user(user: UserCreate) -> None:
    """Check a user record before it is persisted.

    Raises:
        UserValidationError: if the name is empty or the age is not positive
    """
    if user.name == "":
        raise UserValidationError("name is required")
    if user.age <= 0:
        raise UserValidationError("age must be positive")
