"""User store backed by MongoDB."""

import logging
from abc import ABC, abstractmethod

import pymongo
from bson import ObjectId
from pymongo import MongoClient

from mongo_crud.models.user import User, UserCreate

logger = logging.getLogger(__name__)


class UserStore(ABC):
    """Abstract interface for user persistence."""

    @abstractmethod
    def get_user(self, user_id: ObjectId) -> User | None:
        """Get a user by ID, or None if no document matches."""
        pass

    @abstractmethod
    def add_user(self, user: UserCreate) -> str:
        """Insert a user and return the generated ID as a hex string."""
        pass

    @abstractmethod
    def delete_user(self, user_id: ObjectId) -> int:
        """Delete a user by ID and return the number of documents removed."""
        pass

    @abstractmethod
    def ping(self) -> None:
        """Check that the backing store is reachable."""
        pass


class MongoUserStore(UserStore):
    """MongoDB implementation of UserStore.

    Every operation runs inside ``pymongo.timeout`` so the deadline is
    enforced by the driver rather than by the caller.
    """

    def __init__(
        self,
        client: MongoClient,
        database_name: str = "mongo_crud",
        collection_name: str = "users",
        operation_timeout: float = 5,
    ) -> None:
        """Initialize the store around a shared client.

        Args:
            client: Connected MongoClient, shared for the process lifetime
            database_name: Database name
            collection_name: Collection holding user documents
            operation_timeout: Seconds allowed for each store operation
        """
        self.client = client
        self.collection = client[database_name][collection_name]
        self.operation_timeout = operation_timeout

    def get_user(self, user_id: ObjectId) -> User | None:
        """Get a user by ID."""
        with pymongo.timeout(self.operation_timeout):
            doc = self.collection.find_one({"_id": user_id})
        if doc is None:
            logger.debug("User %s not found", user_id)
            return None
        return User.from_document(doc)

    def add_user(self, user: UserCreate) -> str:
        """Add a user."""
        with pymongo.timeout(self.operation_timeout):
            result = self.collection.insert_one(user.to_document())
        logger.info("Created user %s", result.inserted_id)
        return str(result.inserted_id)

    def delete_user(self, user_id: ObjectId) -> int:
        """Delete a user."""
        with pymongo.timeout(self.operation_timeout):
            result = self.collection.delete_one({"_id": user_id})
        if result.deleted_count:
            logger.info("Deleted user %s", user_id)
        return result.deleted_count

    def ping(self) -> None:
        """Ping the server."""
        with pymongo.timeout(self.operation_timeout):
            self.client.admin.command("ping")
