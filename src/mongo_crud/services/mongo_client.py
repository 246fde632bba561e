"""MongoDB connection setup."""

import logging

import pymongo
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from mongo_crud.config import Settings

logger = logging.getLogger(__name__)


def connect_mongo(settings: Settings) -> MongoClient:
    """Create the shared MongoDB client and verify the server answers.

    Connect and ping share one deadline of ``connect_timeout_seconds``.

    Args:
        settings: Application settings

    Returns:
        Connected MongoClient

    Raises:
        PyMongoError: if the server cannot be reached within the deadline
    """
    client: MongoClient = MongoClient(settings.mongodb_uri)
    try:
        with pymongo.timeout(settings.connect_timeout_seconds):
            client.admin.command("ping")
    except PyMongoError as e:
        logger.error("Failed to connect to MongoDB at %s: %s", settings.mongodb_uri, e)
        client.close()
        raise

    logger.info("Connected to MongoDB at %s", settings.mongodb_uri)
    return client
