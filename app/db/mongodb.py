"""
MongoDB connection management.
"""
import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, TEXT

logger = logging.getLogger(__name__)

EMPLOYEES_COLLECTION = "employees"
USERS_COLLECTION = "users"


class MongoDB:
    """
    MongoDB connection manager.
    One instance is created at startup and shared by every request through app.state.
    """

    def __init__(self, mongodb_url: str, database_name: str):
        self.mongodb_url = mongodb_url
        self.database_name = database_name
        self.client: AsyncIOMotorClient = None
        self.db: AsyncIOMotorDatabase = None

    def connect_to_mongodb(self):
        """
        Connect to MongoDB if not already connected.
        Motor connects lazily, so this only builds the client.
        """
        if self.client is None:
            logger.info(f"Connecting to MongoDB (database: {self.database_name})")

            self.client = AsyncIOMotorClient(self.mongodb_url, tz_aware=True)
            self.db = self.client[self.database_name]

            logger.info("MongoDB Connected")

    async def close_mongodb_connection(self):
        """
        Close MongoDB connection if open.
        """
        if self.client is not None:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Closed MongoDB connection")

    def get_database(self) -> AsyncIOMotorDatabase:
        """
        Get database instance.

        Returns:
            AsyncIOMotorDatabase instance
        """
        if self.db is None:
            self.connect_to_mongodb()
        return self.db

    async def ensure_indexes(self):
        """
        Create the unique and text indexes the collections rely on.
        create_index is a no-op when an identical index already exists.
        """
        db = self.get_database()

        employees = db[EMPLOYEES_COLLECTION]
        await employees.create_index([("email", ASCENDING)], unique=True)
        await employees.create_index([("mobileNo", ASCENDING)], unique=True)
        await employees.create_index([("name", TEXT)])

        users = db[USERS_COLLECTION]
        await users.create_index([("userName", ASCENDING)], unique=True)

        logger.info("MongoDB indexes ensured")


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """
    FastAPI dependency returning the database of the application's MongoDB manager.
    """
    return request.app.state.mongodb.get_database()
