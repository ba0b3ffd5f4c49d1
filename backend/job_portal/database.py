"""
MongoDB connection handle shared by all request handlers.

One client is created at startup (see the lifespan in main.py), stored on
app.state.database and handed to endpoints through the get_database
dependency. Tests override that dependency with an in-memory store.
"""
import logging
from typing import Any, Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.server_api import ServerApi

from job_portal.config import Settings

logger = logging.getLogger(__name__)

JOBS_COLLECTION = "jobs"
APPLICATIONS_COLLECTION = "job_applications"


class Database:
    """Holds the document database and exposes the two portal collections."""

    def __init__(self, db: Any, client: Optional[AsyncIOMotorClient] = None):
        self._db = db
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """
        Create the client for the configured cluster.

        Raises:
            ConfigurationError: If credentials are missing (no client is built)
        """
        uri = settings.mongodb_uri()
        client = AsyncIOMotorClient(
            uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        logger.info(f"MongoDB client created for {settings.db_host}/{settings.db_name}")
        return cls(client[settings.db_name], client=client)

    @property
    def jobs(self):
        return self._db[JOBS_COLLECTION]

    @property
    def job_applications(self):
        return self._db[APPLICATIONS_COLLECTION]

    async def ping(self) -> None:
        await self.client.admin.command("ping")
        logger.info("Successfully connected to MongoDB!")

    def close(self) -> None:
        if self.client is not None:
            self.client.close()


def get_database(request: Request) -> Database:
    """Dependency that returns the handle created during startup."""
    return request.app.state.database
