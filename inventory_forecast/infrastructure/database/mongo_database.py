"""
MongoDB Database - Infrastructure Layer

Thin wrapper around pymongo used by the repositories and gateways. It owns
the client, exposes the handful of CRUD operations the service needs and
creates the collection indexes at startup.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import pymongo
import pymongo.errors
import structlog
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = structlog.get_logger(__name__)

FORECASTS_COLLECTION = "forecasts"
SALES_DATA_COLLECTION = "sales_data"

SortSpec = Union[str, Sequence[Tuple[str, int]]]


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        return self.db[collection_name]

    async def find_one(
        self, collection_name: str, query: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Return the first document matching ``query`` or None."""
        return self.db[collection_name].find_one(query)

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[SortSpec] = None,
        sort_direction: int = pymongo.ASCENDING,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents in a collection.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort_by: Field name, or list of (field, direction) pairs
            sort_direction: Direction used when ``sort_by`` is a field name
            skip: Number of documents to skip
            limit: Maximum number of documents to return (0 means no limit)

        Returns:
            List of documents
        """
        cursor = self.db[collection_name].find(query)

        if isinstance(sort_by, str):
            cursor = cursor.sort(sort_by, sort_direction)
        elif sort_by:
            cursor = cursor.sort(list(sort_by))

        cursor = cursor.skip(skip).limit(limit)
        return list(cursor)

    async def insert_one(
        self, collection_name: str, document: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Insert a document into a collection.

        Raises:
            Exception: If the insert is not acknowledged
        """
        result = self.db[collection_name].insert_one(document)
        if not result.acknowledged:
            raise Exception(f"Failed to insert document in {collection_name}")
        return document

    async def replace_one(
        self,
        collection_name: str,
        query: Dict[str, Any],
        document: Dict[str, Any],
        upsert: bool = False,
    ) -> Dict[str, Any]:
        """
        Replace the document matching ``query``.

        With ``upsert`` the document is inserted when nothing matches.

        Raises:
            Exception: If nothing matched (without upsert) or the write
                is not acknowledged
        """
        result = self.db[collection_name].replace_one(query, document, upsert=upsert)
        if not upsert and result.matched_count == 0:
            raise Exception(f"Document not found in {collection_name}")
        if not result.acknowledged:
            raise Exception(f"Failed to replace document in {collection_name}")
        return document

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self) -> None:
        """Create the indexes backing the (product, date) keys."""
        try:
            self.db[FORECASTS_COLLECTION].create_index(
                [
                    ("product_id", pymongo.ASCENDING),
                    ("forecast_date", pymongo.ASCENDING),
                ],
                name="product_forecast_date_idx",
                unique=True,
            )
            self.db[SALES_DATA_COLLECTION].create_index(
                [("product_id", pymongo.ASCENDING), ("date", pymongo.ASCENDING)],
                name="product_date_idx",
                unique=True,
            )
        except pymongo.errors.OperationFailure as e:
            logger.warning("mongo.indexes.create_failed", error=str(e))
