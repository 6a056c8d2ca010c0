"""
Base repository pattern implementation for MongoDB collections.
"""
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError
from pymongo import ASCENDING, ReturnDocument

from app.core.errors import StoreValidationError
from app.utils.id_handler import IdHandler


class BaseRepository:
    """
    Base repository class that implements standard CRUD operations for MongoDB collections.
    Documents are checked against the collection's store-level model before every write,
    the same way a schema-validated collection would reject them.
    """

    # Store-level model applied to full documents on create
    model: Optional[Type[BaseModel]] = None
    # Store-level model applied to the fields present in an update
    update_model: Optional[Type[BaseModel]] = None

    def __init__(self, collection):
        """
        Initialize repository with MongoDB collection.

        Args:
            collection: Motor AsyncIOMotorCollection instance
        """
        self.collection = collection

    async def find_by_id(self, id_value: Any) -> Optional[Dict[str, Any]]:
        """
        Find a document by ID.

        Args:
            id_value: ID to look for (string or ObjectId)

        Returns:
            Document dict with formatted IDs or None if not found
        """
        obj_id = IdHandler.ensure_object_id(id_value)
        if obj_id is None:
            return None

        document = await self.collection.find_one({"_id": obj_id})
        return IdHandler.format_object_ids(document)

    async def find_many(self,
                        query: Optional[Dict[str, Any]] = None,
                        sort_by: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Find all documents matching query.

        Args:
            query: MongoDB query dictionary
            sort_by: Field to sort by, ascending

        Returns:
            List of documents with formatted IDs
        """
        if query is None:
            query = {}

        cursor = self.collection.find(query)
        if sort_by:
            cursor = cursor.sort(sort_by, ASCENDING)

        documents = await cursor.to_list(length=None)
        return IdHandler.format_object_ids(documents)

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Find a single document matching query.

        Args:
            query: MongoDB query dictionary

        Returns:
            Document dict with formatted IDs or None if not found
        """
        document = await self.collection.find_one(query)
        return IdHandler.format_object_ids(document)

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new document.

        Args:
            data: Document data

        Returns:
            Created document with formatted IDs

        Raises:
            StoreValidationError: If the data does not satisfy the store-level model
            DuplicateKeyError: If a unique index rejects the document
        """
        document = self._apply_model(self.model, data)

        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id

        return IdHandler.format_object_ids(document)

    async def update(self, id_value: Any, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Update a document by ID. Fields present in data replace the stored values.

        Args:
            id_value: ID of document to update
            data: New field values

        Returns:
            Updated document with formatted IDs or None if not found

        Raises:
            StoreValidationError: If a present field does not satisfy the store-level model
            DuplicateKeyError: If a unique index rejects the new values
        """
        obj_id = IdHandler.ensure_object_id(id_value)
        if obj_id is None:
            return None

        update_data = {k: v for k, v in data.items() if k != "_id"}
        update_data = self._apply_model(self.update_model, update_data, exclude_unset=True)
        if not update_data:
            return await self.find_by_id(obj_id)

        document = await self.collection.find_one_and_update(
            {"_id": obj_id},
            {"$set": update_data},
            return_document=ReturnDocument.AFTER
        )
        return IdHandler.format_object_ids(document)

    async def delete(self, id_value: Any) -> bool:
        """
        Delete a document by ID.

        Args:
            id_value: ID of document to delete

        Returns:
            True if document was deleted, False if not found
        """
        obj_id = IdHandler.ensure_object_id(id_value)
        if obj_id is None:
            return False

        document = await self.collection.find_one_and_delete({"_id": obj_id})
        return document is not None

    @staticmethod
    def _apply_model(model: Optional[Type[BaseModel]],
                     data: Dict[str, Any],
                     exclude_unset: bool = False) -> Dict[str, Any]:
        if model is None:
            return dict(data)
        try:
            return model.model_validate(data).model_dump(exclude_unset=exclude_unset)
        except ValidationError as e:
            raise StoreValidationError(model.__name__, e) from e
