"""
Employee repository for database operations.
"""
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.db.base_repository import BaseRepository
from app.db.mongodb import EMPLOYEES_COLLECTION
from app.models.employee import EmployeeModel, EmployeeUpdateModel


class EmployeeRepository(BaseRepository):
    """
    Repository for employee data access.
    Extends BaseRepository with employee-specific operations.
    """

    model = EmployeeModel
    update_model = EmployeeUpdateModel

    def __init__(self, database: AsyncIOMotorDatabase):
        """Initialize with employees collection."""
        super().__init__(database[EMPLOYEES_COLLECTION])

    async def search(self, search: Optional[str] = None, sort_by: str = "createDate") -> List[Dict[str, Any]]:
        """
        Find employees, optionally restricted by a text search over the indexed fields.

        Args:
            search: Text search terms
            sort_by: Field to sort by, ascending

        Returns:
            List of employee documents
        """
        query = {"$text": {"$search": search}} if search else {}
        return await self.find_many(query, sort_by=sort_by)
