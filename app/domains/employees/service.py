"""
Employee service for business logic.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from pymongo.errors import OperationFailure

from app.core.errors import StoreValidationError, classify_store_error
from app.domains.employees.repository import EmployeeRepository
from app.utils.validators import validate_employee_data

logger = logging.getLogger(__name__)

DEFAULT_SORT_FIELD = "createDate"


class EmployeeService:
    """
    Service for employee-related business logic.
    """

    def __init__(self, employee_repo: EmployeeRepository):
        """
        Initialize with employee repository.

        Args:
            employee_repo: Employee repository instance
        """
        self.employee_repo = employee_repo

    async def get_employees(
            self,
            search: Optional[str] = None,
            field: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Get employees, optionally filtered by a text search.

        Args:
            search: Text search terms matched against the indexed fields
            field: Field to sort by, ascending (defaults to createDate)

        Returns:
            List of employee documents
        """
        return await self.employee_repo.search(search=search, sort_by=field or DEFAULT_SORT_FIELD)

    async def get_employee(self, employee_id: str) -> Optional[Dict[str, Any]]:
        """
        Get employee by ID.

        Args:
            employee_id: Employee ID

        Returns:
            Employee document or None if not found
        """
        return await self.employee_repo.find_by_id(employee_id)

    async def create_employee(self, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new employee.

        Args:
            employee_data: Employee data

        Returns:
            Created employee document

        Raises:
            HTTPException: If validation fails or the store rejects the document
        """
        self._validate(employee_data)

        try:
            return await self.employee_repo.create(employee_data)
        except (StoreValidationError, OperationFailure) as e:
            logger.error(f"Error creating employee: {str(e)}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=classify_store_error(e)
            )

    async def update_employee(self, employee_id: str, employee_data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Update an existing employee. Fields present in the data replace the stored values.

        Args:
            employee_id: Employee ID
            employee_data: Updated employee data

        Returns:
            Updated employee document or None if not found

        Raises:
            HTTPException: If validation fails or the store rejects the update
        """
        self._validate(employee_data)

        try:
            return await self.employee_repo.update(employee_id, employee_data)
        except (StoreValidationError, OperationFailure) as e:
            logger.error(f"Error updating employee {employee_id}: {str(e)}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=classify_store_error(e)
            )

    async def delete_employee(self, employee_id: str) -> bool:
        """
        Delete an employee.

        Args:
            employee_id: Employee ID

        Returns:
            True if employee was deleted, False if not found
        """
        return await self.employee_repo.delete(employee_id)

    @staticmethod
    def _validate(employee_data: Dict[str, Any]):
        validation_error = validate_employee_data(employee_data)
        if validation_error:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=validation_error
            )
