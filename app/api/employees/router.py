"""
Employee API routes for employee management.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies.payload import read_payload
from app.dependencies.services import get_employee_service
from app.domains.employees.service import EmployeeService
from app.schemas.auth import MessageResponse
from app.schemas.employee import EmployeeResponse

logger = logging.getLogger(__name__)

router = APIRouter()

EMPLOYEE_NOT_FOUND_MESSAGE = "Employee not found"


@router.get("", response_model=List[EmployeeResponse])
async def get_employees(
    search: Optional[str] = None,
    field: Optional[str] = None,
    employee_service: EmployeeService = Depends(get_employee_service)
):
    """
    Get all employees, optionally filtered by a text search.

    Args:
        search: Text search over the indexed fields
        field: Field to sort by, ascending (defaults to createDate)

    Returns:
        List of employees
    """
    try:
        return await employee_service.get_employees(search=search, field=field)
    except Exception as e:
        logger.error(f"Error fetching employees: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch employees"
        )


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    employee_service: EmployeeService = Depends(get_employee_service)
):
    """
    Get employee by ID.
    """
    try:
        employee = await employee_service.get_employee(employee_id)
    except Exception as e:
        logger.error(f"Error fetching employee {employee_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch employee"
        )

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=EMPLOYEE_NOT_FOUND_MESSAGE
        )
    return employee


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_data: Dict[str, Any] = Depends(read_payload),
    employee_service: EmployeeService = Depends(get_employee_service)
):
    """
    Create new employee.

    Args:
        employee_data: Employee creation data

    Returns:
        Created employee
    """
    try:
        return await employee_service.create_employee(employee_data)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating employee: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create employee"
        )


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    employee_data: Dict[str, Any] = Depends(read_payload),
    employee_service: EmployeeService = Depends(get_employee_service)
):
    """
    Update existing employee.

    Args:
        employee_id: Employee ID
        employee_data: Employee update data

    Returns:
        Updated employee
    """
    try:
        updated_employee = await employee_service.update_employee(employee_id, employee_data)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating employee {employee_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update employee"
        )

    if not updated_employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=EMPLOYEE_NOT_FOUND_MESSAGE
        )
    return updated_employee


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: str,
    employee_service: EmployeeService = Depends(get_employee_service)
):
    """
    Delete employee.
    """
    try:
        deleted = await employee_service.delete_employee(employee_id)
    except Exception as e:
        logger.error(f"Error deleting employee {employee_id}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete employee"
        )

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=EMPLOYEE_NOT_FOUND_MESSAGE
        )
    return {"message": "Employee deleted successfully"}
