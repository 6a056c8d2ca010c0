"""
Service dependencies built on the request's database handle.
"""
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.db.mongodb import get_database
from app.domains.auth.service import AuthService
from app.domains.employees.repository import EmployeeRepository
from app.domains.employees.service import EmployeeService
from app.domains.users.repository import UserRepository
from app.domains.users.service import UserService


def get_employee_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> EmployeeService:
    return EmployeeService(EmployeeRepository(database))


def get_user_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> UserService:
    return UserService(UserRepository(database))


def get_auth_service(user_service: UserService = Depends(get_user_service)) -> AuthService:
    return AuthService(user_service)
