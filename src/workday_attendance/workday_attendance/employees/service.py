from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import EmployeeNotFound
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: read the roster."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_employees()

    def get_by_code(self, employee_code: str) -> Employee:
        code = require_non_empty(employee_code, "employee_code")
        employee = self._employees.find_by_code(code)
        if not employee:
            logger.warning("Employee lookup failed: code=%s", code)
            raise EmployeeNotFound(f"no employee with code {code!r}")
        return employee

    def get_by_id(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise EmployeeNotFound(f"no employee with id {employee_id!r}")
        return employee
