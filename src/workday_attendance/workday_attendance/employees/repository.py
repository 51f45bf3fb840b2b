from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Roster provider interface.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def list_employees(self) -> Sequence[Employee]:
        """Employees with role `employee`, sorted by name."""

        raise NotImplementedError

    def find_by_code(self, employee_code: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError
