import pytest

from src.workday_attendance.workday_attendance.core.exceptions import EmployeeNotFound, ValidationError
from src.workday_attendance.workday_attendance.employees.service import EmployeeService


def test_list_and_lookup(employees_repo):
    svc = EmployeeService(employees_repo)

    assert [e.name for e in svc.list_employees()] == ["Alice", "Bob", "Chen"]
    assert svc.get_by_code("EMP002").name == "Bob"
    assert svc.get_by_id(3).department == "IT"


def test_lookup_failures(employees_repo):
    svc = EmployeeService(employees_repo)

    with pytest.raises(EmployeeNotFound):
        svc.get_by_code("EMP999")
    with pytest.raises(EmployeeNotFound):
        svc.get_by_id(42)
    with pytest.raises(ValidationError):
        svc.get_by_code("   ")
