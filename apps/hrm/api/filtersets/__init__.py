from .employee import EmployeeFilterSet
from .employee_exit import EmployeeExitFilterSet
from .organization import DepartmentFilterSet

__all__ = [
    "DepartmentFilterSet",
    "EmployeeFilterSet",
    "EmployeeExitFilterSet",
]
