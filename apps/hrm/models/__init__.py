from .employee import Employee
from .employee_exit import EmployeeExit
from .employee_exit_queryset import EmployeeExitQuerySet
from .organization import Department

__all__ = [
    "Department",
    "Employee",
    "EmployeeExit",
    "EmployeeExitQuerySet",
]
