from .employee import EmployeeViewSet
from .employee_exit import EmployeeExitViewSet
from .organization import DepartmentViewSet

__all__ = [
    "DepartmentViewSet",
    "EmployeeViewSet",
    "EmployeeExitViewSet",
]
