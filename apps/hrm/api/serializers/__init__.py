from .common_nested import DepartmentNestedSerializer, EmployeeNestedSerializer
from .employee import EmployeeSerializer
from .employee_exit import (
    EmployeeExitApproveSerializer,
    EmployeeExitChangeStatusSerializer,
    EmployeeExitCompleteSerializer,
    EmployeeExitMonthlyQuerySerializer,
    EmployeeExitRejectSerializer,
    EmployeeExitSerializer,
    EmployeeExitStatisticsSerializer,
    EmployeeExitSubmitSerializer,
    EmployeeExitUpcomingQuerySerializer,
    EmployeeExitWithdrawSerializer,
)
from .organization import DepartmentSerializer

__all__ = [
    "DepartmentNestedSerializer",
    "DepartmentSerializer",
    "EmployeeNestedSerializer",
    "EmployeeSerializer",
    "EmployeeExitSerializer",
    "EmployeeExitChangeStatusSerializer",
    "EmployeeExitSubmitSerializer",
    "EmployeeExitApproveSerializer",
    "EmployeeExitRejectSerializer",
    "EmployeeExitWithdrawSerializer",
    "EmployeeExitCompleteSerializer",
    "EmployeeExitUpcomingQuerySerializer",
    "EmployeeExitMonthlyQuerySerializer",
    "EmployeeExitStatisticsSerializer",
]
