from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework.filters import OrderingFilter

from apps.hrm.api.filtersets import EmployeeFilterSet
from apps.hrm.api.serializers import EmployeeSerializer
from apps.hrm.models import Employee
from libs import BaseModelViewSet
from libs.drf.filtersets.search import PhraseSearchFilter


@extend_schema_view(
    list=extend_schema(
        summary="List all employees",
        description="Retrieve a paginated list of all employees with support for filtering by code, fullname, "
        "email, department, manager and status",
        tags=["Employee"],
    ),
    create=extend_schema(
        summary="Create a new employee",
        description="Create a new employee. The employee code is generated automatically.",
        tags=["Employee"],
    ),
    retrieve=extend_schema(
        summary="Get employee details",
        description="Retrieve detailed information about a specific employee",
        tags=["Employee"],
    ),
    update=extend_schema(
        summary="Update employee",
        description="Update employee information",
        tags=["Employee"],
    ),
    partial_update=extend_schema(
        summary="Partially update employee",
        description="Partially update employee information",
        tags=["Employee"],
    ),
    destroy=extend_schema(
        summary="Delete employee",
        description="Delete an employee. Employees referenced by exit requests cannot be deleted.",
        tags=["Employee"],
    ),
)
class EmployeeViewSet(BaseModelViewSet):
    """ViewSet for Employee model"""

    queryset = Employee.objects.select_related("department", "manager")
    serializer_class = EmployeeSerializer
    filterset_class = EmployeeFilterSet
    filter_backends = [DjangoFilterBackend, PhraseSearchFilter, OrderingFilter]
    search_fields = ["code", "fullname", "username", "email"]
    ordering_fields = ["code", "fullname", "start_date", "created_at"]
    ordering = ["code"]

    # Permission registration attributes
    module = "HRM"
    submodule = "Employee Profile"
    permission_prefix = "employee"
