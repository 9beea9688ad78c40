from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework.filters import OrderingFilter

from apps.hrm.api.filtersets import DepartmentFilterSet
from apps.hrm.api.serializers import DepartmentSerializer
from apps.hrm.models import Department
from libs import BaseModelViewSet
from libs.drf.filtersets.search import PhraseSearchFilter


@extend_schema_view(
    list=extend_schema(summary="List departments", tags=["Organization"]),
    create=extend_schema(summary="Create a new department", tags=["Organization"]),
    retrieve=extend_schema(summary="Get department details", tags=["Organization"]),
    update=extend_schema(summary="Update department", tags=["Organization"]),
    partial_update=extend_schema(summary="Partially update department", tags=["Organization"]),
    destroy=extend_schema(summary="Delete department", tags=["Organization"]),
)
class DepartmentViewSet(BaseModelViewSet):
    """ViewSet for Department model"""

    queryset = Department.objects.select_related("leader")
    serializer_class = DepartmentSerializer
    filterset_class = DepartmentFilterSet
    filter_backends = [DjangoFilterBackend, PhraseSearchFilter, OrderingFilter]
    search_fields = ["code", "name"]
    ordering_fields = ["code", "name", "created_at"]
    ordering = ["code"]

    # Permission registration attributes
    module = "HRM"
    submodule = "Organization"
    permission_prefix = "department"
