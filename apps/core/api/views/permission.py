from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.core.api.filtersets import PermissionFilterSet
from apps.core.api.serializers import PermissionResponseSerializer, PermissionStatisticsSerializer
from apps.core.models import Permission
from libs import BaseReadOnlyModelViewSet
from libs.drf.filtersets.search import PhraseSearchFilter


@extend_schema_view(
    list=extend_schema(
        summary="List permissions",
        description="Retrieve a list of all permissions available in the system",
        tags=["Permissions"],
    ),
    retrieve=extend_schema(
        summary="Get permission details",
        description="Retrieve detailed information about a specific permission",
        tags=["Permissions"],
    ),
)
class PermissionViewSet(BaseReadOnlyModelViewSet):
    """ViewSet for Permission model - Read only"""

    queryset = Permission.objects.all()
    serializer_class = PermissionResponseSerializer
    filterset_class = PermissionFilterSet
    filter_backends = [DjangoFilterBackend, PhraseSearchFilter, OrderingFilter]
    search_fields = ["code", "name", "description", "resource"]
    ordering_fields = ["code", "name", "resource", "created_at"]
    ordering = ["code"]

    # Permission registration attributes
    module = "Core"
    submodule = "Permission Management"
    permission_prefix = "permission"

    def list(self, request, *args, **kwargs):
        """List permissions with optional get_all parameter."""
        get_all = request.query_params.get("get_all", "").lower() == "true"

        if get_all:
            queryset = self.filter_queryset(self.get_queryset())
            serializer = self.get_serializer(queryset, many=True)
            return Response({"count": queryset.count(), "next": None, "previous": None, "results": serializer.data})

        return super().list(request, *args, **kwargs)

    @extend_schema(
        summary="Permissions grouped by category",
        description=(
            "Return every permission grouped by its resource. Permissions without a resource "
            "are grouped under `Other`. Categories are sorted by name, and so are the permissions "
            "inside each category."
        ),
        tags=["Permissions"],
        responses={
            200: {
                "type": "object",
                "additionalProperties": {"type": "array", "items": {"type": "object"}},
            }
        },
    )
    @action(detail=False, methods=["get"], url_path="categories")
    def categories(self, request):
        groups = Permission.objects.grouped_by_category()
        return Response(
            {
                category: PermissionResponseSerializer(permissions, many=True).data
                for category, permissions in groups.items()
            }
        )

    @extend_schema(
        summary="List permission categories",
        description="Return the sorted, distinct category names.",
        tags=["Permissions"],
        responses={200: {"type": "array", "items": {"type": "string"}}},
    )
    @action(detail=False, methods=["get"], url_path="categories/list")
    def categories_list(self, request):
        return Response(Permission.objects.categories())

    @extend_schema(
        summary="Permissions of one category",
        description="Return the permissions whose resource equals `name`, sorted by name.",
        tags=["Permissions"],
        responses={200: PermissionResponseSerializer(many=True)},
    )
    @action(detail=False, methods=["get"], url_path=r"category/(?P<name>[^/]+)")
    def category(self, request, name=None):
        permissions = Permission.objects.by_resource(name).order_by("name", "code")
        return Response(PermissionResponseSerializer(permissions, many=True).data)

    @extend_schema(
        summary="List system permissions",
        description="Return the permissions synced from the API by `collect_permissions`.",
        tags=["Permissions"],
        responses={200: PermissionResponseSerializer(many=True)},
    )
    @action(detail=False, methods=["get"], url_path="system")
    def system(self, request):
        permissions = Permission.objects.system().order_by("code")
        return Response(PermissionResponseSerializer(permissions, many=True).data)

    @extend_schema(
        summary="Permission statistics",
        description="Return the total number of permissions, the number of system permissions and the number of categories.",
        tags=["Permissions"],
        responses={200: PermissionStatisticsSerializer},
    )
    @action(detail=False, methods=["get"], url_path="statistics")
    def statistics(self, request):
        permissions = Permission.objects.all()
        data = {
            "totalPermissions": permissions.count(),
            "systemPermissions": permissions.system().count(),
            "categories": len(permissions.categories()),
        }
        return Response(PermissionStatisticsSerializer(data).data)
