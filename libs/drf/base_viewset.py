"""
Base ViewSets with automatic permission registration.

Every project viewset inherits from one of these so that
``collect_permissions`` can discover its permission codes and
``RoleBasedPermission`` can check them.
"""

from django.utils.translation import gettext_lazy as _
from rest_framework import viewsets

from libs.drf.mixin.permission import PermissionRegistrationMixin
from libs.drf.mixin.protected_delete import ProtectedDeleteMixin


class BaseModelViewSet(ProtectedDeleteMixin, PermissionRegistrationMixin, viewsets.ModelViewSet):
    """
    Full CRUD viewset.

    Example:
        class DepartmentViewSet(BaseModelViewSet):
            queryset = Department.objects.all()
            serializer_class = DepartmentSerializer
            module = "HRM"
            submodule = "Organization"
            permission_prefix = "department"

        Generates: department.list, department.retrieve, department.create,
        department.update, department.partial_update, department.destroy
    """


class BaseReadOnlyModelViewSet(PermissionRegistrationMixin, viewsets.ReadOnlyModelViewSet):
    """
    Read-only viewset; only ``list`` and ``retrieve`` are registered.
    """

    STANDARD_ACTIONS = {
        "list": {
            "name_template": _("List {model_name}"),
            "description_template": _("View list of {model_name}"),
        },
        "retrieve": {
            "name_template": _("View {model_name}"),
            "description_template": _("View details of a {model_name}"),
        },
    }
