from django.utils.translation import gettext as _
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import BasePermission


class RoleBasedPermission(BasePermission):
    """
    Grant a request when the user's role holds ``<permission_prefix>.<action>``.

    Views opt in by declaring ``permission_prefix``; ``action`` is set by DRF
    viewsets (or declared on plain views). Views without a prefix are open.
    Superusers are always allowed.
    """

    @staticmethod
    def get_permission_code(view) -> str | None:
        prefix = getattr(view, "permission_prefix", None)
        action = getattr(view, "action", None)
        if not prefix or not action:
            return None
        return f"{prefix}.{action}"

    def has_permission(self, request, view):
        permission_code = self.get_permission_code(view)
        if permission_code is None:
            return True

        if not request.user or not request.user.is_authenticated:
            raise PermissionDenied(_("You need to login to perform this action"))

        if request.user.has_permission(permission_code):
            return True

        raise PermissionDenied(_("You do not have permission to perform this action"))
