from django.db import models
from django.utils.translation import gettext as _

from libs.models import AutoCodeMixin, BaseModel


class Role(AutoCodeMixin, BaseModel):
    """Named bundle of permission codes assigned to users.

    A user holds at most one role; ``RoleBasedPermission`` grants an action
    when ``<resource>.<action>`` is among the role's permission codes.
    """

    CODE_PREFIX = "VT"

    code = models.CharField(max_length=50, unique=True, verbose_name="Role code")
    name = models.CharField(max_length=100, unique=True, verbose_name="Role name")
    description = models.CharField(max_length=255, blank=True, verbose_name="Description")
    is_system_role = models.BooleanField(default=False, verbose_name="System role")
    permissions = models.ManyToManyField(
        "Permission",
        related_name="roles",
        verbose_name="Permissions",
        blank=True,
    )  # type: ignore

    class Meta:
        verbose_name = "Role"
        verbose_name_plural = "Roles"
        db_table = "core_role"
        ordering = ["code"]

    def __str__(self):
        return f"{self.code} - {self.name}"

    def grants(self, permission_code: str) -> bool:
        return self.permissions.filter(code=permission_code).exists()

    def permission_codes(self) -> set[str]:
        return set(self.permissions.values_list("code", flat=True))

    def can_delete(self):
        """Return ``(allowed, reason)``; system roles and roles still assigned are kept."""
        if self.is_system_role:
            return False, _("Cannot delete system role")

        if self.users.exists():
            return False, _("Role is still assigned to users")

        return True, None
