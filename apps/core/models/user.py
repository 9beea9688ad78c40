from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models
from django.utils import timezone

from apps.core.querysets import UserManager
from libs.models import BaseModel


class User(BaseModel, AbstractBaseUser, PermissionsMixin):
    """Login account.

    Access to API actions is decided by ``role``; the HR profile, when there
    is one, is reachable as ``user.employee`` and is used as the default
    approver of exit requests.
    """

    username = models.CharField(max_length=100, unique=True, verbose_name="Username")
    email = models.EmailField(unique=True, verbose_name="Email")
    first_name = models.CharField(max_length=30, blank=True, verbose_name="First name")
    last_name = models.CharField(max_length=30, blank=True, verbose_name="Last name")

    is_active = models.BooleanField(default=True, verbose_name="Active")
    is_staff = models.BooleanField(default=False, verbose_name="Staff")
    date_joined = models.DateTimeField(default=timezone.now, verbose_name="Date joined")

    role = models.ForeignKey(
        "Role",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="users",
        verbose_name="Role",
    )

    objects = UserManager()

    USERNAME_FIELD = "username"
    REQUIRED_FIELDS = ["email"]

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"
        db_table = "core_user"

    def __str__(self):
        full_name = self.get_full_name()
        return f"{self.username} ({full_name})" if full_name else self.username

    def get_full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def get_short_name(self):
        return self.first_name

    def has_permission(self, permission_code: str) -> bool:
        """True for superusers, otherwise when the user's role grants ``permission_code``."""
        if self.is_superuser:
            return True

        if self.role is None:
            return False

        return self.role.grants(permission_code)

    def get_permission_codes(self) -> set[str]:
        if self.role is None:
            return set()
        return self.role.permission_codes()
