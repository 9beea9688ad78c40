from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.querysets.permission import PermissionQuerySet
from libs.models import BaseModel


class Permission(BaseModel):
    """A single grantable action, coded as ``<resource>.<action>``."""

    code = models.CharField(max_length=100, unique=True, verbose_name="Permission code")
    name = models.CharField(max_length=255, blank=True, verbose_name="Permission name")
    description = models.CharField(max_length=255, blank=True, verbose_name="Description")
    resource = models.CharField(max_length=100, blank=True, db_index=True, verbose_name="Resource")
    action = models.CharField(max_length=100, blank=True, verbose_name="Action")
    module = models.CharField(max_length=100, blank=True, verbose_name="Module")
    submodule = models.CharField(max_length=100, blank=True, verbose_name="Submodule")
    is_system_permission = models.BooleanField(default=False, verbose_name="System permission")

    objects = PermissionQuerySet.as_manager()

    class Meta:
        verbose_name = _("Permission")
        verbose_name_plural = _("Permissions")
        db_table = "core_permission"
        ordering = ["code"]

    def __str__(self):
        if self.name:
            return f"{self.code} - {self.name}"
        return f"{self.code} - {self.description}"

    def save(self, *args, **kwargs):
        if self.code and "." in self.code and not (self.resource or self.action):
            self.resource, self.action = self.code.split(".", 1)
        super().save(*args, **kwargs)
