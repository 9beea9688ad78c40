from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.hrm.constants import TEMP_CODE_PREFIX
from libs.models import AutoCodeMixin, BaseModel


class Department(AutoCodeMixin, BaseModel):
    """Department"""

    CODE_PREFIX = "PB"
    TEMP_CODE_PREFIX = TEMP_CODE_PREFIX

    name = models.CharField(max_length=200, verbose_name=_("Department name"))
    code = models.CharField(max_length=50, unique=True, verbose_name=_("Department code"))
    leader = models.ForeignKey(
        "hrm.Employee",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="led_departments",
        verbose_name=_("Leader"),
    )
    description = models.TextField(blank=True, verbose_name=_("Description"))
    is_active = models.BooleanField(default=True, verbose_name=_("Active"))

    class Meta:
        verbose_name = _("Department")
        verbose_name_plural = _("Departments")
        db_table = "hrm_department"
        ordering = ["code"]

    def __str__(self):
        return f"{self.code} - {self.name}"
