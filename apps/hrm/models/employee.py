from django.db import models
from django.utils.translation import gettext_lazy as _
from django.utils.translation import pgettext_lazy

from apps.hrm.constants import TEMP_CODE_PREFIX
from libs.constants import ColorVariant
from libs.models import AutoCodeMixin, BaseModel, ColoredValueMixin


class Employee(ColoredValueMixin, AutoCodeMixin, BaseModel):
    """Employee of the company.

    Attributes:
        code: Auto-generated employee code (``MV001``, ``MV002``, ...)
        fullname: Full name
        username: Login name, unique
        email: Work email, unique
        department: Department the employee belongs to
        manager: Direct manager, who may approve the employee's exit
        status: Working status
        start_date: First working day
        resignation_date: Set when an exit is completed
        user: Associated User account
    """

    CODE_PREFIX = "MV"
    TEMP_CODE_PREFIX = TEMP_CODE_PREFIX

    class Status(models.TextChoices):
        ACTIVE = "Active", pgettext_lazy("employee status", "Active")
        ONBOARDING = "Onboarding", _("Onboarding")
        RESIGNED = "Resigned", _("Resigned")
        MATERNITY_LEAVE = "Maternity Leave", _("Maternity Leave")
        UNPAID_LEAVE = "Unpaid Leave", _("Unpaid Leave")

        @classmethod
        def get_working_statuses(cls):
            return [cls.ACTIVE, cls.ONBOARDING]

        @classmethod
        def get_leave_statuses(cls):
            return [cls.RESIGNED, cls.MATERNITY_LEAVE, cls.UNPAID_LEAVE]

    code = models.CharField(max_length=50, unique=True, verbose_name=_("Employee code"))
    fullname = models.CharField(max_length=200, verbose_name=_("Full name"))
    username = models.CharField(max_length=100, unique=True, verbose_name=_("Username"))
    email = models.EmailField(max_length=100, unique=True, verbose_name=_("Email"))
    department = models.ForeignKey(
        "hrm.Department",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="employees",
        verbose_name=_("Department"),
    )
    manager = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="direct_reports",
        verbose_name=_("Manager"),
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
        verbose_name=_("Status"),
    )
    start_date = models.DateField(verbose_name=_("Start date"))
    resignation_date = models.DateField(null=True, blank=True, verbose_name=_("Resignation date"))
    user = models.OneToOneField(
        "core.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="employee",
        verbose_name=_("User"),
    )

    VARIANT_MAPPING = {
        "status": {
            Status.ACTIVE: ColorVariant.GREEN,
            Status.ONBOARDING: ColorVariant.BLUE,
            Status.RESIGNED: ColorVariant.RED,
            Status.MATERNITY_LEAVE: ColorVariant.PURPLE,
            Status.UNPAID_LEAVE: ColorVariant.ORANGE,
        }
    }

    class Meta:
        verbose_name = _("Employee")
        verbose_name_plural = _("Employees")
        db_table = "hrm_employee"
        ordering = ["code"]

    def __str__(self):
        return f"{self.code} - {self.fullname}"

    @property
    def colored_status(self):
        return self.get_colored_value("status")

    def can_approve_exit_of(self, employee: "Employee") -> bool:
        """True when this employee is ``employee``'s direct manager or department leader."""
        if employee.manager_id is not None and employee.manager_id == self.pk:
            return True
        department = employee.department
        return department is not None and department.leader_id is not None and department.leader_id == self.pk
