from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.hrm.constants import ExitStatus
from libs.constants import ColorVariant
from libs.models import BaseModel, ColoredValueMixin

from .employee_exit_queryset import EmployeeExitQuerySet


class EmployeeExit(ColoredValueMixin, BaseModel):
    """Resignation / offboarding request of an employee.

    Status moves INITIATED -> PENDING -> APPROVED -> COMPLETED, or ends in
    REJECTED or WITHDRAWN. The ``can_be_*`` guards only report whether a
    transition is allowed; ``ExitService`` enforces them.

    Attributes:
        employee: Employee who is leaving
        resignation_date: Date the resignation was handed in
        last_working_day: Final day at work
        exit_reason: Reason given by the employee
        status: Current lifecycle state
        approved_by: Employee who approved or rejected the request
        approved_at: Date of the approval or rejection
        notes: Free notes; withdrawal and rejection reasons are appended here
    """

    employee = models.ForeignKey(
        "hrm.Employee",
        on_delete=models.PROTECT,
        related_name="exits",
        verbose_name=_("Employee"),
    )
    resignation_date = models.DateField(null=True, blank=True, verbose_name=_("Resignation date"))
    last_working_day = models.DateField(null=True, blank=True, verbose_name=_("Last working day"))
    exit_reason = models.TextField(null=True, blank=True, verbose_name=_("Exit reason"))
    status = models.CharField(
        max_length=20,
        choices=ExitStatus.choices,
        default=ExitStatus.INITIATED,
        db_index=True,
        verbose_name=_("Status"),
    )
    approved_by = models.ForeignKey(
        "hrm.Employee",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        db_column="approved_by",
        related_name="approved_exits",
        verbose_name=_("Approved by"),
    )
    approved_at = models.DateField(null=True, blank=True, verbose_name=_("Approved at"))
    notes = models.TextField(null=True, blank=True, verbose_name=_("Notes"))

    objects = EmployeeExitQuerySet.as_manager()

    VARIANT_MAPPING = {
        "status": {
            ExitStatus.INITIATED: ColorVariant.GREY,
            ExitStatus.PENDING: ColorVariant.YELLOW,
            ExitStatus.APPROVED: ColorVariant.BLUE,
            ExitStatus.REJECTED: ColorVariant.RED,
            ExitStatus.WITHDRAWN: ColorVariant.ORANGE,
            ExitStatus.COMPLETED: ColorVariant.GREEN,
        }
    }

    class Meta:
        db_table = "employee_exits"
        verbose_name = _("Employee Exit")
        verbose_name_plural = _("Employee Exits")
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Exit {self.pk} - {self.employee_id} ({self.status})"

    @property
    def colored_status(self) -> dict:
        return self.get_colored_value("status")

    @property
    def is_active(self) -> bool:
        return self.status in ExitStatus.get_active_statuses()

    def can_be_submitted(self) -> bool:
        return self.status == ExitStatus.INITIATED

    def can_be_approved(self) -> bool:
        return self.status in (ExitStatus.INITIATED, ExitStatus.PENDING)

    def can_be_rejected(self) -> bool:
        return self.status in (ExitStatus.INITIATED, ExitStatus.PENDING)

    def can_be_withdrawn(self) -> bool:
        return self.status in (ExitStatus.INITIATED, ExitStatus.PENDING)

    def can_be_completed(self) -> bool:
        return self.status == ExitStatus.APPROVED
