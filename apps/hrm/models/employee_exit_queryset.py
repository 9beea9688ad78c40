import calendar
from datetime import date, timedelta

from django.db import models
from django.db.models import Q
from django.utils import timezone

from apps.hrm.constants import UPCOMING_EXIT_DAYS, ExitStatus


class EmployeeExitQuerySet(models.QuerySet):
    """Reporting helpers for EmployeeExit."""

    def active(self):
        return self.filter(status__in=ExitStatus.get_active_statuses())

    def pending(self):
        """Exits still waiting for a decision."""
        return self.filter(status__in=ExitStatus.get_pending_statuses())

    def upcoming(self, days_ahead: int = UPCOMING_EXIT_DAYS, today: date | None = None):
        """Approved exits whose last working day falls within the next ``days_ahead`` days."""
        today = today or timezone.localdate()
        return self.filter(
            status=ExitStatus.APPROVED,
            last_working_day__gte=today,
            last_working_day__lte=today + timedelta(days=days_ahead),
        )

    def overdue(self, today: date | None = None):
        """Approved exits whose last working day has passed without completion."""
        today = today or timezone.localdate()
        return self.filter(status=ExitStatus.APPROVED, last_working_day__lt=today)

    def for_month(self, year: int, month: int):
        """Exits resigned within the given calendar month."""
        last_day = calendar.monthrange(year, month)[1]
        return self.filter(
            resignation_date__gte=date(year, month, 1),
            resignation_date__lte=date(year, month, last_day),
        )

    def most_recent_for(self, employee):
        return self.filter(employee=employee).order_by("-created_at", "-id").first()

    def pending_for_approver(self, approver):
        """Pending exits of employees managed by ``approver`` or in a department they lead."""
        return self.pending().filter(Q(employee__manager=approver) | Q(employee__department__leader=approver))

    def status_counts(self) -> dict[str, int]:
        counts = dict(self.order_by().values_list("status").annotate(total=models.Count("id")))
        return {status: counts.get(status, 0) for status in ExitStatus.values}
