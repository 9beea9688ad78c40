import logging
from datetime import date

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone
from django.utils.translation import gettext as _

from apps.hrm.constants import ExitStatus
from apps.hrm.models import Employee, EmployeeExit

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("resignation_date", "last_working_day", "exit_reason", "notes")


class ExitService:
    """Workflow of employee exit requests.

    Every operation runs in a transaction and re-reads the exit row with
    ``select_for_update`` before checking its guard. Rule violations raise
    Django's ``ValidationError``.
    """

    @staticmethod
    def _lock(employee_exit: EmployeeExit) -> EmployeeExit:
        return EmployeeExit.objects.select_for_update().get(pk=employee_exit.pk)

    @staticmethod
    def _validate_dates(resignation_date: date | None, last_working_day: date | None) -> None:
        if resignation_date and last_working_day and last_working_day < resignation_date:
            raise ValidationError(
                {"last_working_day": _("Last working day cannot be before the resignation date.")}
            )

    @staticmethod
    def _append_note(employee_exit: EmployeeExit, label: str, text: str) -> None:
        line = f"{label}: {text}"
        employee_exit.notes = f"{employee_exit.notes}\n{line}" if employee_exit.notes else line

    @staticmethod
    @transaction.atomic
    def initiate_exit(
        employee: Employee,
        resignation_date: date | None = None,
        last_working_day: date | None = None,
        exit_reason: str | None = None,
        notes: str | None = None,
    ) -> EmployeeExit:
        """Open a new exit request in INITIATED state.

        Raises:
            ValidationError: the employee already has an active exit, or the
                last working day is before the resignation date.
        """
        # Serialize concurrent requests for the same employee
        Employee.objects.select_for_update().filter(pk=employee.pk).first()

        if EmployeeExit.objects.active().filter(employee=employee).exists():
            raise ValidationError({"employee": _("Employee already has an active exit request.")})

        ExitService._validate_dates(resignation_date, last_working_day)

        employee_exit = EmployeeExit.objects.create(
            employee=employee,
            resignation_date=resignation_date,
            last_working_day=last_working_day,
            exit_reason=exit_reason,
            notes=notes,
            status=ExitStatus.INITIATED,
        )
        logger.info("Exit %s initiated for employee %s", employee_exit.pk, employee.pk)
        return employee_exit

    @staticmethod
    @transaction.atomic
    def update_exit(employee_exit: EmployeeExit, **fields) -> EmployeeExit:
        """Change the details of an INITIATED exit. ``None`` values are ignored."""
        employee_exit = ExitService._lock(employee_exit)
        if employee_exit.status != ExitStatus.INITIATED:
            raise ValidationError(_("Only initiated exit requests can be updated."))

        changes = {name: value for name, value in fields.items() if name in UPDATABLE_FIELDS and value is not None}
        ExitService._validate_dates(
            changes.get("resignation_date", employee_exit.resignation_date),
            changes.get("last_working_day", employee_exit.last_working_day),
        )

        for name, value in changes.items():
            setattr(employee_exit, name, value)
        employee_exit.save()
        logger.info("Exit %s updated: %s", employee_exit.pk, ", ".join(sorted(changes)) or "no changes")
        return employee_exit

    @staticmethod
    @transaction.atomic
    def delete_exit(employee_exit: EmployeeExit) -> None:
        employee_exit = ExitService._lock(employee_exit)
        if employee_exit.status != ExitStatus.INITIATED:
            raise ValidationError(_("Only initiated exit requests can be deleted."))

        exit_id = employee_exit.pk
        employee_exit.delete()
        logger.info("Exit %s deleted", exit_id)

    @staticmethod
    @transaction.atomic
    def submit_exit(employee_exit: EmployeeExit) -> EmployeeExit:
        """Send an INITIATED exit for approval."""
        employee_exit = ExitService._lock(employee_exit)
        if not employee_exit.can_be_submitted():
            raise ValidationError(_("Only initiated exit requests can be submitted."))

        employee_exit.status = ExitStatus.PENDING
        employee_exit.save(update_fields=["status"])
        logger.info("Exit %s submitted", employee_exit.pk)
        return employee_exit

    @staticmethod
    @transaction.atomic
    def approve_exit(
        employee_exit: EmployeeExit,
        approver: Employee,
        check_authority: bool = True,
        on_date: date | None = None,
    ) -> EmployeeExit:
        """Approve an exit.

        With ``check_authority`` the approver must be the leaving employee's
        direct manager or the leader of their department.
        """
        employee_exit = ExitService._lock(employee_exit)
        if not employee_exit.can_be_approved():
            raise ValidationError(_("Exit request cannot be approved in its current status."))
        if check_authority and not approver.can_approve_exit_of(employee_exit.employee):
            raise ValidationError({"approver": _("You do not have authority to approve this exit request.")})

        employee_exit.status = ExitStatus.APPROVED
        employee_exit.approved_by = approver
        employee_exit.approved_at = on_date or timezone.localdate()
        employee_exit.save(update_fields=["status", "approved_by", "approved_at"])
        logger.info("Exit %s approved by employee %s", employee_exit.pk, approver.pk)
        return employee_exit

    @staticmethod
    @transaction.atomic
    def reject_exit(
        employee_exit: EmployeeExit,
        approver: Employee,
        reason: str,
        check_authority: bool = True,
        on_date: date | None = None,
    ) -> EmployeeExit:
        employee_exit = ExitService._lock(employee_exit)
        if not employee_exit.can_be_rejected():
            raise ValidationError(_("Exit request cannot be rejected in its current status."))
        if not reason or not reason.strip():
            raise ValidationError({"reason": _("A rejection reason is required.")})
        if check_authority and not approver.can_approve_exit_of(employee_exit.employee):
            raise ValidationError({"approver": _("You do not have authority to reject this exit request.")})

        employee_exit.status = ExitStatus.REJECTED
        employee_exit.approved_by = approver
        employee_exit.approved_at = on_date or timezone.localdate()
        ExitService._append_note(employee_exit, "Rejection reason", reason.strip())
        employee_exit.save(update_fields=["status", "approved_by", "approved_at", "notes"])
        logger.info("Exit %s rejected by employee %s", employee_exit.pk, approver.pk)
        return employee_exit

    @staticmethod
    @transaction.atomic
    def withdraw_exit(employee_exit: EmployeeExit, reason: str | None = None) -> EmployeeExit:
        employee_exit = ExitService._lock(employee_exit)
        if not employee_exit.can_be_withdrawn():
            raise ValidationError(_("Exit request cannot be withdrawn in its current status."))

        employee_exit.status = ExitStatus.WITHDRAWN
        reason = (reason or "").strip()
        if reason:
            ExitService._append_note(employee_exit, "Withdrawal reason", reason)
        employee_exit.save(update_fields=["status", "notes"])
        logger.info("Exit %s withdrawn", employee_exit.pk)
        return employee_exit

    @staticmethod
    @transaction.atomic
    def complete_exit(employee_exit: EmployeeExit, on_date: date | None = None) -> EmployeeExit:
        """Close an APPROVED exit and mark the employee as resigned."""
        today = on_date or timezone.localdate()
        employee_exit = ExitService._lock(employee_exit)
        if not employee_exit.can_be_completed():
            raise ValidationError(_("Only approved exit requests can be completed."))
        if employee_exit.last_working_day and employee_exit.last_working_day > today:
            raise ValidationError(
                {"last_working_day": _("Exit cannot be completed before the last working day.")}
            )

        employee_exit.status = ExitStatus.COMPLETED
        employee_exit.save(update_fields=["status"])

        employee = Employee.objects.select_for_update().get(pk=employee_exit.employee_id)
        employee.status = Employee.Status.RESIGNED
        employee.resignation_date = employee_exit.last_working_day or today
        employee.save(update_fields=["status", "resignation_date"])

        logger.info("Exit %s completed, employee %s marked as resigned", employee_exit.pk, employee.pk)
        return employee_exit

    @staticmethod
    def get_statistics() -> dict[str, int]:
        """Total number of exits and one count per status, keyed by lowercase status."""
        counts = EmployeeExit.objects.status_counts()
        statistics = {"total": sum(counts.values())}
        statistics.update({status.lower(): count for status, count in counts.items()})
        return statistics
