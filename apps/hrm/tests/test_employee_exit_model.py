from datetime import date, datetime, timedelta
from datetime import timezone as dt_timezone
from unittest.mock import patch

import pytest

from apps.hrm.constants import ExitStatus
from apps.hrm.models import Employee, EmployeeExit
from libs.constants import ColorVariant

PENDING_STATES = [ExitStatus.INITIATED, ExitStatus.PENDING]
CLOSED_STATES = [ExitStatus.APPROVED, ExitStatus.REJECTED, ExitStatus.WITHDRAWN, ExitStatus.COMPLETED]


class TestEmployeeExitGuards:
    """The guards only look at the status, so unsaved instances are enough."""

    @pytest.mark.parametrize("status", PENDING_STATES)
    def test_pending_states_can_be_approved_and_withdrawn(self, status):
        employee_exit = EmployeeExit(status=status)

        assert employee_exit.can_be_approved() is True
        assert employee_exit.can_be_withdrawn() is True
        assert employee_exit.can_be_rejected() is True

    @pytest.mark.parametrize("status", CLOSED_STATES)
    def test_other_states_cannot_be_approved_or_withdrawn(self, status):
        employee_exit = EmployeeExit(status=status)

        assert employee_exit.can_be_approved() is False
        assert employee_exit.can_be_withdrawn() is False
        assert employee_exit.can_be_rejected() is False

    @pytest.mark.parametrize("status", ExitStatus.values)
    def test_only_approved_can_be_completed(self, status):
        employee_exit = EmployeeExit(status=status)

        assert employee_exit.can_be_completed() is (status == ExitStatus.APPROVED)

    @pytest.mark.parametrize("status", ExitStatus.values)
    def test_only_initiated_can_be_submitted(self, status):
        employee_exit = EmployeeExit(status=status)

        assert employee_exit.can_be_submitted() is (status == ExitStatus.INITIATED)

    @pytest.mark.parametrize(
        "status,expected",
        [
            (ExitStatus.INITIATED, True),
            (ExitStatus.PENDING, True),
            (ExitStatus.APPROVED, True),
            (ExitStatus.REJECTED, False),
            (ExitStatus.WITHDRAWN, False),
            (ExitStatus.COMPLETED, False),
        ],
    )
    def test_is_active(self, status, expected):
        assert EmployeeExit(status=status).is_active is expected

    def test_default_status_is_initiated(self):
        assert EmployeeExit().status == ExitStatus.INITIATED

    def test_guards_have_no_side_effects(self):
        employee_exit = EmployeeExit(status=ExitStatus.PENDING)

        employee_exit.can_be_approved()
        employee_exit.can_be_completed()

        assert employee_exit.status == ExitStatus.PENDING

    def test_colored_status(self):
        employee_exit = EmployeeExit(status=ExitStatus.COMPLETED)

        assert employee_exit.colored_status == {"value": ExitStatus.COMPLETED, "variant": ColorVariant.GREEN}


@pytest.mark.django_db
class TestEmployeeExitTimestamps:
    def test_create_sets_equal_timestamps(self, employee):
        employee_exit = EmployeeExit.objects.create(employee=employee)

        employee_exit.refresh_from_db()
        assert employee_exit.created_at is not None
        assert employee_exit.created_at == employee_exit.updated_at

    def test_update_only_moves_updated_at(self, employee):
        created = datetime(2025, 1, 10, 8, 0, tzinfo=dt_timezone.utc)
        changed = created + timedelta(hours=5)

        with patch("django.utils.timezone.now", return_value=created):
            employee_exit = EmployeeExit.objects.create(employee=employee)

        with patch("django.utils.timezone.now", return_value=changed):
            employee_exit.exit_reason = "Relocation"
            employee_exit.save()

        employee_exit.refresh_from_db()
        assert employee_exit.created_at == created
        assert employee_exit.updated_at == changed

    def test_update_fields_save_includes_updated_at(self, employee):
        created = datetime(2025, 1, 10, 8, 0, tzinfo=dt_timezone.utc)
        changed = created + timedelta(days=1)

        with patch("django.utils.timezone.now", return_value=created):
            employee_exit = EmployeeExit.objects.create(employee=employee)

        with patch("django.utils.timezone.now", return_value=changed):
            employee_exit.status = ExitStatus.PENDING
            employee_exit.save(update_fields=["status"])

        employee_exit.refresh_from_db()
        assert employee_exit.status == ExitStatus.PENDING
        assert employee_exit.updated_at == changed
        assert employee_exit.created_at == created

    def test_employee_with_exits_cannot_be_deleted(self, employee):
        from django.db.models import ProtectedError

        EmployeeExit.objects.create(employee=employee)

        with pytest.raises(ProtectedError):
            employee.delete()


@pytest.mark.django_db
class TestEmployeeExitQuerySet:
    def test_active_and_pending(self, make_exit, outsider):
        initiated = make_exit(ExitStatus.INITIATED)
        pending = make_exit(ExitStatus.PENDING, employee=outsider)
        approved = make_exit(ExitStatus.APPROVED)
        make_exit(ExitStatus.WITHDRAWN)
        make_exit(ExitStatus.COMPLETED)

        assert set(EmployeeExit.objects.active()) == {initiated, pending, approved}
        assert set(EmployeeExit.objects.pending()) == {initiated, pending}

    def test_upcoming(self, make_exit):
        today = date(2025, 3, 1)
        soon = make_exit(ExitStatus.APPROVED, last_working_day=date(2025, 3, 10))
        make_exit(ExitStatus.APPROVED, last_working_day=date(2025, 5, 10))
        make_exit(ExitStatus.COMPLETED, last_working_day=date(2025, 3, 5))
        make_exit(ExitStatus.APPROVED, last_working_day=date(2025, 2, 27))

        assert list(EmployeeExit.objects.upcoming(days_ahead=30, today=today)) == [soon]

    @pytest.mark.parametrize("status", [ExitStatus.INITIATED, ExitStatus.PENDING])
    def test_upcoming_ignores_undecided_exits(self, make_exit, status):
        make_exit(status, last_working_day=date(2025, 3, 10))

        assert not EmployeeExit.objects.upcoming(days_ahead=30, today=date(2025, 3, 1)).exists()

    def test_upcoming_window_is_inclusive(self, make_exit):
        today = date(2025, 3, 1)
        edge = make_exit(ExitStatus.APPROVED, last_working_day=date(2025, 3, 8))

        assert list(EmployeeExit.objects.upcoming(days_ahead=7, today=today)) == [edge]
        assert list(EmployeeExit.objects.upcoming(days_ahead=0, today=date(2025, 3, 8))) == [edge]

    def test_overdue(self, make_exit):
        today = date(2025, 4, 15)
        overdue = make_exit(ExitStatus.APPROVED, last_working_day=date(2025, 3, 31))
        make_exit(ExitStatus.APPROVED, last_working_day=date(2025, 4, 30))
        make_exit(ExitStatus.PENDING, last_working_day=date(2025, 3, 31))

        assert list(EmployeeExit.objects.overdue(today=today)) == [overdue]

    def test_for_month(self, make_exit):
        march_first = make_exit(resignation_date=date(2025, 3, 1))
        march_last = make_exit(resignation_date=date(2025, 3, 31), last_working_day=date(2025, 4, 30))
        make_exit(resignation_date=date(2025, 4, 1), last_working_day=date(2025, 4, 30))

        assert set(EmployeeExit.objects.for_month(2025, 3)) == {march_first, march_last}

    def test_for_month_handles_february(self, make_exit):
        leap_day = make_exit(resignation_date=date(2024, 2, 29), last_working_day=date(2024, 3, 29))

        assert list(EmployeeExit.objects.for_month(2024, 2)) == [leap_day]

    def test_most_recent_for(self, make_exit, employee, outsider):
        make_exit(ExitStatus.WITHDRAWN)
        latest = make_exit(ExitStatus.PENDING)

        assert EmployeeExit.objects.most_recent_for(employee) == latest
        assert EmployeeExit.objects.most_recent_for(outsider) is None

    def test_pending_for_approver(self, make_exit, manager, department_leader, outsider, department):
        other = Employee.objects.create(
            fullname="Sam Staff",
            username="sam.staff",
            email="sam.staff@example.com",
            department=department,
            start_date=date(2022, 1, 1),
        )
        managed = make_exit(ExitStatus.PENDING)
        in_department = make_exit(ExitStatus.INITIATED, employee=other)
        make_exit(ExitStatus.PENDING, employee=outsider)

        assert set(EmployeeExit.objects.pending_for_approver(manager)) == {managed}
        assert set(EmployeeExit.objects.pending_for_approver(department_leader)) == {managed, in_department}

    def test_status_counts(self, make_exit):
        make_exit(ExitStatus.PENDING)
        make_exit(ExitStatus.PENDING)
        make_exit(ExitStatus.COMPLETED)

        counts = EmployeeExit.objects.status_counts()

        assert counts[ExitStatus.PENDING] == 2
        assert counts[ExitStatus.COMPLETED] == 1
        assert counts[ExitStatus.REJECTED] == 0
        assert set(counts) == set(ExitStatus.values)
