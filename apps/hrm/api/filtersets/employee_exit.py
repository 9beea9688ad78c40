from django_filters import rest_framework as filters

from apps.hrm.constants import ExitStatus
from apps.hrm.models import EmployeeExit


class CharInFilter(filters.BaseInFilter, filters.CharFilter):
    pass


class EmployeeExitFilterSet(filters.FilterSet):
    """FilterSet for EmployeeExit model.

    Supports filtering by:
    - status: exact, or several comma separated values with status__in
    - employee / approver: employee ID
    - department: department ID of the leaving employee
    - resignation_date / last_working_day: from-to range
    """

    status = filters.ChoiceFilter(
        choices=ExitStatus.choices,
        help_text="Filter by exit status",
    )

    status__in = CharInFilter(
        field_name="status",
        lookup_expr="in",
        help_text="Filter by several statuses, comma separated (e.g. INITIATED,PENDING)",
    )

    employee = filters.NumberFilter(
        field_name="employee_id",
        help_text="Filter by leaving employee ID",
    )

    approver = filters.NumberFilter(
        field_name="approved_by_id",
        help_text="Filter by approving employee ID",
    )

    department = filters.NumberFilter(
        field_name="employee__department_id",
        help_text="Filter by the department of the leaving employee",
    )

    resignation_date_from = filters.DateFilter(
        field_name="resignation_date",
        lookup_expr="gte",
        help_text="Filter exits resigned on or after this date (format: YYYY-MM-DD)",
    )

    resignation_date_to = filters.DateFilter(
        field_name="resignation_date",
        lookup_expr="lte",
        help_text="Filter exits resigned on or before this date (format: YYYY-MM-DD)",
    )

    last_working_day_from = filters.DateFilter(
        field_name="last_working_day",
        lookup_expr="gte",
        help_text="Filter exits whose last working day is on or after this date (format: YYYY-MM-DD)",
    )

    last_working_day_to = filters.DateFilter(
        field_name="last_working_day",
        lookup_expr="lte",
        help_text="Filter exits whose last working day is on or before this date (format: YYYY-MM-DD)",
    )

    class Meta:
        model = EmployeeExit
        fields = [
            "status",
            "status__in",
            "employee",
            "approver",
            "department",
            "resignation_date_from",
            "resignation_date_to",
            "last_working_day_from",
            "last_working_day_to",
        ]
