import django_filters

from apps.hrm.models import Employee


class EmployeeFilterSet(django_filters.FilterSet):
    """FilterSet for Employee model"""

    code = django_filters.CharFilter(lookup_expr="icontains")
    fullname = django_filters.CharFilter(lookup_expr="icontains")
    email = django_filters.CharFilter(lookup_expr="icontains")
    department = django_filters.NumberFilter(field_name="department_id")
    manager = django_filters.NumberFilter(field_name="manager_id")
    status = django_filters.MultipleChoiceFilter(choices=Employee.Status.choices)

    class Meta:
        model = Employee
        fields = ["code", "fullname", "email", "department", "manager", "status"]
