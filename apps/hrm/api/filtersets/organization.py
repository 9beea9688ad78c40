import django_filters

from apps.hrm.models import Department


class DepartmentFilterSet(django_filters.FilterSet):
    """FilterSet for Department model"""

    code = django_filters.CharFilter(lookup_expr="icontains")
    name = django_filters.CharFilter(lookup_expr="icontains")
    leader = django_filters.NumberFilter(field_name="leader_id")
    is_active = django_filters.BooleanFilter()

    class Meta:
        model = Department
        fields = ["code", "name", "leader", "is_active"]
