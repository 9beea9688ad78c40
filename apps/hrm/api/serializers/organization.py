from rest_framework import serializers

from apps.hrm.models import Department, Employee
from .common_nested import EmployeeNestedSerializer


class DepartmentSerializer(serializers.ModelSerializer):
    """Serializer for Department model"""

    leader = EmployeeNestedSerializer(read_only=True)
    leader_id = serializers.PrimaryKeyRelatedField(
        queryset=Employee.objects.all(),
        source="leader",
        write_only=True,
        required=False,
        allow_null=True,
        help_text="ID of the employee who leads the department",
    )

    class Meta:
        model = Department
        fields = [
            "id",
            "code",
            "name",
            "leader",
            "leader_id",
            "description",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "code", "created_at", "updated_at"]
