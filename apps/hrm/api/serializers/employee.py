from rest_framework import serializers

from apps.core.models import User
from apps.hrm.models import Department, Employee
from libs.drf.serializers import ColoredValueSerializer

from .common_nested import DepartmentNestedSerializer, EmployeeNestedSerializer


class EmployeeSerializer(serializers.ModelSerializer):
    """Serializer for Employee model.

    Read operations return nested department and manager objects; write
    operations take ``department_id``, ``manager_id`` and ``user_id``.
    """

    department = DepartmentNestedSerializer(read_only=True)
    department_id = serializers.PrimaryKeyRelatedField(
        queryset=Department.objects.all(),
        source="department",
        write_only=True,
        required=False,
        allow_null=True,
    )
    manager = EmployeeNestedSerializer(read_only=True)
    manager_id = serializers.PrimaryKeyRelatedField(
        queryset=Employee.objects.all(),
        source="manager",
        write_only=True,
        required=False,
        allow_null=True,
    )
    user_id = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.all(),
        source="user",
        required=False,
        allow_null=True,
    )
    colored_status = ColoredValueSerializer(read_only=True)

    class Meta:
        model = Employee
        fields = [
            "id",
            "code",
            "fullname",
            "username",
            "email",
            "department",
            "department_id",
            "manager",
            "manager_id",
            "user_id",
            "status",
            "colored_status",
            "start_date",
            "resignation_date",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "code", "resignation_date", "created_at", "updated_at"]

    def validate_manager_id(self, value):
        if value is not None and self.instance is not None and value.pk == self.instance.pk:
            raise serializers.ValidationError("An employee cannot be their own manager.")
        return value
