from rest_framework import serializers

from apps.hrm.models import Department, Employee


class EmployeeNestedSerializer(serializers.ModelSerializer):
    """Simplified serializer for nested Employee references."""

    class Meta:
        model = Employee
        fields = ["id", "code", "fullname", "email"]
        read_only_fields = fields


class DepartmentNestedSerializer(serializers.ModelSerializer):
    """Simplified serializer for nested Department references."""

    class Meta:
        model = Department
        fields = ["id", "code", "name"]
        read_only_fields = fields
