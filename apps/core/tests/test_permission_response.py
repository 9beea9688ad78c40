import json

import pytest
from rest_framework.renderers import JSONRenderer

from apps.core.api.serializers import PermissionResponseSerializer
from apps.core.models import Permission


@pytest.mark.django_db
class TestPermissionResponseSerializer:
    def test_serializes_camel_case_fields(self):
        permission = Permission.objects.create(
            code="employee_exit.complete",
            name="Complete Employee Exit",
            description="Finish offboarding",
            is_system_permission=True,
        )

        data = PermissionResponseSerializer(permission).data

        assert data["id"] == permission.pk
        assert data["name"] == "Complete Employee Exit"
        assert data["description"] == "Finish offboarding"
        assert data["resource"] == "employee_exit"
        assert data["action"] == "complete"
        assert data["isSystemPermission"] is True
        assert "is_system_permission" not in data
        assert data["createdAt"] == data["updatedAt"]

    def test_timestamps_are_iso_8601(self):
        permission = Permission.objects.create(code="department.list")

        data = PermissionResponseSerializer(permission).data

        # DRF renders UTC as a trailing "Z"
        assert data["createdAt"].startswith(permission.created_at.strftime("%Y-%m-%dT%H:%M:%S"))
        assert data["createdAt"].endswith("Z")

    def test_round_trip_through_json(self):
        permission = Permission.objects.create(
            code="employee_exit.withdraw",
            name="Withdraw Employee Exit",
            description="Withdraw a resignation",
            is_system_permission=True,
        )
        original = PermissionResponseSerializer(permission).data

        payload = json.loads(JSONRenderer().render(original))
        parsed = PermissionResponseSerializer(data=payload)

        assert parsed.is_valid(), parsed.errors
        values = parsed.validated_data
        assert values["id"] == permission.pk
        assert values["name"] == permission.name
        assert values["description"] == permission.description
        assert values["resource"] == permission.resource
        assert values["action"] == permission.action
        assert values["is_system_permission"] is True
        assert values["created_at"] == permission.created_at
        assert values["updated_at"] == permission.updated_at
        assert PermissionResponseSerializer(values).data == original

    def test_missing_system_flag_defaults_to_false(self):
        parsed = PermissionResponseSerializer(data={"id": 1, "name": "List Departments"})

        assert parsed.is_valid(), parsed.errors
        assert parsed.validated_data["is_system_permission"] is False
