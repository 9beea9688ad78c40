"""
Tests for BaseModelViewSet automatic permission registration.
"""

from io import StringIO

import pytest
from django.core.management import call_command
from django.test import TestCase
from rest_framework.decorators import action

from apps.core.models import Permission
from libs.drf.base_viewset import BaseModelViewSet, BaseReadOnlyModelViewSet


class LeaveBalance:
    """Stand-in model class; only its name is used"""


class SimpleTestViewSet(BaseModelViewSet):
    class MockQuerySet:
        model = LeaveBalance

    queryset = MockQuerySet()
    module = "Test Module"
    submodule = "Test Submodule"
    permission_prefix = "leave_balance"


class ViewSetWithCustomActions(BaseModelViewSet):
    class MockQuerySet:
        model = LeaveBalance

    queryset = MockQuerySet()
    module = "Test Module"
    submodule = "Custom Actions"
    permission_prefix = "custom_test"

    @action(detail=True, methods=["post"])
    def approve(self, request, pk=None):
        pass

    @action(detail=False, methods=["get"])
    def statistics(self, request):
        pass


class ReadOnlyTestViewSet(BaseReadOnlyModelViewSet):
    class MockQuerySet:
        model = LeaveBalance

    queryset = MockQuerySet()
    permission_prefix = "readonly_test"


class ViewSetWithoutPrefix(BaseModelViewSet):
    class MockQuerySet:
        model = LeaveBalance

    queryset = MockQuerySet()


class BaseModelViewSetTestCase(TestCase):
    """Test BaseModelViewSet permission generation"""

    def test_get_model_name(self):
        self.assertEqual(SimpleTestViewSet.get_model_name(), "Leave Balance")

    def test_get_model_name_plural(self):
        self.assertEqual(SimpleTestViewSet.get_model_name_plural(), "Leave Balances")

    def test_get_custom_actions(self):
        custom_actions = ViewSetWithCustomActions.get_custom_actions()

        self.assertIn("approve", custom_actions)
        self.assertIn("statistics", custom_actions)
        self.assertNotIn("list", custom_actions)
        self.assertNotIn("create", custom_actions)

    def test_get_registered_permissions_standard_actions(self):
        permissions = SimpleTestViewSet.get_registered_permissions()

        codes = [p["code"] for p in permissions]
        self.assertEqual(
            codes,
            [
                "leave_balance.list",
                "leave_balance.retrieve",
                "leave_balance.create",
                "leave_balance.update",
                "leave_balance.partial_update",
                "leave_balance.destroy",
            ],
        )

    def test_permission_metadata_values(self):
        permissions = SimpleTestViewSet.get_registered_permissions()
        list_perm = next(p for p in permissions if p["code"] == "leave_balance.list")
        create_perm = next(p for p in permissions if p["code"] == "leave_balance.create")

        self.assertEqual(list_perm["resource"], "leave_balance")
        self.assertEqual(list_perm["action"], "list")
        self.assertEqual(list_perm["module"], "Test Module")
        self.assertEqual(list_perm["submodule"], "Test Submodule")
        self.assertEqual(list_perm["name"], "List Leave Balances")
        self.assertEqual(create_perm["name"], "Create Leave Balance")

    def test_custom_actions_generate_permissions(self):
        permissions = ViewSetWithCustomActions.get_registered_permissions()

        approve_perm = next(p for p in permissions if p["code"] == "custom_test.approve")
        self.assertEqual(approve_perm["name"], "Approve Leave Balance")
        self.assertEqual(approve_perm["action"], "approve")
        self.assertIn("custom_test.statistics", [p["code"] for p in permissions])

    def test_read_only_viewset_registers_list_and_retrieve(self):
        codes = [p["code"] for p in ReadOnlyTestViewSet.get_registered_permissions()]

        self.assertEqual(codes, ["readonly_test.list", "readonly_test.retrieve"])

    def test_viewset_without_prefix_returns_empty(self):
        self.assertEqual(ViewSetWithoutPrefix.get_registered_permissions(), [])


@pytest.mark.django_db
class CollectPermissionsCommandTestCase(TestCase):
    """Test collect_permissions command against the project's viewsets"""

    def test_command_creates_system_permissions(self):
        Permission.objects.all().delete()
        out = StringIO()

        call_command("collect_permissions", stdout=out)

        self.assertIn("Successfully collected", out.getvalue())
        approve = Permission.objects.get(code="employee_exit.approve")
        self.assertEqual(approve.resource, "employee_exit")
        self.assertEqual(approve.action, "approve")
        self.assertEqual(approve.module, "HRM")
        self.assertTrue(approve.is_system_permission)
        self.assertTrue(Permission.objects.filter(code="permission.categories_list").exists())
        self.assertTrue(Permission.objects.filter(code="department.destroy").exists())
        self.assertFalse(Permission.objects.filter(is_system_permission=False).exists())

    def test_command_updates_existing_permission(self):
        Permission.objects.create(code="employee_exit.approve", name="Old name", is_system_permission=False)

        call_command("collect_permissions", stdout=StringIO())

        permission = Permission.objects.get(code="employee_exit.approve")
        self.assertEqual(permission.name, "Approve Employee Exit")
        self.assertTrue(permission.is_system_permission)

    def test_command_is_idempotent(self):
        call_command("collect_permissions", stdout=StringIO())
        count = Permission.objects.count()

        call_command("collect_permissions", stdout=StringIO())

        self.assertEqual(Permission.objects.count(), count)
