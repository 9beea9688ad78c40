"""Shared pytest fixtures for core tests."""

import pytest

from apps.core.models import Permission, Role


@pytest.fixture
def permissions(db):
    """A small permission catalogue spread over three categories."""
    return [
        Permission.objects.create(
            code="employee_exit.approve",
            name="Approve Employee Exit",
            description="Approve a resignation",
            is_system_permission=True,
        ),
        Permission.objects.create(
            code="employee_exit.list",
            name="List Employee Exits",
            description="View list of exits",
            is_system_permission=True,
        ),
        Permission.objects.create(
            code="department.list",
            name="List Departments",
            description="View list of departments",
        ),
        Permission.objects.create(
            code="report_export",
            name="Export Reports",
            description="Legacy code without a resource",
        ),
    ]


@pytest.fixture
def role(db):
    return Role.objects.create(name="HR Officer", description="Handles resignations")
