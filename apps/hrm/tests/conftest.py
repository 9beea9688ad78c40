"""Shared pytest fixtures for HRM tests."""

from datetime import date

import pytest

from apps.core.models import User
from apps.hrm.constants import ExitStatus
from apps.hrm.models import Department, Employee, EmployeeExit


@pytest.fixture
def department(db):
    return Department.objects.create(name="Engineering")


@pytest.fixture
def department_leader(db, department):
    leader = Employee.objects.create(
        fullname="Lena Leader",
        username="lena.leader",
        email="lena.leader@example.com",
        department=department,
        start_date=date(2018, 1, 2),
    )
    department.leader = leader
    department.save()
    return leader


@pytest.fixture
def manager(db, department):
    return Employee.objects.create(
        fullname="Mark Manager",
        username="mark.manager",
        email="mark.manager@example.com",
        department=department,
        start_date=date(2019, 6, 1),
    )


@pytest.fixture
def employee(db, department, manager):
    return Employee.objects.create(
        fullname="Jane Doe",
        username="jane.doe",
        email="jane.doe@example.com",
        department=department,
        manager=manager,
        start_date=date(2021, 3, 15),
    )


@pytest.fixture
def outsider(db):
    """Employee with no authority over anyone."""
    return Employee.objects.create(
        fullname="Olly Outsider",
        username="olly.outsider",
        email="olly.outsider@example.com",
        start_date=date(2020, 9, 1),
    )


@pytest.fixture
def make_exit(db, employee):
    """Factory creating an exit request directly in the requested status."""

    def _make_exit(status=ExitStatus.INITIATED, **kwargs):
        kwargs.setdefault("employee", employee)
        kwargs.setdefault("resignation_date", date(2025, 3, 1))
        kwargs.setdefault("last_working_day", date(2025, 3, 31))
        return EmployeeExit.objects.create(status=status, **kwargs)

    return _make_exit


@pytest.fixture
def manager_user(db, manager):
    user = User.objects.create_user(username="mark.manager", email="mark.manager@example.com", password="secret")
    manager.user = user
    manager.save()
    return user
