# Generated manually

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


def timestamp_fields():
    return [
        (
            "created_at",
            models.DateTimeField(default=django.utils.timezone.now, editable=False, verbose_name="Created at"),
        ),
        (
            "updated_at",
            models.DateTimeField(default=django.utils.timezone.now, editable=False, verbose_name="Updated at"),
        ),
    ]


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Department",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                *timestamp_fields(),
                ("name", models.CharField(max_length=200, verbose_name="Department name")),
                ("code", models.CharField(max_length=50, unique=True, verbose_name="Department code")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
            ],
            options={
                "verbose_name": "Department",
                "verbose_name_plural": "Departments",
                "db_table": "hrm_department",
                "ordering": ["code"],
            },
        ),
        migrations.CreateModel(
            name="Employee",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                *timestamp_fields(),
                ("code", models.CharField(max_length=50, unique=True, verbose_name="Employee code")),
                ("fullname", models.CharField(max_length=200, verbose_name="Full name")),
                ("username", models.CharField(max_length=100, unique=True, verbose_name="Username")),
                ("email", models.EmailField(max_length=100, unique=True, verbose_name="Email")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Active", "Active"),
                            ("Onboarding", "Onboarding"),
                            ("Resigned", "Resigned"),
                            ("Maternity Leave", "Maternity Leave"),
                            ("Unpaid Leave", "Unpaid Leave"),
                        ],
                        default="Active",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("start_date", models.DateField(verbose_name="Start date")),
                ("resignation_date", models.DateField(blank=True, null=True, verbose_name="Resignation date")),
                (
                    "department",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="employees",
                        to="hrm.department",
                        verbose_name="Department",
                    ),
                ),
                (
                    "manager",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="direct_reports",
                        to="hrm.employee",
                        verbose_name="Manager",
                    ),
                ),
                (
                    "user",
                    models.OneToOneField(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="employee",
                        to="core.user",
                        verbose_name="User",
                    ),
                ),
            ],
            options={
                "verbose_name": "Employee",
                "verbose_name_plural": "Employees",
                "db_table": "hrm_employee",
                "ordering": ["code"],
            },
        ),
        migrations.AddField(
            model_name="department",
            name="leader",
            field=models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="led_departments",
                to="hrm.employee",
                verbose_name="Leader",
            ),
        ),
        migrations.CreateModel(
            name="EmployeeExit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                *timestamp_fields(),
                ("resignation_date", models.DateField(blank=True, null=True, verbose_name="Resignation date")),
                ("last_working_day", models.DateField(blank=True, null=True, verbose_name="Last working day")),
                ("exit_reason", models.TextField(blank=True, null=True, verbose_name="Exit reason")),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("INITIATED", "Initiated"),
                            ("PENDING", "Pending"),
                            ("APPROVED", "Approved"),
                            ("REJECTED", "Rejected"),
                            ("WITHDRAWN", "Withdrawn"),
                            ("COMPLETED", "Completed"),
                        ],
                        db_index=True,
                        default="INITIATED",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("approved_at", models.DateField(blank=True, null=True, verbose_name="Approved at")),
                ("notes", models.TextField(blank=True, null=True, verbose_name="Notes")),
                (
                    "approved_by",
                    models.ForeignKey(
                        blank=True,
                        db_column="approved_by",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="approved_exits",
                        to="hrm.employee",
                        verbose_name="Approved by",
                    ),
                ),
                (
                    "employee",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="exits",
                        to="hrm.employee",
                        verbose_name="Employee",
                    ),
                ),
            ],
            options={
                "verbose_name": "Employee Exit",
                "verbose_name_plural": "Employee Exits",
                "db_table": "employee_exits",
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
