from django.apps import AppConfig


class HrmConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.hrm"
    label = "hrm"
    verbose_name = "HRM: Employees and Exits"

    def ready(self):
        """Connect the auto code handlers for departments and employees."""
        import apps.hrm.signals  # noqa: F401
