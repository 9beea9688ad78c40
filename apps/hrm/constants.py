# HRM Module Constants
from django.db import models
from django.utils.translation import gettext_lazy as _

# Code Prefixes
TEMP_CODE_PREFIX = "TEMP_"

# Default look-ahead window for upcoming exits
UPCOMING_EXIT_DAYS = 30


class ExitStatus(models.TextChoices):
    """Lifecycle states of an employee exit request."""

    INITIATED = "INITIATED", _("Initiated")
    PENDING = "PENDING", _("Pending")
    APPROVED = "APPROVED", _("Approved")
    REJECTED = "REJECTED", _("Rejected")
    WITHDRAWN = "WITHDRAWN", _("Withdrawn")
    COMPLETED = "COMPLETED", _("Completed")

    @classmethod
    def get_active_statuses(cls):
        return [cls.INITIATED, cls.PENDING, cls.APPROVED]

    @classmethod
    def get_pending_statuses(cls):
        return [cls.INITIATED, cls.PENDING]
