from django.db import models
from django.utils import timezone
from django.utils.crypto import get_random_string


class BaseModel(models.Model):
    """Abstract model carrying the audit timestamps shared by every table.

    Both timestamps are stamped from a single clock reading when a row is
    inserted, so a freshly created row always has ``created_at == updated_at``.
    Later saves only move ``updated_at`` forward.
    """

    created_at = models.DateTimeField(default=timezone.now, editable=False, verbose_name="Created at")
    updated_at = models.DateTimeField(default=timezone.now, editable=False, verbose_name="Updated at")

    class Meta:
        abstract = True
        ordering = ["created_at"]

    def save(self, *args, **kwargs):
        now = timezone.now()
        if self._state.adding:
            self.created_at = now
        self.updated_at = now

        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = [*update_fields, "updated_at"]

        super().save(*args, **kwargs)


class AutoCodeMixin(models.Model):
    """Give new rows a random temporary ``code`` until the final one is known.

    The final code depends on the primary key, so it is assigned by a
    ``post_save`` handler (see ``libs.code_generation.register_auto_code_signal``)
    which replaces any code starting with ``TEMP_CODE_PREFIX``.

    Example:
        class Department(AutoCodeMixin, BaseModel):
            CODE_PREFIX = "PB"
            code = models.CharField(max_length=50, unique=True)
    """

    TEMP_CODE_PREFIX: str = "TEMP_"
    CODE_PREFIX: str = ""

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if self._state.adding and hasattr(self, "code") and not self.code:
            self.code = f"{self.TEMP_CODE_PREFIX}{get_random_string(20)}"
        super().save(*args, **kwargs)
