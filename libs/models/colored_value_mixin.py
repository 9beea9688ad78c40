"""Mixin for models with colored status fields."""

from django.db import models


class ColoredValueMixin(models.Model):
    """Expose choice fields as ``{"value", "variant"}`` pairs for UI badges.

    Models declare ``VARIANT_MAPPING`` as ``{field_name: {value: ColorVariant}}``
    and usually wrap ``get_colored_value`` in a ``colored_<field>`` property.

    Example:
        class EmployeeExit(ColoredValueMixin, BaseModel):
            VARIANT_MAPPING = {
                "status": {
                    ExitStatus.INITIATED: ColorVariant.GREY,
                    ExitStatus.APPROVED: ColorVariant.GREEN,
                }
            }

            @property
            def colored_status(self):
                return self.get_colored_value("status")
    """

    VARIANT_MAPPING: dict = {}

    class Meta:
        abstract = True

    def get_colored_value(self, field_name: str) -> dict:
        """Return ``{"value": <field value>, "variant": <color or None>}``."""
        field_value = getattr(self, field_name, None)
        variant = self.VARIANT_MAPPING.get(field_name, {}).get(field_value)
        return {"value": field_value, "variant": variant}
