"""
Mixin for DRF ViewSets that turns ``ProtectedError`` into a readable 400 response.
"""

from django.db.models import ProtectedError
from django.utils.translation import gettext as _
from rest_framework import status
from rest_framework.response import Response


class ProtectedDeleteMixin:
    """
    Refuse to delete rows that are still referenced through ``on_delete=PROTECT``.

    Example error payload (before envelope wrapping):
        {
            "detail": "Cannot delete this employee because it is referenced by: 2 employee exits",
            "protected_objects": [
                {"count": 2, "name": "employee exits", "protected_object_ids": [4, 9]}
            ]
        }
    """

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()

        try:
            self.perform_destroy(instance)
        except ProtectedError as e:
            return Response(self._format_protected_error(instance, e), status=status.HTTP_400_BAD_REQUEST)

        return Response(status=status.HTTP_204_NO_CONTENT)

    def _format_protected_error(self, instance, error):
        model_name = instance._meta.verbose_name

        objects_by_model = {}
        for obj in error.protected_objects:
            verbose_name_plural = str(obj.__class__._meta.verbose_name_plural)
            entry = objects_by_model.setdefault(
                verbose_name_plural,
                {"count": 0, "name": verbose_name_plural, "protected_object_ids": []},
            )
            entry["count"] += 1
            entry["protected_object_ids"].append(obj.pk)

        protected_list = list(objects_by_model.values())
        if protected_list:
            relationships = ", ".join(f"{info['count']} {info['name']}" for info in protected_list)
            detail_message = _("Cannot delete this {model_name} because it is referenced by: {relationships}").format(
                model_name=model_name, relationships=relationships
            )
        else:
            detail_message = _("Cannot delete this {model_name} because it has protected relationships").format(
                model_name=model_name
            )

        return {"detail": detail_message, "protected_objects": protected_list}
