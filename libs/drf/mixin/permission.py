import re
from typing import Any

from django.utils.translation import gettext_lazy as _


class PermissionRegistrationMixin:
    """
    Mixin for ViewSets with automatic permission registration.

    Every supported standard action and every ``@action`` on the viewset yields
    one permission whose code is ``<permission_prefix>.<action>``. The prefix
    doubles as the permission's *resource*.

    Class Attributes:
        module (str): Module the permissions belong to (e.g., "HRM", "Core")
        submodule (str): Sub-module within the module (e.g., "Exit Management")
        permission_prefix (str): Resource name used as the code prefix (e.g., "employee_exit")
    """

    module = ""
    submodule = ""
    permission_prefix = ""

    STANDARD_ACTIONS: dict[str, dict[str, Any]] = {
        "list": {
            "name_template": _("List {model_name}"),
            "description_template": _("View list of {model_name}"),
        },
        "retrieve": {
            "name_template": _("View {model_name}"),
            "description_template": _("View details of a {model_name}"),
        },
        "create": {
            "name_template": _("Create {model_name}"),
            "description_template": _("Create a new {model_name}"),
        },
        "update": {
            "name_template": _("Update {model_name}"),
            "description_template": _("Update a {model_name}"),
        },
        "partial_update": {
            "name_template": _("Partially update {model_name}"),
            "description_template": _("Partially update a {model_name}"),
        },
        "destroy": {
            "name_template": _("Delete {model_name}"),
            "description_template": _("Delete a {model_name}"),
        },
    }

    @classmethod
    def get_model_name(cls) -> str:
        """Human readable model name, e.g. ``EmployeeExit`` -> ``Employee Exit``."""
        queryset = getattr(cls, "queryset", None)
        if queryset is not None:
            return re.sub(r"(?<!^)(?=[A-Z])", " ", queryset.model.__name__)
        return cls.__name__.replace("ViewSet", "")

    @classmethod
    def get_model_name_plural(cls) -> str:
        model_name = cls.get_model_name()
        if model_name.endswith(("s", "x", "z", "ch", "sh")):
            return model_name + "es"
        if model_name.endswith("y") and len(model_name) > 1 and model_name[-2] not in "aeiou":
            return model_name[:-1] + "ies"
        return model_name + "s"

    @classmethod
    def get_custom_actions(cls) -> list[str]:
        """Names of the ``@action`` methods defined on the viewset."""
        custom_actions = []
        for attr_name in dir(cls):
            if attr_name.startswith("_"):
                continue
            attr = getattr(cls, attr_name)
            if callable(attr) and hasattr(attr, "mapping") and attr_name not in cls.STANDARD_ACTIONS:
                custom_actions.append(attr_name)
        return custom_actions

    @classmethod
    def get_registered_permissions(cls) -> list[dict[str, Any]]:
        """
        Build permission metadata for every action this viewset exposes.

        Returns:
            list: dicts with keys ``code``, ``name``, ``description``,
            ``resource``, ``action``, ``module`` and ``submodule``.
        """
        if not cls.permission_prefix:
            return []

        permissions = []
        model_name = cls.get_model_name()
        model_name_plural = cls.get_model_name_plural()

        for action_name, action_meta in cls.STANDARD_ACTIONS.items():
            if not hasattr(cls, action_name):
                continue
            display_name = model_name_plural if action_name == "list" else model_name
            permissions.append(
                cls._build_permission(
                    action_name,
                    str(action_meta["name_template"]).format(model_name=display_name),
                    str(action_meta["description_template"]).format(model_name=display_name),
                )
            )

        for action_name in cls.get_custom_actions():
            action_title = action_name.replace("_", " ").title()
            permissions.append(
                cls._build_permission(
                    action_name,
                    f"{action_title} {model_name}",
                    f"{action_title} a {model_name}",
                )
            )

        return permissions

    @classmethod
    def _build_permission(cls, action_name: str, name: str, description: str) -> dict[str, Any]:
        return {
            "code": f"{cls.permission_prefix}.{action_name}",
            "name": name,
            "description": description,
            "resource": cls.permission_prefix,
            "action": action_name,
            "module": cls.module,
            "submodule": cls.submodule,
        }
