from django.apps import apps
from django.core.management.base import BaseCommand
from django.urls import get_resolver

from apps.core.models import Permission


class Command(BaseCommand):
    help = "Collect all registered permissions from views and sync them to the database as system permissions"

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS("Collecting permissions from views..."))

        found_permissions = []

        self.stdout.write("Scanning BaseModelViewSet subclasses...")
        viewset_permissions = self._collect_from_base_viewsets()
        found_permissions.extend(viewset_permissions)
        self.stdout.write(f"  Found {len(viewset_permissions)} permissions from BaseModelViewSet subclasses")

        self.stdout.write("Scanning routed viewsets...")
        for pattern in self._get_all_url_patterns(get_resolver().url_patterns):
            found_permissions.extend(self._extract_permissions_from_pattern(pattern))

        # Remove duplicates (keep first occurrence)
        unique_permissions = []
        seen_codes = set()
        for perm in found_permissions:
            if perm["code"] not in seen_codes:
                unique_permissions.append(perm)
                seen_codes.add(perm["code"])

        created_count = 0
        updated_count = 0

        for perm_data in unique_permissions:
            _, created = Permission.objects.update_or_create(
                code=perm_data["code"],
                defaults={
                    "name": perm_data.get("name", ""),
                    "description": perm_data.get("description", ""),
                    "resource": perm_data.get("resource", ""),
                    "action": perm_data.get("action", ""),
                    "module": perm_data.get("module", ""),
                    "submodule": perm_data.get("submodule", ""),
                    "is_system_permission": True,
                },
            )
            if created:
                created_count += 1
            else:
                updated_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Successfully collected {len(unique_permissions)} permissions "
                f"({created_count} created, {updated_count} updated)"
            )
        )

    def _get_all_url_patterns(self, url_patterns):
        """Recursively get all URL patterns including nested ones"""
        patterns = []
        for pattern in url_patterns:
            if hasattr(pattern, "url_patterns"):
                patterns.extend(self._get_all_url_patterns(pattern.url_patterns))
            else:
                patterns.append(pattern)
        return patterns

    def _extract_permissions_from_pattern(self, pattern):
        """Extract permission metadata from a routed viewset"""
        callback = pattern.callback
        view_class = getattr(callback, "cls", None)
        if view_class is None or not hasattr(view_class, "get_registered_permissions"):
            return []
        return view_class.get_registered_permissions()

    def _collect_from_base_viewsets(self):
        """Collect permissions from all BaseModelViewSet and BaseReadOnlyModelViewSet subclasses"""
        from libs.drf.mixin.permission import PermissionRegistrationMixin

        permissions = []

        for app_config in apps.get_app_configs():
            # Only process internal apps
            if not app_config.name.startswith("apps."):
                continue

            try:
                views_module = __import__(f"{app_config.name}.api.views", fromlist=[""])
            except ModuleNotFoundError:
                continue

            for attr_name in dir(views_module):
                attr = getattr(views_module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, PermissionRegistrationMixin)
                    and attr is not PermissionRegistrationMixin
                ):
                    permissions.extend(attr.get_registered_permissions())

        return permissions
