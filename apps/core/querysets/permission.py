from django.db import models

OTHER_CATEGORY = "Other"


class PermissionQuerySet(models.QuerySet):
    def system(self):
        return self.filter(is_system_permission=True)

    def by_resource(self, resource: str):
        """Permissions of one category; ``Other`` also matches rows without a resource."""
        if resource == OTHER_CATEGORY:
            return self.filter(models.Q(resource="") | models.Q(resource=OTHER_CATEGORY))
        return self.filter(resource=resource)

    def categories(self) -> list[str]:
        """Sorted, distinct category names. Blank resources count as ``Other``."""
        resources = self.order_by().values_list("resource", flat=True).distinct()
        return sorted({resource or OTHER_CATEGORY for resource in resources})

    def grouped_by_category(self) -> dict[str, list]:
        """Map each category to its permissions sorted by name, keys sorted."""
        groups: dict[str, list] = {}
        for permission in self.order_by("name", "code"):
            groups.setdefault(permission.resource or OTHER_CATEGORY, []).append(permission)
        return dict(sorted(groups.items()))
