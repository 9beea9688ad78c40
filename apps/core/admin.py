from django.contrib import admin

from .models import Permission, Role, User


@admin.register(Permission)
class PermissionAdmin(admin.ModelAdmin):
    """Admin configuration for Permission model"""

    list_display = ["code", "name", "resource", "action", "is_system_permission"]
    list_filter = ["resource", "is_system_permission"]
    search_fields = ["code", "name"]
    readonly_fields = ["code", "resource", "action", "module", "submodule"]


admin.site.register(User)
admin.site.register(Role)
