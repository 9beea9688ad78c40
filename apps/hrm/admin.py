from django.contrib import admin

from .models import Department, Employee, EmployeeExit


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ["code", "name", "leader", "is_active"]
    search_fields = ["code", "name"]
    readonly_fields = ["code"]


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ["code", "fullname", "email", "department", "status"]
    list_filter = ["status", "department"]
    search_fields = ["code", "fullname", "email"]
    readonly_fields = ["code"]


@admin.register(EmployeeExit)
class EmployeeExitAdmin(admin.ModelAdmin):
    list_display = ["id", "employee", "status", "resignation_date", "last_working_day", "approved_by"]
    list_filter = ["status"]
    search_fields = ["employee__code", "employee__fullname"]
    readonly_fields = ["status", "approved_by", "approved_at"]
