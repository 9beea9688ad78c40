from django.urls import include, path
from rest_framework.routers import DefaultRouter

from apps.hrm.api.views import DepartmentViewSet, EmployeeExitViewSet, EmployeeViewSet

app_name = "hrm"

router = DefaultRouter()
router.register(r"departments", DepartmentViewSet, basename="department")
router.register(r"employees", EmployeeViewSet, basename="employee")
router.register(r"employee-exits", EmployeeExitViewSet, basename="employee-exit")

urlpatterns = [
    path("", include(router.urls)),
]
