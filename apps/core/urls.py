from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .api.views import PermissionViewSet, TokenObtainPairView, TokenRefreshView, TokenVerifyView

app_name = "core"

router = DefaultRouter()
router.register(r"permissions", PermissionViewSet, basename="permission")

urlpatterns = [
    # JWT token endpoints
    path("auth/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("auth/token/verify/", TokenVerifyView.as_view(), name="token_verify"),
    path("", include(router.urls)),
]
