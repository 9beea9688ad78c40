from .permission import PermissionViewSet
from .token import TokenObtainPairView, TokenRefreshView, TokenVerifyView

__all__ = [
    "PermissionViewSet",
    "TokenObtainPairView",
    "TokenRefreshView",
    "TokenVerifyView",
]
