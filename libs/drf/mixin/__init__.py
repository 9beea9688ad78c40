from .permission import PermissionRegistrationMixin
from .protected_delete import ProtectedDeleteMixin

__all__ = [
    "PermissionRegistrationMixin",
    "ProtectedDeleteMixin",
]
