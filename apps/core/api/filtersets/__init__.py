from .permission import PermissionFilterSet

__all__ = ["PermissionFilterSet"]
