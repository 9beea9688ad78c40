from .permission import PermissionResponseSerializer, PermissionStatisticsSerializer

__all__ = [
    "PermissionResponseSerializer",
    "PermissionStatisticsSerializer",
]
