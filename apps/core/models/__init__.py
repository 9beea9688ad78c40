from .permission import Permission
from .role import Role
from .user import User

__all__ = [
    "User",
    "Permission",
    "Role",
]
