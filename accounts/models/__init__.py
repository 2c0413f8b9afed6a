from .role import Role
from .profile import UserProfile

__all__ = [
    "Role",
    "UserProfile",
]
