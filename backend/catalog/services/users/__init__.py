from .dto import UserProfileOut, UserStatsOut, UserUpdateIn
from .service import UserService

__all__ = ["UserProfileOut", "UserService", "UserStatsOut", "UserUpdateIn"]
