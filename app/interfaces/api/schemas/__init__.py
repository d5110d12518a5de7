from .auth import LoginRequest, RegisterRequest, Token
from .notification import MarkAllReadResponse, NotificationRead, UnreadCountRead
from .task import TaskCreate, TaskRead, TaskStatusUpdate, TaskUpdate
from .user import ProfileImageUpdate, UserRead

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "Token",
    "MarkAllReadResponse",
    "NotificationRead",
    "UnreadCountRead",
    "TaskCreate",
    "TaskRead",
    "TaskStatusUpdate",
    "TaskUpdate",
    "ProfileImageUpdate",
    "UserRead",
]
