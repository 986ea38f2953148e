from .base import BaseRepository
from .user_repository import UserRepository
from .attendance_repository import AttendanceRepository, BreakRepository
from .leave_repository import LeaveRepository, LeaveTypeRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "AttendanceRepository",
    "BreakRepository",
    "LeaveRepository",
    "LeaveTypeRepository",
]
