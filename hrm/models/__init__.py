"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from hrm.models.user import User
from hrm.models.attendance import Attendance, Break
from hrm.models.leave import Leave, LeaveType

__all__ = [
    "User",
    "Attendance", "Break",
    "Leave", "LeaveType",
]
