"""
User Repository - Data access layer for users
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from hrm.models.attendance import Attendance
from hrm.models.leave import Leave
from hrm.models.user import User
from hrm.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User)

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    def list_users(self, db: Session, limit: int = 10, offset: int = 0) -> List[User]:
        return db.query(User).order_by(User.user_id).offset(offset).limit(limit).all()

    def count_references(self, db: Session, user_id: int) -> dict:
        """Rows in other tables that still point at the user."""
        return {
            "attendances": db.query(Attendance).filter(Attendance.user_id == user_id).count(),
            "leaves": db.query(Leave).filter(Leave.user_id == user_id).count(),
            "approved_leaves": db.query(Leave).filter(Leave.approved_by == user_id).count(),
            "rejected_leaves": db.query(Leave).filter(Leave.rejected_by == user_id).count(),
        }
