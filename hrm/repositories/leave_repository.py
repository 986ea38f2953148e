"""
Leave Repository - Data access layer for leave requests and the leave type catalog
"""
from datetime import date
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from hrm.models.leave import LEAVE_STATUS_APPROVED, LEAVE_STATUS_PENDING, Leave, LeaveType
from hrm.repositories.base import BaseRepository


class LeaveRepository(BaseRepository[Leave]):
    def __init__(self):
        super().__init__(Leave)

    def get_by_user_id(self, db: Session, user_id: int) -> List[Leave]:
        return (
            db.query(Leave)
            .filter(Leave.user_id == user_id)
            .order_by(Leave.created_at.desc(), Leave.leave_id.desc())
            .all()
        )

    def get_overlapping(
        self,
        db: Session,
        user_id: int,
        start_date: date,
        end_date: date,
        exclude_leave_id: Optional[int] = None,
    ) -> List[Leave]:
        """Leaves of the user sharing at least one calendar day with [start_date, end_date]."""
        query = db.query(Leave).filter(
            Leave.user_id == user_id,
            Leave.start_date <= end_date,
            Leave.end_date >= start_date,
        )
        if exclude_leave_id is not None:
            query = query.filter(Leave.leave_id != exclude_leave_id)
        return query.order_by(Leave.created_at.desc(), Leave.leave_id.desc()).all()

    def get_filtered(self, db: Session, status: Optional[str] = None, leave_type: Optional[str] = None) -> List[Leave]:
        query = db.query(Leave)
        if status:
            query = query.filter(Leave.status == status)
        if leave_type:
            query = query.filter(Leave.type == leave_type)
        return query.order_by(Leave.created_at.desc(), Leave.leave_id.desc()).all()

    def get_pending(self, db: Session) -> List[Leave]:
        return self.get_filtered(db, status=LEAVE_STATUS_PENDING)

    def get_approved_starting_between(
        self, db: Session, user_id: int, start_date: date, end_date: date
    ) -> List[Leave]:
        return db.query(Leave).filter(
            Leave.user_id == user_id,
            Leave.status == LEAVE_STATUS_APPROVED,
            Leave.start_date >= start_date,
            Leave.start_date <= end_date,
        ).all()


class LeaveTypeRepository(BaseRepository[LeaveType]):
    def __init__(self):
        super().__init__(LeaveType)

    def get_by_type(self, db: Session, code: str) -> Optional[LeaveType]:
        return db.query(LeaveType).filter(LeaveType.type == code).first()

    def get_active(self, db: Session) -> List[LeaveType]:
        return (
            db.query(LeaveType)
            .filter(LeaveType.is_active == True)  # noqa: E712
            .order_by(LeaveType.leave_type_id)
            .all()
        )

    def get_with_usage_stats(self, db: Session) -> List[LeaveType]:
        return (
            db.query(LeaveType)
            .options(selectinload(LeaveType.leaves))
            .order_by(LeaveType.leave_type_id)
            .all()
        )

    def count(self, db: Session) -> int:
        return db.query(func.count(LeaveType.leave_type_id)).scalar() or 0
