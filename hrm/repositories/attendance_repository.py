"""
Attendance Repository - Data access layer for attendance days and their breaks
"""
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from hrm.models.attendance import Attendance, Break
from hrm.repositories.base import BaseRepository


class AttendanceRepository(BaseRepository[Attendance]):
    def __init__(self):
        super().__init__(Attendance)

    def get_by_user_and_date(self, db: Session, user_id: int, work_date: date) -> Optional[Attendance]:
        return db.query(Attendance).filter(
            Attendance.user_id == user_id,
            Attendance.work_date == work_date,
        ).first()

    def get_with_breaks(self, db: Session, attendance_id: int) -> Optional[Attendance]:
        return (
            db.query(Attendance)
            .options(selectinload(Attendance.breaks))
            .filter(Attendance.attendance_id == attendance_id)
            .first()
        )

    def get_by_user_and_date_range(
        self, db: Session, user_id: int, start_date: date, end_date: date
    ) -> List[Attendance]:
        return (
            db.query(Attendance)
            .filter(
                Attendance.user_id == user_id,
                Attendance.work_date >= start_date,
                Attendance.work_date <= end_date,
            )
            .order_by(Attendance.work_date.asc())
            .all()
        )

    def get_all(self, db: Session) -> List[Attendance]:
        return (
            db.query(Attendance)
            .order_by(Attendance.work_date.desc(), Attendance.user_id.asc())
            .all()
        )

    def get_last_n_by_user(self, db: Session, user_id: int, limit: int) -> List[Attendance]:
        return (
            db.query(Attendance)
            .filter(Attendance.user_id == user_id)
            .order_by(Attendance.work_date.desc())
            .limit(limit)
            .all()
        )


class BreakRepository(BaseRepository[Break]):
    def __init__(self):
        super().__init__(Break)

    def get_by_attendance_id(self, db: Session, attendance_id: int) -> List[Break]:
        return (
            db.query(Break)
            .filter(Break.attendance_id == attendance_id)
            .order_by(Break.start_time.asc())
            .all()
        )

    def get_active_by_attendance_id(self, db: Session, attendance_id: int) -> Optional[Break]:
        return db.query(Break).filter(
            Break.attendance_id == attendance_id,
            Break.end_time.is_(None),
        ).first()

    def get_all(self, db: Session) -> List[Break]:
        return db.query(Break).order_by(Break.start_time.desc()).all()
