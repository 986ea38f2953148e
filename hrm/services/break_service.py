"""Break Service 도메인 서비스 레이어입니다. 근무일 내 휴식 기록과 상위 근무 시간 재계산을 담당합니다."""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from hrm.exceptions import AttendanceNotFound, BreakAlreadyEnded, BreakInProgress, BreakNotFound, InvalidBreakTime
from hrm.models.attendance import Break
from hrm.repositories import AttendanceRepository, BreakRepository
from hrm.services import attendance_service
from hrm.utils.helpers import as_utc, minutes_between

logger = logging.getLogger(__name__)

attendance_repo = AttendanceRepository()
break_repo = BreakRepository()


def calculate_break_duration(item: Break) -> float:
    """Minutes between start and end; 0 for a break that is still open."""
    if item.start_time is None or item.end_time is None:
        return 0.0
    return max(minutes_between(item.start_time, item.end_time), 0.0)


def _get_break_or_raise(db: Session, break_id: int) -> Break:
    item = break_repo.get_by_id(db, break_id)
    if not item:
        raise BreakNotFound()
    return item


def create_break(db: Session, attendance_id: int, start_time: datetime, reason: str = "") -> Break:
    attendance = attendance_repo.get_by_id(db, attendance_id)
    if not attendance:
        raise AttendanceNotFound()

    if break_repo.get_active_by_attendance_id(db, attendance_id):
        logger.warning("[break] open break already exists for attendance_id=%s", attendance_id)
        raise BreakInProgress()

    item = Break(
        attendance_id=attendance_id,
        start_time=as_utc(start_time),
        duration=0.0,
        reason=reason or "",
    )
    break_repo.add(db, item)
    attendance_service.refresh_work_hours(db, attendance)
    db.commit()
    db.refresh(item)
    logger.info("[break] started break_id=%s attendance_id=%s", item.break_id, attendance_id)
    return item


def end_break(db: Session, break_id: int, end_time: datetime) -> Break:
    item = _get_break_or_raise(db, break_id)
    if item.end_time is not None:
        raise BreakAlreadyEnded()

    end_time = as_utc(end_time)
    if end_time < as_utc(item.start_time):
        raise InvalidBreakTime("break end time cannot be before its start time")

    item.end_time = end_time
    item.duration = calculate_break_duration(item)
    attendance_service.refresh_work_hours(db, item.attendance)
    db.commit()
    db.refresh(item)
    logger.info("[break] ended break_id=%s duration=%.1fmin", item.break_id, item.duration)
    return item


def update_break(
    db: Session,
    break_id: int,
    start_time: Optional[datetime] = None,
    end_time: Optional[datetime] = None,
    reason: Optional[str] = None,
) -> Break:
    item = _get_break_or_raise(db, break_id)

    next_start = as_utc(start_time) if start_time else as_utc(item.start_time)
    next_end = as_utc(end_time) if end_time else as_utc(item.end_time)
    if next_end is not None and next_end < next_start:
        raise InvalidBreakTime("break end time cannot be before its start time")

    item.start_time = next_start
    item.end_time = next_end
    if reason is not None:
        item.reason = reason
    item.duration = calculate_break_duration(item)
    attendance_service.refresh_work_hours(db, item.attendance)
    db.commit()
    db.refresh(item)
    return item


def delete_break(db: Session, break_id: int) -> None:
    item = _get_break_or_raise(db, break_id)
    attendance = item.attendance
    break_repo.delete(db, item)
    attendance_service.refresh_work_hours(db, attendance)
    db.commit()
    logger.info("[break] deleted break_id=%s", break_id)


def get_break_by_id(db: Session, break_id: int) -> Break:
    return _get_break_or_raise(db, break_id)


def get_breaks_by_attendance_id(db: Session, attendance_id: int) -> List[Break]:
    if not attendance_repo.exists(db, attendance_id):
        raise AttendanceNotFound()
    return break_repo.get_by_attendance_id(db, attendance_id)


def get_all_breaks(db: Session) -> List[Break]:
    return break_repo.get_all(db)
