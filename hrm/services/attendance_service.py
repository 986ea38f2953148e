"""Attendance Service 도메인 서비스 레이어입니다. 출퇴근 상태 전이와 근무 시간 계산 규칙을 캡슐화합니다."""

import logging
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hrm.exceptions import (
    AlreadyCheckedIn,
    AlreadyCheckedOut,
    AttendanceNotFound,
    InvalidAttendanceTime,
    InvalidDate,
    InvalidDateRange,
    NotCheckedIn,
)
from hrm.models.attendance import Attendance
from hrm.repositories import AttendanceRepository
from hrm.services import user_service
from hrm.utils.helpers import as_utc, hours_between, to_date, utcnow

logger = logging.getLogger(__name__)

attendance_repo = AttendanceRepository()


def _validate_work_date(work_date) -> date:
    if work_date is None:
        raise InvalidDate()
    return to_date(work_date)


def _get_or_create_day(db: Session, user_id: int, work_date: date) -> Attendance:
    attendance = attendance_repo.get_by_user_and_date(db, user_id, work_date)
    if attendance:
        return attendance
    try:
        return attendance_repo.add(db, Attendance(user_id=user_id, work_date=work_date, total_work_hours=0.0))
    except IntegrityError:
        # Another request created the same (user, date) row first.
        db.rollback()
        logger.info("[attendance] concurrent create for user_id=%s date=%s, reusing row", user_id, work_date)
        attendance = attendance_repo.get_by_user_and_date(db, user_id, work_date)
        if attendance is None:
            raise
        return attendance


def calculate_work_hours(attendance: Attendance) -> float:
    """Hours between check-in and check-out minus every ended break.

    Returns 0 while either timestamp is missing and never goes negative.
    Open breaks are ignored.
    """
    if attendance.check_in_time is None or attendance.check_out_time is None:
        return 0.0

    total = hours_between(attendance.check_in_time, attendance.check_out_time)
    for item in attendance.breaks:
        if item.end_time is not None:
            total -= hours_between(item.start_time, item.end_time)
    return max(total, 0.0)


def refresh_work_hours(db: Session, attendance: Attendance) -> float:
    db.flush()
    db.expire(attendance, ["breaks"])
    attendance.total_work_hours = calculate_work_hours(attendance)
    return attendance.total_work_hours


def create_attendance(db: Session, user_id: int, work_date) -> Attendance:
    user_service.get_user(db, user_id)
    work_date = _validate_work_date(work_date)

    attendance = _get_or_create_day(db, user_id, work_date)
    db.commit()
    db.refresh(attendance)
    return attendance


def check_in(db: Session, user_id: int, work_date, now: Optional[datetime] = None) -> Attendance:
    user_service.get_user(db, user_id)
    work_date = _validate_work_date(work_date)

    attendance = _get_or_create_day(db, user_id, work_date)
    if attendance.check_in_time is not None:
        logger.warning("[attendance] duplicate check-in user_id=%s date=%s", user_id, work_date)
        raise AlreadyCheckedIn()

    attendance.check_in_time = as_utc(now) if now else utcnow()
    db.commit()
    db.refresh(attendance)
    logger.info("[attendance] check-in user_id=%s date=%s", user_id, work_date)
    return attendance


def check_out(db: Session, user_id: int, work_date, now: Optional[datetime] = None) -> Attendance:
    user_service.get_user(db, user_id)
    work_date = _validate_work_date(work_date)

    attendance = attendance_repo.get_by_user_and_date(db, user_id, work_date)
    if not attendance:
        raise AttendanceNotFound("no attendance record for this date")
    if attendance.check_out_time is not None:
        logger.warning("[attendance] duplicate check-out user_id=%s date=%s", user_id, work_date)
        raise AlreadyCheckedOut()
    if attendance.check_in_time is None:
        raise NotCheckedIn()

    check_out_time = as_utc(now) if now else utcnow()
    if check_out_time < as_utc(attendance.check_in_time):
        raise InvalidAttendanceTime()

    attendance.check_out_time = check_out_time
    attendance.total_work_hours = calculate_work_hours(attendance)
    db.commit()
    db.refresh(attendance)
    logger.info(
        "[attendance] check-out user_id=%s date=%s hours=%.2f",
        user_id,
        work_date,
        attendance.total_work_hours,
    )
    return attendance


def get_attendance_by_id(db: Session, attendance_id: int) -> Attendance:
    attendance = attendance_repo.get_with_breaks(db, attendance_id)
    if not attendance:
        raise AttendanceNotFound()
    return attendance


def get_user_attendance(db: Session, user_id: int, work_date) -> Attendance:
    user_service.get_user(db, user_id)
    work_date = _validate_work_date(work_date)
    attendance = attendance_repo.get_by_user_and_date(db, user_id, work_date)
    if not attendance:
        raise AttendanceNotFound()
    return attendance


def get_user_attendance_range(db: Session, user_id: int, start_date, end_date) -> List[Attendance]:
    user_service.get_user(db, user_id)
    start_date = _validate_work_date(start_date)
    end_date = _validate_work_date(end_date)
    if start_date > end_date:
        raise InvalidDateRange()
    return attendance_repo.get_by_user_and_date_range(db, user_id, start_date, end_date)


def get_recent_attendance(db: Session, user_id: int, limit: int = 7) -> List[Attendance]:
    user_service.get_user(db, user_id)
    return attendance_repo.get_last_n_by_user(db, user_id, limit)


def get_all_attendance(db: Session) -> List[Attendance]:
    return attendance_repo.get_all(db)


def update_attendance(
    db: Session,
    attendance_id: int,
    check_in_time: Optional[datetime] = None,
    check_out_time: Optional[datetime] = None,
) -> Attendance:
    attendance = attendance_repo.get_by_id(db, attendance_id)
    if not attendance:
        raise AttendanceNotFound()

    next_check_in = as_utc(check_in_time) if check_in_time else as_utc(attendance.check_in_time)
    next_check_out = as_utc(check_out_time) if check_out_time else as_utc(attendance.check_out_time)

    if next_check_out is not None:
        if next_check_in is None:
            raise NotCheckedIn()
        if next_check_out < next_check_in:
            raise InvalidAttendanceTime()

    attendance.check_in_time = next_check_in
    attendance.check_out_time = next_check_out
    attendance.total_work_hours = calculate_work_hours(attendance)
    db.commit()
    db.refresh(attendance)
    logger.info("[attendance] updated attendance_id=%s", attendance_id)
    return attendance


def delete_attendance(db: Session, attendance_id: int) -> None:
    attendance = attendance_repo.get_by_id(db, attendance_id)
    if not attendance:
        raise AttendanceNotFound()
    attendance_repo.delete(db, attendance)
    db.commit()
    logger.info("[attendance] deleted attendance_id=%s", attendance_id)
