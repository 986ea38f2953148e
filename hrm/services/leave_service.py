"""Leave Service 도메인 서비스 레이어입니다. 휴가 신청 생명주기(신청/승인/반려/취소)와 잔여일수 집계를 캡슐화합니다."""

import logging
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from hrm.exceptions import (
    CannotCancelApprovedLeave,
    InvalidDateRange,
    InvalidLeaveStatus,
    InvalidLeaveType,
    InvalidUserID,
    LeaveAlreadyApproved,
    LeaveAlreadyRejected,
    LeaveDateInPast,
    LeaveNotFound,
    LeaveNotPending,
    LeaveOverlap,
    LeaveTypeInactive,
    ReasonRequired,
    Unauthorized,
)
from hrm.models.leave import (
    INACTIVE_LEAVE_STATUSES,
    LEAVE_STATUS_APPROVED,
    LEAVE_STATUS_CANCELLED,
    LEAVE_STATUS_PENDING,
    LEAVE_STATUS_REJECTED,
    LEAVE_STATUSES,
    LEAVE_TYPES,
    Leave,
)
from hrm.repositories import LeaveRepository, LeaveTypeRepository
from hrm.schemas.leave import LeaveCreate, LeaveUpdate
from hrm.services import user_service
from hrm.utils.helpers import to_date, utc_today, utcnow

logger = logging.getLogger(__name__)

leave_repo = LeaveRepository()
leave_type_repo = LeaveTypeRepository()

CANCELLABLE_STATUSES = (LEAVE_STATUS_PENDING, LEAVE_STATUS_APPROVED)


def calculate_leave_days(start_date, end_date) -> float:
    """Inclusive calendar days between two dates. Weekends and holidays count."""
    return float((to_date(end_date) - to_date(start_date)).days + 1)


def validate_leave(leave: Leave, today: Optional[date] = None) -> None:
    today = today or utc_today()

    if leave.user_id is None or leave.user_id <= 0:
        raise InvalidUserID()
    if leave.type not in LEAVE_TYPES:
        raise InvalidLeaveType(f"invalid leave type: {leave.type}")
    if leave.status not in LEAVE_STATUSES:
        raise InvalidLeaveStatus()
    if to_date(leave.start_date) > to_date(leave.end_date):
        raise InvalidDateRange()
    if to_date(leave.start_date) < today:
        raise LeaveDateInPast()
    if not (leave.reason or "").strip():
        raise ReasonRequired()


def _ensure_leave_type_available(db: Session, code: str) -> None:
    leave_type = leave_type_repo.get_by_type(db, code)
    if not leave_type:
        raise InvalidLeaveType(f"leave type is not configured: {code}")
    if not leave_type.is_active:
        raise LeaveTypeInactive()


def _ensure_no_overlap(db: Session, leave: Leave, exclude_leave_id: Optional[int] = None) -> None:
    overlapping = leave_repo.get_overlapping(
        db,
        leave.user_id,
        leave.start_date,
        leave.end_date,
        exclude_leave_id=exclude_leave_id,
    )
    blocking = [item for item in overlapping if item.status not in INACTIVE_LEAVE_STATUSES]
    if blocking:
        logger.warning(
            "[leave] overlap for user_id=%s %s..%s with leave_id=%s",
            leave.user_id,
            leave.start_date,
            leave.end_date,
            blocking[0].leave_id,
        )
        raise LeaveOverlap()


def _get_leave_or_raise(db: Session, leave_id: int) -> Leave:
    leave = leave_repo.get_by_id(db, leave_id)
    if not leave:
        raise LeaveNotFound()
    return leave


def create_leave(db: Session, user_id: int, data: LeaveCreate, today: Optional[date] = None) -> Leave:
    user_service.get_user(db, user_id)

    leave = Leave(
        user_id=user_id,
        type=data.type,
        status=LEAVE_STATUS_PENDING,
        start_date=to_date(data.start_date),
        end_date=to_date(data.end_date),
        reason=(data.reason or "").strip(),
        description=data.description,
    )
    validate_leave(leave, today)
    leave.days = calculate_leave_days(leave.start_date, leave.end_date)

    _ensure_leave_type_available(db, leave.type)
    _ensure_no_overlap(db, leave)

    leave_repo.add(db, leave)
    db.commit()
    db.refresh(leave)
    logger.info("[leave] created leave_id=%s user_id=%s days=%s", leave.leave_id, user_id, leave.days)
    return leave


def update_leave(
    db: Session,
    leave_id: int,
    user_id: int,
    data: LeaveUpdate,
    today: Optional[date] = None,
) -> Leave:
    leave = _get_leave_or_raise(db, leave_id)
    if leave.user_id != user_id:
        raise Unauthorized("only the owner can update this leave")
    if leave.status != LEAVE_STATUS_PENDING:
        raise LeaveNotPending()

    payload = data.model_dump(exclude_unset=True)
    candidate = Leave(
        user_id=leave.user_id,
        type=payload.get("type") or leave.type,
        status=leave.status,
        start_date=to_date(payload.get("start_date") or leave.start_date),
        end_date=to_date(payload.get("end_date") or leave.end_date),
        reason=(payload["reason"] if payload.get("reason") is not None else leave.reason or "").strip(),
        description=payload.get("description", leave.description),
    )
    validate_leave(candidate, today)
    if candidate.type != leave.type:
        _ensure_leave_type_available(db, candidate.type)
    _ensure_no_overlap(db, candidate, exclude_leave_id=leave.leave_id)

    leave.type = candidate.type
    leave.start_date = candidate.start_date
    leave.end_date = candidate.end_date
    leave.reason = candidate.reason
    leave.description = candidate.description
    leave.days = calculate_leave_days(leave.start_date, leave.end_date)
    db.commit()
    db.refresh(leave)
    logger.info("[leave] updated leave_id=%s", leave.leave_id)
    return leave


def approve_leave(db: Session, leave_id: int, approver_id: int) -> Leave:
    leave = _get_leave_or_raise(db, leave_id)
    if leave.status != LEAVE_STATUS_PENDING:
        raise LeaveAlreadyApproved(f"leave is already {leave.status}")
    user_service.get_user(db, approver_id)

    leave.status = LEAVE_STATUS_APPROVED
    leave.approved_by = approver_id
    leave.approved_at = utcnow()
    db.commit()
    db.refresh(leave)
    logger.info("[leave] approved leave_id=%s by user_id=%s", leave_id, approver_id)
    return leave


def reject_leave(db: Session, leave_id: int, rejecter_id: int, reason: str = "") -> Leave:
    leave = _get_leave_or_raise(db, leave_id)
    if leave.status != LEAVE_STATUS_PENDING:
        raise LeaveAlreadyRejected(f"leave is already {leave.status}")
    user_service.get_user(db, rejecter_id)

    leave.status = LEAVE_STATUS_REJECTED
    leave.rejected_by = rejecter_id
    leave.rejected_at = utcnow()
    leave.reject_reason = reason
    db.commit()
    db.refresh(leave)
    logger.info("[leave] rejected leave_id=%s by user_id=%s", leave_id, rejecter_id)
    return leave


def cancel_leave(db: Session, leave_id: int, user_id: int) -> Leave:
    leave = _get_leave_or_raise(db, leave_id)
    if leave.user_id != user_id:
        logger.warning("[leave] user_id=%s tried to cancel leave_id=%s", user_id, leave_id)
        raise Unauthorized("only the owner can cancel this leave")
    if leave.status not in CANCELLABLE_STATUSES:
        raise CannotCancelApprovedLeave(f"a {leave.status} leave cannot be cancelled")

    leave.status = LEAVE_STATUS_CANCELLED
    db.commit()
    db.refresh(leave)
    logger.info("[leave] cancelled leave_id=%s", leave_id)
    return leave


def delete_leave(db: Session, leave_id: int) -> None:
    leave = _get_leave_or_raise(db, leave_id)
    leave_repo.delete(db, leave)
    db.commit()
    logger.info("[leave] deleted leave_id=%s", leave_id)


def get_leave_by_id(db: Session, leave_id: int) -> Leave:
    return _get_leave_or_raise(db, leave_id)


def get_user_leaves(db: Session, user_id: int) -> List[Leave]:
    user_service.get_user(db, user_id)
    return leave_repo.get_by_user_id(db, user_id)


def get_user_leaves_by_date_range(db: Session, user_id: int, start_date, end_date) -> List[Leave]:
    user_service.get_user(db, user_id)
    start_date = to_date(start_date)
    end_date = to_date(end_date)
    if start_date > end_date:
        raise InvalidDateRange()
    return leave_repo.get_overlapping(db, user_id, start_date, end_date)


def get_all_leaves(db: Session, status: Optional[str] = None, leave_type: Optional[str] = None) -> List[Leave]:
    if status and status not in LEAVE_STATUSES:
        raise InvalidLeaveStatus()
    if leave_type and leave_type not in LEAVE_TYPES:
        raise InvalidLeaveType(f"invalid leave type: {leave_type}")
    return leave_repo.get_filtered(db, status=status, leave_type=leave_type)


def get_pending_leaves(db: Session) -> List[Leave]:
    return leave_repo.get_pending(db)


def get_user_leave_balance(db: Session, user_id: int, year: int) -> Dict[str, float]:
    """Days of approved leave per type for leaves starting in ``year``."""
    user_service.get_user(db, user_id)
    balance = {code: 0.0 for code in LEAVE_TYPES}
    leaves = leave_repo.get_approved_starting_between(db, user_id, date(year, 1, 1), date(year, 12, 31))
    for leave in leaves:
        balance[leave.type] = balance.get(leave.type, 0.0) + (leave.days or 0.0)
    return balance
