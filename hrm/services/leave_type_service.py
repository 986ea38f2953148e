"""Leave Type Service 휴가 유형 카탈로그 레이어입니다. 유형 코드 검증과 기본 카탈로그 시드를 담당합니다."""

import logging
from typing import List

from sqlalchemy.orm import Session

from hrm.exceptions import InvalidLeaveType, LeaveTypeAlreadyExists, LeaveTypeInUse, LeaveTypeNotFound
from hrm.models.leave import LEAVE_TYPES, LeaveType
from hrm.repositories import LeaveTypeRepository
from hrm.schemas.leave_type import LeaveTypeCreate, LeaveTypeUpdate

logger = logging.getLogger(__name__)

leave_type_repo = LeaveTypeRepository()

DEFAULT_LEAVE_TYPES = [
    {
        "type": "sick",
        "name": "Sick Leave",
        "description": "Medical leave for illness, injury, or health-related issues.",
        "default_days_per_year": 10,
        "color": "#dc3545",
        "icon": "medical",
    },
    {
        "type": "vacation",
        "name": "Vacation Leave",
        "description": "Annual vacation time for rest, relaxation, and personal activities.",
        "default_days_per_year": 20,
        "color": "#28a745",
        "icon": "vacation",
    },
    {
        "type": "personal",
        "name": "Personal Leave",
        "description": "Personal time off for various personal matters.",
        "default_days_per_year": 5,
        "color": "#ffc107",
        "icon": "personal",
    },
    {
        "type": "maternity",
        "name": "Maternity Leave",
        "description": "Leave for expecting mothers before and after childbirth.",
        "default_days_per_year": 90,
        "color": "#e83e8c",
        "icon": "maternity",
    },
    {
        "type": "paternity",
        "name": "Paternity Leave",
        "description": "Leave for new fathers to bond with their newborn child.",
        "default_days_per_year": 14,
        "color": "#17a2b8",
        "icon": "paternity",
    },
    {
        "type": "other",
        "name": "Other Leave",
        "description": "Other types of leave for special circumstances.",
        "default_days_per_year": 0,
        "color": "#6c757d",
        "icon": "other",
    },
]


def validate_leave_type(code: str) -> str:
    if code not in LEAVE_TYPES:
        raise InvalidLeaveType(f"invalid leave type: {code}")
    return code


def seed_default_leave_types(db: Session) -> int:
    """Insert the default catalog when the table is empty. Returns rows inserted."""
    if leave_type_repo.count(db) > 0:
        return 0
    for item in DEFAULT_LEAVE_TYPES:
        db.add(LeaveType(is_active=True, requires_approval=True, **item))
    db.commit()
    logger.info("[leave_type] seeded %s default leave types", len(DEFAULT_LEAVE_TYPES))
    return len(DEFAULT_LEAVE_TYPES)


def get_leave_type_by_id(db: Session, leave_type_id: int) -> LeaveType:
    leave_type = leave_type_repo.get_by_id(db, leave_type_id)
    if not leave_type:
        raise LeaveTypeNotFound()
    return leave_type


def get_leave_type_by_code(db: Session, code: str) -> LeaveType:
    leave_type = leave_type_repo.get_by_type(db, code)
    if not leave_type:
        raise LeaveTypeNotFound()
    return leave_type


def get_all_leave_types(db: Session) -> List[LeaveType]:
    return leave_type_repo.get_all(db)


def get_active_leave_types(db: Session) -> List[LeaveType]:
    return leave_type_repo.get_active(db)


def get_leave_types_with_usage_stats(db: Session) -> List[dict]:
    rows = []
    for leave_type in leave_type_repo.get_with_usage_stats(db):
        rows.append({
            "leave_type_id": leave_type.leave_type_id,
            "type": leave_type.type,
            "name": leave_type.name,
            "description": leave_type.description,
            "default_days_per_year": leave_type.default_days_per_year,
            "is_active": leave_type.is_active,
            "requires_approval": leave_type.requires_approval,
            "color": leave_type.color,
            "icon": leave_type.icon,
            "created_at": leave_type.created_at,
            "updated_at": leave_type.updated_at,
            "leave_count": len(leave_type.leaves),
            "leaves": leave_type.leaves,
        })
    return rows


def create_leave_type(db: Session, data: LeaveTypeCreate) -> LeaveType:
    validate_leave_type(data.type)
    if leave_type_repo.get_by_type(db, data.type):
        raise LeaveTypeAlreadyExists()

    leave_type = LeaveType(**data.model_dump())
    leave_type_repo.add(db, leave_type)
    db.commit()
    db.refresh(leave_type)
    logger.info("[leave_type] created %s", leave_type.type)
    return leave_type


def update_leave_type(db: Session, leave_type_id: int, data: LeaveTypeUpdate) -> LeaveType:
    leave_type = get_leave_type_by_id(db, leave_type_id)
    payload = data.model_dump(exclude_unset=True)

    next_code = payload.get("type")
    if next_code is not None and next_code != leave_type.type:
        validate_leave_type(next_code)
        in_use = len(leave_type.leaves)
        if in_use:
            logger.warning("[leave_type] code change blocked for %s, %s leaves reference it", leave_type.type, in_use)
            raise LeaveTypeInUse(f"cannot change the code of a leave type referenced by {in_use} leaves")
        if leave_type_repo.get_by_type(db, next_code):
            raise LeaveTypeAlreadyExists()

    for key, value in payload.items():
        if value is not None:
            setattr(leave_type, key, value)
    db.commit()
    db.refresh(leave_type)
    return leave_type


def delete_leave_type(db: Session, leave_type_id: int) -> None:
    leave_type = get_leave_type_by_id(db, leave_type_id)
    in_use = len(leave_type.leaves)
    if in_use:
        logger.warning("[leave_type] delete blocked for %s, %s leaves reference it", leave_type.type, in_use)
        raise LeaveTypeInUse(f"leave type is referenced by {in_use} leaves")

    leave_type_repo.delete(db, leave_type)
    db.commit()
    logger.info("[leave_type] deleted %s", leave_type.type)
