"""Leave Types 카탈로그 API 라우터입니다."""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from hrm.database import get_db
from hrm.middleware.auth_middleware import get_current_user
from hrm.models.user import User
from hrm.schemas.leave_type import LeaveTypeCreate, LeaveTypeOut, LeaveTypeUpdate, LeaveTypeUsageOut
from hrm.services import leave_type_service

router = APIRouter(prefix="/api/leave-types", tags=["leave-types"])


@router.get("", response_model=List[LeaveTypeOut])
def list_leave_types(
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return leave_type_service.get_all_leave_types(db)


@router.post("", response_model=LeaveTypeOut, status_code=status.HTTP_201_CREATED)
def create_leave_type(
    data: LeaveTypeCreate,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return leave_type_service.create_leave_type(db, data)


@router.get("/active", response_model=List[LeaveTypeOut])
def list_active_leave_types(
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return leave_type_service.get_active_leave_types(db)


@router.get("/stats", response_model=List[LeaveTypeUsageOut])
def leave_type_usage_stats(
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return leave_type_service.get_leave_types_with_usage_stats(db)


@router.get("/type/{code}", response_model=LeaveTypeOut)
def get_leave_type_by_code(
    code: str,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return leave_type_service.get_leave_type_by_code(db, code)


@router.get("/{leave_type_id}", response_model=LeaveTypeOut)
def get_leave_type(
    leave_type_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return leave_type_service.get_leave_type_by_id(db, leave_type_id)


@router.put("/{leave_type_id}", response_model=LeaveTypeOut)
def update_leave_type(
    leave_type_id: int,
    data: LeaveTypeUpdate,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return leave_type_service.update_leave_type(db, leave_type_id, data)


@router.delete("/{leave_type_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_leave_type(
    leave_type_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    leave_type_service.delete_leave_type(db, leave_type_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
