"""Leaves 기능 API 라우터입니다. 휴가 신청/승인/반려/취소 요청을 서비스 레이어로 위임합니다."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from hrm.database import get_db
from hrm.middleware.auth_middleware import get_current_user
from hrm.models.user import User
from hrm.schemas.leave import LeaveBalanceOut, LeaveCreate, LeaveOut, LeaveReject, LeaveUpdate
from hrm.services import leave_service
from hrm.utils.helpers import utc_today

router = APIRouter(prefix="/api/leaves", tags=["leaves"])


@router.post("", response_model=LeaveOut, status_code=status.HTTP_201_CREATED)
def create_leave(
    data: LeaveCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return leave_service.create_leave(db, current_user.user_id, data)


@router.get("", response_model=List[LeaveOut])
def list_leaves(
    leave_status: Optional[str] = Query(None, alias="status"),
    leave_type: Optional[str] = Query(None, alias="type"),
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return leave_service.get_all_leaves(db, status=leave_status, leave_type=leave_type)


@router.get("/pending", response_model=List[LeaveOut])
def list_pending_leaves(
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return leave_service.get_pending_leaves(db)


@router.get("/user/{user_id}", response_model=List[LeaveOut])
def list_user_leaves(
    user_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return leave_service.get_user_leaves(db, user_id)


@router.get("/user/{user_id}/range", response_model=List[LeaveOut])
def list_user_leaves_in_range(
    user_id: int,
    start_date: date,
    end_date: date,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return leave_service.get_user_leaves_by_date_range(db, user_id, start_date, end_date)


@router.get("/user/{user_id}/balance", response_model=LeaveBalanceOut)
def get_leave_balance(
    user_id: int,
    year: Optional[int] = Query(None, ge=2000, le=2100),
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    year = year or utc_today().year
    balance = leave_service.get_user_leave_balance(db, user_id, year)
    return LeaveBalanceOut(user_id=user_id, year=year, balance=balance)


@router.get("/{leave_id}", response_model=LeaveOut)
def get_leave(
    leave_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return leave_service.get_leave_by_id(db, leave_id)


@router.put("/{leave_id}", response_model=LeaveOut)
def update_leave(
    leave_id: int,
    data: LeaveUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return leave_service.update_leave(db, leave_id, current_user.user_id, data)


@router.delete("/{leave_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_leave(
    leave_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    leave_service.delete_leave(db, leave_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{leave_id}/approve", response_model=LeaveOut)
def approve_leave(
    leave_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return leave_service.approve_leave(db, leave_id, current_user.user_id)


@router.post("/{leave_id}/reject", response_model=LeaveOut)
def reject_leave(
    leave_id: int,
    data: LeaveReject,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return leave_service.reject_leave(db, leave_id, current_user.user_id, data.reject_reason)


@router.post("/{leave_id}/cancel", response_model=LeaveOut)
def cancel_leave(
    leave_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return leave_service.cancel_leave(db, leave_id, current_user.user_id)
