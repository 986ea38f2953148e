"""Breaks 기능 API 라우터입니다. 휴식 시작/종료 요청을 서비스 레이어로 위임합니다."""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from hrm.database import get_db
from hrm.middleware.auth_middleware import get_current_user
from hrm.models.user import User
from hrm.schemas.attendance import BreakCreate, BreakEnd, BreakOut, BreakUpdate
from hrm.services import break_service

router = APIRouter(prefix="/api/breaks", tags=["breaks"])


@router.post("", response_model=BreakOut, status_code=status.HTTP_201_CREATED)
def create_break(
    data: BreakCreate,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return break_service.create_break(db, data.attendance_id, data.start_time, data.reason)


@router.put("/end", response_model=BreakOut)
def end_break(
    data: BreakEnd,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return break_service.end_break(db, data.break_id, data.end_time)


@router.get("", response_model=List[BreakOut])
def list_breaks(
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return break_service.get_all_breaks(db)


@router.get("/attendance/{attendance_id}", response_model=List[BreakOut])
def list_breaks_for_attendance(
    attendance_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return break_service.get_breaks_by_attendance_id(db, attendance_id)


@router.get("/{break_id}", response_model=BreakOut)
def get_break(
    break_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return break_service.get_break_by_id(db, break_id)


@router.put("/{break_id}", response_model=BreakOut)
def update_break(
    break_id: int,
    data: BreakUpdate,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return break_service.update_break(
        db,
        break_id,
        start_time=data.start_time,
        end_time=data.end_time,
        reason=data.reason,
    )


@router.delete("/{break_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_break(
    break_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    break_service.delete_break(db, break_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
