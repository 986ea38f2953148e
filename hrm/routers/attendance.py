"""Attendance 기능 API 라우터입니다. 출퇴근 요청을 검증하고 서비스 레이어로 위임합니다."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from hrm.database import get_db
from hrm.middleware.auth_middleware import get_current_user
from hrm.models.user import User
from hrm.schemas.attendance import (
    AttendanceCreate,
    AttendanceDetailOut,
    AttendanceOut,
    AttendanceUpdate,
    CheckInRequest,
    CheckOutRequest,
)
from hrm.services import attendance_service
from hrm.utils.helpers import utc_today

router = APIRouter(prefix="/api/attendance", tags=["attendance"])


@router.post("/checkin", response_model=AttendanceOut)
def check_in(
    data: Optional[CheckInRequest] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    work_date = (data.work_date if data else None) or utc_today()
    return attendance_service.check_in(db, current_user.user_id, work_date)


@router.post("/checkout", response_model=AttendanceOut)
def check_out(
    data: Optional[CheckOutRequest] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    work_date = (data.work_date if data else None) or utc_today()
    return attendance_service.check_out(db, current_user.user_id, work_date)


@router.post("", response_model=AttendanceOut, status_code=status.HTTP_201_CREATED)
def create_attendance(
    data: AttendanceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return attendance_service.create_attendance(db, current_user.user_id, data.work_date or utc_today())


@router.get("", response_model=List[AttendanceOut])
def list_attendance(
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return attendance_service.get_all_attendance(db)


@router.get("/user/{user_id}", response_model=AttendanceOut)
def get_user_attendance(
    user_id: int,
    work_date: Optional[date] = None,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return attendance_service.get_user_attendance(db, user_id, work_date or utc_today())


@router.get("/user/{user_id}/range", response_model=List[AttendanceOut])
def get_user_attendance_range(
    user_id: int,
    start_date: date,
    end_date: date,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return attendance_service.get_user_attendance_range(db, user_id, start_date, end_date)


@router.get("/user/{user_id}/recent", response_model=List[AttendanceOut])
def get_recent_attendance(
    user_id: int,
    limit: int = Query(7, ge=1, le=100),
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return attendance_service.get_recent_attendance(db, user_id, limit)


@router.get("/{attendance_id}", response_model=AttendanceDetailOut)
def get_attendance(
    attendance_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return attendance_service.get_attendance_by_id(db, attendance_id)


@router.put("/{attendance_id}", response_model=AttendanceOut)
def update_attendance(
    attendance_id: int,
    data: AttendanceUpdate,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    return attendance_service.update_attendance(
        db,
        attendance_id,
        check_in_time=data.check_in_time,
        check_out_time=data.check_out_time,
    )


@router.delete("/{attendance_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_attendance(
    attendance_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(get_current_user),
):
    attendance_service.delete_attendance(db, attendance_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
