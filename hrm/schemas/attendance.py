"""일자 기반 출퇴근 기록과 휴식(break) 요청/응답 스키마입니다."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel


class AttendanceCreate(BaseModel):
    work_date: Optional[date] = None


class CheckInRequest(BaseModel):
    work_date: Optional[date] = None


class CheckOutRequest(BaseModel):
    work_date: Optional[date] = None


class AttendanceUpdate(BaseModel):
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None


class BreakCreate(BaseModel):
    attendance_id: int
    start_time: datetime
    reason: str = ""


class BreakEnd(BaseModel):
    break_id: int
    end_time: datetime


class BreakUpdate(BaseModel):
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    reason: Optional[str] = None


class BreakOut(BaseModel):
    break_id: int
    attendance_id: int
    start_time: datetime
    end_time: Optional[datetime] = None
    duration: float
    reason: str
    is_ended: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AttendanceOut(BaseModel):
    attendance_id: int
    user_id: int
    work_date: date
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    total_work_hours: float
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AttendanceDetailOut(AttendanceOut):
    breaks: List[BreakOut] = []
