"""휴가 신청(Leave) 요청/응답 스키마입니다."""

from datetime import date, datetime
from typing import Dict, Optional

from pydantic import BaseModel


class LeaveCreate(BaseModel):
    type: str
    start_date: date
    end_date: date
    reason: str
    description: Optional[str] = None


class LeaveUpdate(BaseModel):
    type: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    reason: Optional[str] = None
    description: Optional[str] = None


class LeaveReject(BaseModel):
    reject_reason: str = ""


class LeaveOut(BaseModel):
    leave_id: int
    user_id: int
    type: str
    status: str
    start_date: date
    end_date: date
    days: float
    reason: str
    description: Optional[str] = None
    approved_by: Optional[int] = None
    approved_at: Optional[datetime] = None
    rejected_by: Optional[int] = None
    rejected_at: Optional[datetime] = None
    reject_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LeaveBalanceOut(BaseModel):
    user_id: int
    year: int
    balance: Dict[str, float]
