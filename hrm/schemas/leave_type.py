"""휴가 유형 카탈로그 요청/응답 스키마입니다."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from hrm.schemas.leave import LeaveOut


class LeaveTypeBase(BaseModel):
    type: str
    name: str
    description: Optional[str] = None
    default_days_per_year: int = 0
    is_active: bool = True
    requires_approval: bool = True
    color: str = "#007bff"
    icon: Optional[str] = None


class LeaveTypeCreate(LeaveTypeBase):
    pass


class LeaveTypeUpdate(BaseModel):
    type: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    default_days_per_year: Optional[int] = None
    is_active: Optional[bool] = None
    requires_approval: Optional[bool] = None
    color: Optional[str] = None
    icon: Optional[str] = None


class LeaveTypeOut(LeaveTypeBase):
    leave_type_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LeaveTypeUsageOut(LeaveTypeOut):
    leave_count: int
    leaves: List[LeaveOut] = []
