"""휴가 신청(Leave)과 휴가 유형(LeaveType) 모델 정의입니다."""

from sqlalchemy import Column, Integer, Float, String, Text, Date, DateTime, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from hrm.database import Base

LEAVE_TYPE_SICK = "sick"
LEAVE_TYPE_VACATION = "vacation"
LEAVE_TYPE_PERSONAL = "personal"
LEAVE_TYPE_MATERNITY = "maternity"
LEAVE_TYPE_PATERNITY = "paternity"
LEAVE_TYPE_OTHER = "other"

LEAVE_TYPES = (
    LEAVE_TYPE_SICK,
    LEAVE_TYPE_VACATION,
    LEAVE_TYPE_PERSONAL,
    LEAVE_TYPE_MATERNITY,
    LEAVE_TYPE_PATERNITY,
    LEAVE_TYPE_OTHER,
)

LEAVE_STATUS_PENDING = "pending"
LEAVE_STATUS_APPROVED = "approved"
LEAVE_STATUS_REJECTED = "rejected"
LEAVE_STATUS_CANCELLED = "cancelled"

LEAVE_STATUSES = (
    LEAVE_STATUS_PENDING,
    LEAVE_STATUS_APPROVED,
    LEAVE_STATUS_REJECTED,
    LEAVE_STATUS_CANCELLED,
)

# Leaves in these states never block a new request for the same dates.
INACTIVE_LEAVE_STATUSES = (LEAVE_STATUS_CANCELLED, LEAVE_STATUS_REJECTED)


class LeaveType(Base):
    __tablename__ = "leave_types"

    leave_type_id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(20), unique=True, nullable=False)
    name = Column(String(100), nullable=False)
    description = Column(Text)
    default_days_per_year = Column(Integer, default=0)
    is_active = Column(Boolean, default=True)
    requires_approval = Column(Boolean, default=True)
    color = Column(String(7), default="#007bff")
    icon = Column(String(50))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    leaves = relationship(
        "Leave",
        primaryjoin="LeaveType.type == foreign(Leave.type)",
        viewonly=True,
    )


class Leave(Base):
    __tablename__ = "leaves"

    leave_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    type = Column(
        String(20),
        ForeignKey("leave_types.type", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
    )
    status = Column(String(20), nullable=False, default=LEAVE_STATUS_PENDING)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    days = Column(Float, nullable=False, default=0.0)
    reason = Column(Text, nullable=False)
    description = Column(Text)
    approved_by = Column(Integer, ForeignKey("users.user_id"), nullable=True)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    rejected_by = Column(Integer, ForeignKey("users.user_id"), nullable=True)
    rejected_at = Column(DateTime(timezone=True), nullable=True)
    reject_reason = Column(Text)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", foreign_keys=[user_id], back_populates="leaves")
    approver = relationship("User", foreign_keys=[approved_by])
    rejecter = relationship("User", foreign_keys=[rejected_by])

    __table_args__ = (
        Index("idx_leave_user_dates", "user_id", "start_date", "end_date"),
        Index("idx_leave_status", "status"),
    )
