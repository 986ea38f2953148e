"""일자 기반 출퇴근 기록과 휴식(break) 모델 정의입니다."""

from sqlalchemy import (
    DDL, Column, Integer, Float, Date, DateTime, String, ForeignKey, Index, UniqueConstraint, event,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from hrm.database import Base

ATTENDANCE_ABSENT = "absent"
ATTENDANCE_PRESENT = "present"
ATTENDANCE_COMPLETED = "completed"


class Attendance(Base):
    __tablename__ = "attendances"

    attendance_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    work_date = Column(Date, nullable=False)
    check_in_time = Column(DateTime(timezone=True), nullable=True)
    check_out_time = Column(DateTime(timezone=True), nullable=True)
    total_work_hours = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="attendances")
    breaks = relationship(
        "Break",
        back_populates="attendance",
        order_by="Break.start_time",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        UniqueConstraint("user_id", "work_date", name="uq_attendance_user_date"),
        Index("idx_attendance_work_date", "work_date"),
    )

    @property
    def status(self) -> str:
        # Derived on every read; never persisted.
        if self.check_in_time is None:
            return ATTENDANCE_ABSENT
        if self.check_out_time is None:
            return ATTENDANCE_PRESENT
        return ATTENDANCE_COMPLETED

    @property
    def is_checked_in(self) -> bool:
        return self.check_in_time is not None

    @property
    def is_checked_out(self) -> bool:
        return self.check_out_time is not None


class Break(Base):
    __tablename__ = "breaks"

    break_id = Column(Integer, primary_key=True, autoincrement=True)
    attendance_id = Column(Integer, ForeignKey("attendances.attendance_id", ondelete="CASCADE"), nullable=False)
    start_time = Column(DateTime(timezone=True), nullable=False)
    end_time = Column(DateTime(timezone=True), nullable=True)
    duration = Column(Float, nullable=False, default=0.0)  # minutes
    reason = Column(String(255), nullable=False, default="")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    attendance = relationship("Attendance", back_populates="breaks")

    __table_args__ = (
        Index("idx_break_attendance", "attendance_id"),
    )

    @property
    def is_ended(self) -> bool:
        return self.end_time is not None


# At most one open break per attendance. MySQL has no partial indexes, so the
# index is only created where the dialect supports a WHERE clause.
event.listen(
    Break.__table__,
    "after_create",
    DDL(
        "CREATE UNIQUE INDEX uq_break_open_per_attendance "
        "ON breaks (attendance_id) WHERE end_time IS NULL"
    ).execute_if(dialect=("sqlite", "postgresql")),
)
