"""서비스 레이어 패키지 초기화 모듈입니다."""

from hrm.services import (
    auth_service,
    user_service,
    attendance_service,
    break_service,
    leave_type_service,
    leave_service,
)
