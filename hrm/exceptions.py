"""도메인 예외 계층입니다. 실패 조건마다 고유한 예외 클래스와 오류 코드를 가집니다."""

from fastapi import HTTPException, status


class HRMError(HTTPException):
    """Base error for business rule failures.

    Subclasses pin the HTTP status of their kind and carry a stable ``code``
    that the API exposes next to the human readable ``detail``.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    code = "hrm_error"
    message = "request failed"

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=self.status_code, detail=detail or self.message)


class NotFoundError(HRMError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    message = "resource not found"


class ConflictError(HRMError):
    status_code = status.HTTP_409_CONFLICT
    code = "conflict"
    message = "resource state conflict"


class InvalidInputError(HRMError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid_input"
    message = "invalid input"


class UnauthorizedError(HRMError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "unauthorized"
    message = "unauthorized access"


class BusinessRuleError(HRMError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "business_rule_violation"
    message = "business rule violation"


# Not found
class UserNotFound(NotFoundError):
    code = "user_not_found"
    message = "user not found"


class AttendanceNotFound(NotFoundError):
    code = "attendance_not_found"
    message = "attendance not found"


class BreakNotFound(NotFoundError):
    code = "break_not_found"
    message = "break not found"


class LeaveNotFound(NotFoundError):
    code = "leave_not_found"
    message = "leave not found"


class LeaveTypeNotFound(NotFoundError):
    code = "leave_type_not_found"
    message = "leave type not found"


# Conflict
class AlreadyCheckedIn(ConflictError):
    code = "already_checked_in"
    message = "already checked in for this date"


class AlreadyCheckedOut(ConflictError):
    code = "already_checked_out"
    message = "already checked out for this date"


class BreakInProgress(ConflictError):
    code = "break_in_progress"
    message = "break already in progress"


class BreakAlreadyEnded(ConflictError):
    code = "break_already_ended"
    message = "break already ended"


class LeaveAlreadyApproved(ConflictError):
    code = "leave_already_approved"
    message = "leave is already approved"


class LeaveAlreadyRejected(ConflictError):
    code = "leave_already_rejected"
    message = "leave is already rejected"


class LeaveNotPending(ConflictError):
    code = "leave_not_pending"
    message = "only pending leaves can be modified"


class UserAlreadyExists(ConflictError):
    code = "user_already_exists"
    message = "user already exists"


class LeaveTypeAlreadyExists(ConflictError):
    code = "leave_type_already_exists"
    message = "leave type already exists"


# Invalid input
class InvalidUserID(InvalidInputError):
    code = "invalid_user_id"
    message = "invalid user ID"


class InvalidDate(InvalidInputError):
    code = "invalid_date"
    message = "invalid date"


class InvalidDateRange(InvalidInputError):
    code = "invalid_date_range"
    message = "start date must be before or equal to end date"


class NotCheckedIn(InvalidInputError):
    code = "not_checked_in"
    message = "not checked in yet"


class InvalidAttendanceTime(InvalidInputError):
    code = "invalid_attendance_time"
    message = "check-out time cannot be before check-in time"


class InvalidBreakTime(InvalidInputError):
    code = "invalid_break_time"
    message = "invalid break time"


class InvalidLeaveType(InvalidInputError):
    code = "invalid_leave_type"
    message = "invalid leave type"


class LeaveTypeInactive(InvalidInputError):
    code = "leave_type_inactive"
    message = "leave type is not active"


class InvalidLeaveStatus(InvalidInputError):
    code = "invalid_leave_status"
    message = "invalid leave status"


class ReasonRequired(InvalidInputError):
    code = "reason_required"
    message = "reason is required"


class LeaveDateInPast(InvalidInputError):
    code = "leave_date_in_past"
    message = "leave date cannot be in the past"


class InvalidName(InvalidInputError):
    code = "invalid_name"
    message = "name cannot be empty"


class InvalidPassword(InvalidInputError):
    code = "invalid_password"
    message = "password must be at least 6 characters"


# Authorization
class Unauthorized(UnauthorizedError):
    code = "unauthorized"
    message = "unauthorized access"


class InvalidCredentials(HRMError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "invalid_credentials"
    message = "invalid credentials"


# Business rule violations
class LeaveOverlap(BusinessRuleError):
    code = "leave_overlap"
    message = "leave dates overlap with existing leave"


class CannotCancelApprovedLeave(BusinessRuleError):
    code = "cannot_cancel_leave"
    message = "leave can no longer be cancelled"


class InsufficientLeaveBalance(BusinessRuleError):
    # Reserved: balances are reported but not enforced yet.
    code = "insufficient_leave_balance"
    message = "insufficient leave balance"


class LeaveTypeInUse(BusinessRuleError):
    code = "leave_type_in_use"
    message = "leave type is referenced by existing leaves"


class UserInUse(BusinessRuleError):
    code = "user_in_use"
    message = "user is referenced by attendance or leave records"
