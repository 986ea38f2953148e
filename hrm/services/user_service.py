"""User Service 도메인 서비스 레이어입니다. 계정 생성/인증과 사용자 조회 규칙을 캡슐화합니다."""

import logging

from sqlalchemy.orm import Session

from hrm.exceptions import (
    InvalidCredentials,
    InvalidName,
    InvalidPassword,
    InvalidUserID,
    UserAlreadyExists,
    UserInUse,
    UserNotFound,
    Unauthorized,
)
from hrm.models.user import User
from hrm.repositories import UserRepository
from hrm.schemas.user import UserCreate, UserUpdate
from hrm.services.auth_service import hash_password, verify_password

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

user_repo = UserRepository()


def _normalize_email(email: str) -> str:
    return str(email or "").strip().lower()


def _validate_name(name: str) -> str:
    text = (name or "").strip()
    if not text:
        raise InvalidName()
    return text


def _validate_password(password: str) -> str:
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise InvalidPassword()
    return password


def user_exists(db: Session, user_id: int) -> bool:
    if user_id is None or user_id <= 0:
        return False
    return user_repo.exists(db, user_id)


def get_user(db: Session, user_id: int) -> User:
    if user_id is None or user_id <= 0:
        raise InvalidUserID()
    user = user_repo.get_by_id(db, user_id)
    if not user:
        raise UserNotFound()
    return user


def list_users(db: Session, limit: int = 10, offset: int = 0):
    return user_repo.list_users(db, limit=limit, offset=offset)


def sign_up(db: Session, data: UserCreate) -> User:
    name = _validate_name(data.name)
    password = _validate_password(data.password)
    email = _normalize_email(data.email)

    if user_repo.get_by_email(db, email):
        logger.warning("[user] sign-up rejected, email already registered: %s", email)
        raise UserAlreadyExists()

    user = User(name=name, email=email, password_hash=hash_password(password))
    user_repo.add(db, user)
    db.commit()
    db.refresh(user)
    logger.info("[user] registered user_id=%s", user.user_id)
    return user


def sign_in(db: Session, email: str, password: str) -> User:
    user = user_repo.get_by_email(db, _normalize_email(email))
    # Unknown email and wrong password fail the same way.
    if not user or not verify_password(password, user.password_hash):
        logger.warning("[user] sign-in failed for %s", email)
        raise InvalidCredentials()
    return user


def update_user(db: Session, user_id: int, data: UserUpdate, current_user: User) -> User:
    user = get_user(db, user_id)
    if user.user_id != current_user.user_id:
        raise Unauthorized("users can only update their own profile")

    payload = data.model_dump(exclude_unset=True)
    if payload.get("name") is not None:
        user.name = _validate_name(payload["name"])
    if payload.get("email") is not None:
        email = _normalize_email(payload["email"])
        existing = user_repo.get_by_email(db, email)
        if existing and existing.user_id != user.user_id:
            raise UserAlreadyExists("email is already in use")
        user.email = email
    if payload.get("password") is not None:
        user.password_hash = hash_password(_validate_password(payload["password"]))

    db.commit()
    db.refresh(user)
    logger.info("[user] updated user_id=%s", user.user_id)
    return user


def delete_user(db: Session, user_id: int, current_user: User) -> None:
    user = get_user(db, user_id)
    if user.user_id != current_user.user_id:
        raise Unauthorized("users can only delete their own account")

    references = user_repo.count_references(db, user.user_id)
    blockers = [f"{label} {count}" for label, count in references.items() if count > 0]
    if blockers:
        logger.warning("[user] delete blocked for user_id=%s: %s", user.user_id, ", ".join(blockers))
        raise UserInUse(f"user is still referenced by: {', '.join(blockers)}")

    user_repo.delete(db, user)
    db.commit()
    logger.info("[user] deleted user_id=%s", user_id)
