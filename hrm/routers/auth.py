"""Auth 기능 API 라우터입니다. 회원가입/로그인 요청을 검증하고 서비스 레이어로 위임합니다."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from hrm.database import get_db
from hrm.schemas.user import SignInRequest, TokenResponse, UserCreate, UserOut
from hrm.services import user_service
from hrm.services.auth_service import create_access_token
from hrm.middleware.auth_middleware import get_current_user
from hrm.models.user import User

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def signup(data: UserCreate, db: Session = Depends(get_db)):
    return user_service.sign_up(db, data)


@router.post("/signin", response_model=TokenResponse)
def signin(request: SignInRequest, db: Session = Depends(get_db)):
    user = user_service.sign_in(db, request.email, request.password)
    token = create_access_token(user.user_id, user.email)
    return TokenResponse(access_token=token, user=UserOut.model_validate(user))


@router.get("/me", response_model=UserOut)
def me(current_user: User = Depends(get_current_user)):
    return current_user
