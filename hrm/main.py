"""FastAPI 애플리케이션 진입점. 로깅, 미들웨어, 예외 핸들러, API 라우터를 등록합니다."""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from hrm.config import settings
from hrm.database import Base, SessionLocal, engine
from hrm.exceptions import HRMError
import hrm.models  # noqa: F401 - 모델 import로 metadata 등록
from hrm.routers import attendance, auth, breaks, leave_types, leaves, users
from hrm.services import leave_type_service

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="근태(출퇴근/휴식)와 휴가 신청을 관리하는 HRM REST API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %s (%.1fms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


app.middleware("http")(log_requests)


@app.exception_handler(HRMError)
async def hrm_error_handler(request: Request, exc: HRMError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error": exc.code},
    )


# Register all routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(attendance.router)
app.include_router(breaks.router)
app.include_router(leaves.router)
app.include_router(leave_types.router)


@app.on_event("startup")
def ensure_schema():
    # 누락된 테이블을 생성하고 비어 있는 휴가 유형 카탈로그를 채웁니다.
    Base.metadata.create_all(bind=engine)
    if not settings.SEED_LEAVE_TYPES:
        return
    db = SessionLocal()
    try:
        inserted = leave_type_service.seed_default_leave_types(db)
        if inserted:
            logger.info("seeded %s leave types on startup", inserted)
    finally:
        db.close()


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": settings.APP_NAME}
