# app/main.py
# -----------------------------------------------------------------------------
# FastAPI 엔트리포인트
# - 서버 기동 시 저장소 선택 + (database 백엔드면) 테이블 생성
# -----------------------------------------------------------------------------
from fastapi import FastAPI

from app.core import logging as _logging  # noqa: F401  (loguru 핸들러 등록)
from app.core.config import settings
from app.routers import assessment, calculator
from app.services.storage import get_storage

app = FastAPI(title=settings.APP_NAME)


@app.on_event("startup")
async def on_startup():
    await get_storage().init()


@app.on_event("shutdown")
async def on_shutdown():
    await get_storage().close()


app.include_router(calculator.router)
app.include_router(assessment.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
