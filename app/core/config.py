# app/core/config.py
# -----------------------------------------------------------------------------
# 전역 설정 관리 (pydantic-settings v2)
# - .env 파일과 OS 환경변수를 읽어 Settings 객체로 제공
# - 저장소 백엔드/투자비/업종 기본값 적용 여부 등을 한곳에서 관리
# -----------------------------------------------------------------------------
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 기본
    APP_NAME: str = "AI ROI Calculator"
    ENV: str = "dev"
    DATABASE_URL: str = "sqlite+aiosqlite:///./roi.db"

    # 저장소: memory(프로세스 메모리) | database(SQLAlchemy)
    STORAGE_BACKEND: Literal["memory", "database"] = "memory"

    # ROI 계산
    INVESTMENT_COST: float = 50_000.0
    APPLY_INDUSTRY_DEFAULTS: bool = True  # 서버에서 업종 기본 개선율로 재계산

    # 로깅
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # 준비도 평가(LLM)
    OPENAI_API_KEY: str | None = None
    OPENAI_API_URL: str = "https://api.openai.com/v1/chat/completions"
    OPENAI_MODEL: str = "o3-mini"
    OPENAI_TIMEOUT: float = 60.0

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore"  # .env에 추가 필드 무시
    )


settings = Settings()
