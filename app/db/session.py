# app/db/session.py
# -----------------------------------------------------------------------------
# SQLAlchemy Async 엔진/세션/베이스
# - DatabaseStorage가 작업 단위로 세션을 연다
# - SQLite 기본, 추후 PostgreSQL로 교체 시 URL만 변경
# -----------------------------------------------------------------------------
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from app.core.config import settings

Base = declarative_base()


def make_engine(url: str = settings.DATABASE_URL) -> AsyncEngine:
    engine = create_async_engine(url, echo=False, future=True)

    if url.startswith("sqlite"):
        # SQLite는 연결마다 FK 검사를 켜야 함
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_conn, _record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def make_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
