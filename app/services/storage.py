# app/services/storage.py
# -----------------------------------------------------------------------------
# 계산기 입력/결과 저장소
# - Storage: 공통 인터페이스 (저장 시 id 부여, 조회 실패는 None)
# - MemStorage: 프로세스 메모리 (dict + 단조 증가 카운터)
# - DatabaseStorage: SQLAlchemy Async (작업 단위 세션)
# - build_storage(): 기동 시 설정(STORAGE_BACKEND)으로 1회 선택
# -----------------------------------------------------------------------------
from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.config import Settings, settings
from app.db import crud
from app.db.session import create_tables, make_engine, make_sessionmaker
from app.schemas.calculator import (
    CalculatorInput,
    CalculatorInputCreate,
    ResultCreate,
    ResultRecord,
)


class StorageError(RuntimeError):
    """저장소 자체의 실패 (DB 연결 불가 등)"""


class Storage(ABC):
    async def init(self) -> None:
        """기동 시 1회 호출 (테이블 생성 등)"""

    async def close(self) -> None:
        """종료 시 1회 호출"""

    @abstractmethod
    async def save_calculator_inputs(
        self, payload: CalculatorInputCreate
    ) -> CalculatorInput: ...

    @abstractmethod
    async def save_results(self, payload: ResultCreate) -> ResultRecord: ...

    @abstractmethod
    async def get_calculator_by_id(self, calculator_id: int) -> CalculatorInput | None: ...

    @abstractmethod
    async def get_results_by_id(self, calculator_id: int) -> ResultRecord | None:
        """결과 자체 id가 아니라 calculator_id 기준 조회"""


class MemStorage(Storage):
    def __init__(self) -> None:
        self._calculators: dict[int, CalculatorInput] = {}
        self._results: dict[int, ResultRecord] = {}
        self._next_calc_id = 1
        self._next_result_id = 1
        self._lock = threading.Lock()

    async def save_calculator_inputs(
        self, payload: CalculatorInputCreate
    ) -> CalculatorInput:
        with self._lock:
            calc_id = self._next_calc_id
            self._next_calc_id += 1
            calculator = CalculatorInput(id=calc_id, **payload.model_dump())
            self._calculators[calc_id] = calculator
        return calculator.model_copy()

    async def save_results(self, payload: ResultCreate) -> ResultRecord:
        with self._lock:
            if payload.calculator_id not in self._calculators:
                raise StorageError(f"calculator {payload.calculator_id} 없음")
            result_id = self._next_result_id
            self._next_result_id += 1
            result = ResultRecord(id=result_id, **payload.model_dump())
            self._results[result_id] = result
        return result.model_copy()

    async def get_calculator_by_id(self, calculator_id: int) -> CalculatorInput | None:
        found = self._calculators.get(calculator_id)
        return found.model_copy() if found else None

    async def get_results_by_id(self, calculator_id: int) -> ResultRecord | None:
        # dict는 삽입 순서 유지 -> 가장 먼저 저장된 결과
        for result in self._results.values():
            if result.calculator_id == calculator_id:
                return result.model_copy()
        return None


class DatabaseStorage(Storage):
    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._sessionmaker = make_sessionmaker(engine)

    async def init(self) -> None:
        try:
            await create_tables(self.engine)
        except SQLAlchemyError as e:
            raise StorageError(f"테이블 생성 실패: {e}") from e

    async def close(self) -> None:
        await self.engine.dispose()

    async def save_calculator_inputs(
        self, payload: CalculatorInputCreate
    ) -> CalculatorInput:
        try:
            async with self._sessionmaker() as db:
                row = await crud.insert_calculator_input(db, payload.model_dump())
                return CalculatorInput.model_validate(row)
        except SQLAlchemyError as e:
            raise StorageError(f"calculator 저장 실패: {e}") from e

    async def save_results(self, payload: ResultCreate) -> ResultRecord:
        try:
            async with self._sessionmaker() as db:
                row = await crud.insert_result(db, payload.model_dump())
                return ResultRecord.model_validate(row)
        except SQLAlchemyError as e:
            raise StorageError(f"results 저장 실패: {e}") from e

    async def get_calculator_by_id(self, calculator_id: int) -> CalculatorInput | None:
        try:
            async with self._sessionmaker() as db:
                row = await crud.get_calculator_input(db, calculator_id)
                return CalculatorInput.model_validate(row) if row else None
        except SQLAlchemyError as e:
            raise StorageError(f"calculator 조회 실패: {e}") from e

    async def get_results_by_id(self, calculator_id: int) -> ResultRecord | None:
        try:
            async with self._sessionmaker() as db:
                row = await crud.get_result_by_calculator_id(db, calculator_id)
                return ResultRecord.model_validate(row) if row else None
        except SQLAlchemyError as e:
            raise StorageError(f"results 조회 실패: {e}") from e


def build_storage(cfg: Settings = settings) -> Storage:
    if cfg.STORAGE_BACKEND == "database":
        logger.info(f"[Storage] database 백엔드 사용: {cfg.DATABASE_URL}")
        return DatabaseStorage(make_engine(cfg.DATABASE_URL))
    logger.info("[Storage] memory 백엔드 사용")
    return MemStorage()


_storage: Storage | None = None


def get_storage() -> Storage:
    """FastAPI Depends(get_storage)로 주입. 최초 호출 시 1회 생성"""
    global _storage
    if _storage is None:
        _storage = build_storage()
    return _storage
