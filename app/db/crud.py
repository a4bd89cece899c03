# app/db/crud.py
# -----------------------------------------------------------------------------
# 읽기/쓰기 유틸 함수 모음
# - 계산기 입력/결과 insert (id는 PK 자동 증가)
# - id 조회, calculator_id 기준 결과 조회
# -----------------------------------------------------------------------------
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import CalculatorInputRow, ResultRow


async def insert_calculator_input(db: AsyncSession, data: dict) -> CalculatorInputRow:
    row = CalculatorInputRow(**data)
    db.add(row)
    await db.commit()
    await db.refresh(row)
    return row


async def insert_result(db: AsyncSession, data: dict) -> ResultRow:
    row = ResultRow(**data)
    db.add(row)
    await db.commit()
    await db.refresh(row)
    return row


async def get_calculator_input(
    db: AsyncSession, calculator_id: int
) -> CalculatorInputRow | None:
    return await db.get(CalculatorInputRow, calculator_id)


async def get_result_by_calculator_id(
    db: AsyncSession, calculator_id: int
) -> ResultRow | None:
    """계산기 1건당 결과 1건이 정상, 중복 저장 시 가장 먼저 저장된 결과"""
    stmt = (
        select(ResultRow)
        .where(ResultRow.calculator_id == calculator_id)
        .order_by(ResultRow.id)
        .limit(1)
    )
    res = await db.execute(stmt)
    return res.scalar_one_or_none()
