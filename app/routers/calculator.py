# app/routers/calculator.py
# -----------------------------------------------------------------------------
# /api/calculator      : 입력 제출 -> 계산 -> 입력/결과 저장 -> id 반환
# /api/calculator/{id} : 저장된 입력 조회
# /api/results/{id}    : calculator id 기준 결과 조회
# /api/report/{id}     : 입력+결과 PDF
# /api/industries      : 업종별 기본 개선율
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, HTTPException, Response
from loguru import logger

from app.core.config import settings
from app.core.industries import INDUSTRIES, get_improvement_percentage
from app.schemas.calculator import (
    CalculatorInput,
    CalculatorInputCreate,
    IndustryDefault,
    ResultCreate,
    ResultRecord,
    SubmitResponse,
)
from app.services.calculations import apply_industry_defaults, compute_results
from app.services.report import render_report
from app.services.storage import Storage, StorageError, get_storage

router = APIRouter(prefix="/api", tags=["calculator"])


@router.post("/calculator", response_model=SubmitResponse)
async def submit_calculator(
    req: CalculatorInputCreate, storage: Storage = Depends(get_storage)
):
    logger.info(f"[Calculator] 제출: company={req.company_name} industry={req.industry}")

    # 저장되는 입력은 클라이언트 값 그대로, 계산에만 업종 기본값 적용
    inputs = apply_industry_defaults(req) if settings.APPLY_INDUSTRY_DEFAULTS else req
    summary = compute_results(inputs)

    try:
        calculator = await storage.save_calculator_inputs(req)
        results = await storage.save_results(
            ResultCreate(calculator_id=calculator.id, **summary.model_dump())
        )
    except StorageError:
        logger.exception("[Calculator] 저장 실패")
        raise HTTPException(status_code=500, detail="Internal server error")

    logger.info(
        f"[Calculator] 저장 완료 id={calculator.id} total={results.total_benefits} "
        f"roi={results.roi}"
    )
    return SubmitResponse(id=calculator.id, results=results)


@router.get("/calculator/{calculator_id}", response_model=CalculatorInput)
async def get_calculator(calculator_id: int, storage: Storage = Depends(get_storage)):
    try:
        calculator = await storage.get_calculator_by_id(calculator_id)
    except StorageError:
        logger.exception(f"[Calculator] 조회 실패 id={calculator_id}")
        raise HTTPException(status_code=500, detail="Internal server error")
    if calculator is None:
        raise HTTPException(status_code=404, detail="Calculator not found")
    return calculator


@router.get("/results/{calculator_id}", response_model=ResultRecord)
async def get_results(calculator_id: int, storage: Storage = Depends(get_storage)):
    try:
        results = await storage.get_results_by_id(calculator_id)
    except StorageError:
        logger.exception(f"[Results] 조회 실패 calculator_id={calculator_id}")
        raise HTTPException(status_code=500, detail="Internal server error")
    if results is None:
        raise HTTPException(status_code=404, detail="Results not found")
    return results


@router.get("/report/{calculator_id}")
async def get_report(calculator_id: int, storage: Storage = Depends(get_storage)):
    try:
        calculator = await storage.get_calculator_by_id(calculator_id)
        results = await storage.get_results_by_id(calculator_id)
    except StorageError:
        logger.exception(f"[Report] 조회 실패 calculator_id={calculator_id}")
        raise HTTPException(status_code=500, detail="Error generating report")
    if calculator is None or results is None:
        raise HTTPException(status_code=404, detail="Data not found")

    pdf = render_report(calculator, results)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'inline; filename="roi-report-{calculator_id}.pdf"'
        },
    )


@router.get("/industries", response_model=list[IndustryDefault])
async def list_industries():
    return [
        IndustryDefault(industry=name, improvement_pct=get_improvement_percentage(name))
        for name in INDUSTRIES
    ]
