# app/routers/assessment.py
# -----------------------------------------------------------------------------
# /api/assessment/analyze : 준비도 설문 -> LLM 평가
# - calculatorId가 있으면 저장된 입력의 업종을 컨텍스트로 사용
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from app.schemas.assessment import AssessmentRequest, AssessmentResult
from app.services.assessment import AssessmentError, analyze_assessment
from app.services.storage import Storage, StorageError, get_storage

router = APIRouter(prefix="/api/assessment", tags=["assessment"])


async def resolve_industry_context(req: AssessmentRequest, storage: Storage) -> str:
    industry = req.responses.get("industry") or "unspecified"
    if req.calculator_id is None:
        return industry
    try:
        calculator = await storage.get_calculator_by_id(req.calculator_id)
    except StorageError as e:
        # 업종 컨텍스트는 부가 정보 -> 평가는 계속 진행
        logger.warning(f"[Assessment] calculator 조회 실패 id={req.calculator_id}: {e}")
        return industry
    return calculator.industry if calculator else industry


@router.post("/analyze", response_model=AssessmentResult)
async def analyze(req: AssessmentRequest, storage: Storage = Depends(get_storage)):
    industry = await resolve_industry_context(req, storage)
    try:
        return await analyze_assessment(req.responses, industry)
    except AssessmentError:
        logger.exception("[Assessment] 평가 실패")
        raise HTTPException(status_code=500, detail="Failed to analyze assessment")
