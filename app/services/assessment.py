# app/services/assessment.py
# -----------------------------------------------------------------------------
# AI 준비도 평가: 설문 응답 -> LLM(OpenAI 호환 chat completions) -> 점수 JSON
# - 외부 API 호출은 httpx.AsyncClient, 재시도 없음
# - 실패(키 없음/HTTP 오류/JSON 파싱 실패)는 AssessmentError
# -----------------------------------------------------------------------------
from __future__ import annotations

import json
from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from app.core.config import settings
from app.schemas.assessment import AssessmentResult

SYSTEM_PROMPT = (
    "You are an expert AI readiness assessment analyst. Provide detailed, "
    "actionable insights based on the assessment data. Score readiness for each "
    "dimension and overall, compare against maturity scales, and finish with "
    "tailored strengths, improvement areas and next-step recommendations."
)

READINESS_LEVELS = (
    "Not Ready",
    "Early Stage",
    "Developing",
    "Advanced",
    "Fully Prepared",
)


class AssessmentError(RuntimeError):
    pass


def build_prompt(responses: dict[str, Any], industry_context: str) -> str:
    responses_json = json.dumps(responses or {}, indent=2, ensure_ascii=False)
    use_case = (responses or {}).get("useCaseVision") or "No specific use cases provided"
    levels = ", ".join(f"'{x}'" for x in READINESS_LEVELS)
    return f"""As an AI readiness assessment expert, analyze the following assessment responses and provide a detailed evaluation of the organization's AI readiness. Score their readiness on a scale of 1-10 and provide specific recommendations for improvement.

Assessment Responses:
{responses_json}

Industry Context:
The organization is in the {industry_context} industry.

Use Case Vision:
The organization's specific automation goals: {use_case}

Please analyze the responses where each answer is scored 1-4, with 4 being the highest. Consider the specific challenges and opportunities of their industry. Also take into account the specific use case that they want to explore and provide advice about that. Mention common challenges faced in their industry. Convert these scores to percentages where:
- Score of 1 = 25%
- Score of 2 = 50%
- Score of 3 = 75%
- Score of 4 = 100%

Please provide the analysis in the following JSON format below:
{{
  "overall_score": number (0-100),
  "readiness_level": "string (one of: {levels})",
  "dimension_scores": {{
    "data_infrastructure": number (0-100),
    "process_automation": number (0-100),
    "tech_capabilities": number (0-100)
  }},
  "key_strengths": ["string"],
  "improvement_areas": ["string"],
  "recommendations": ["string"]
}}"""


def parse_completion(data: dict) -> AssessmentResult:
    try:
        content = data["choices"][0]["message"]["content"]
        return AssessmentResult.model_validate(json.loads(content))
    except (KeyError, IndexError, TypeError, json.JSONDecodeError, ValidationError) as e:
        raise AssessmentError(f"LLM 응답 파싱 실패: {e}") from e


async def analyze_assessment(
    responses: dict[str, Any],
    industry_context: str,
    client: httpx.AsyncClient | None = None,
) -> AssessmentResult:
    if not settings.OPENAI_API_KEY:
        raise AssessmentError("OPENAI_API_KEY가 설정되어 있지 않습니다.")

    body = {
        "model": settings.OPENAI_MODEL,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_prompt(responses, industry_context)},
        ],
        "response_format": {"type": "json_object"},
    }
    headers = {"Authorization": f"Bearer {settings.OPENAI_API_KEY}"}

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=settings.OPENAI_TIMEOUT)
    try:
        r = await client.post(settings.OPENAI_API_URL, json=body, headers=headers)
        r.raise_for_status()
        data = r.json()
    except httpx.HTTPError as e:
        logger.error(f"[Assessment] HTTPError: {e}")
        raise AssessmentError(f"LLM 호출 실패: {e}") from e
    except ValueError as e:
        raise AssessmentError(f"LLM 응답이 JSON이 아님: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    result = parse_completion(data)
    logger.info(
        f"[Assessment] industry={industry_context} score={result.overall_score} "
        f"level={result.readiness_level}"
    )
    return result
