# app/core/industries.py
# -----------------------------------------------------------------------------
# 업종별 기본 AI 개선율(%) 테이블
# - 제출 경로(서버 재계산)와 표시용 엔드포인트가 이 모듈 하나만 참조
# - 대소문자 구분 정확 일치, 없으면 DEFAULT_IMPROVEMENT_PCT
# -----------------------------------------------------------------------------

DEFAULT_IMPROVEMENT_PCT = 20.0

INDUSTRY_IMPROVEMENT_PCT: dict[str, float] = {
    "Retail": 20.0,
    "E-commerce": 25.0,
    "Technology": 32.5,
    "Manufacturing": 22.5,
    "Healthcare": 17.5,
    "Education": 15.0,
    "Financial Services": 27.5,
    "Professional Services": 30.0,
}

# 폼 선택지 순서 ("Other"는 테이블에 없으므로 기본값)
INDUSTRIES = (*INDUSTRY_IMPROVEMENT_PCT, "Other")


def get_improvement_percentage(industry: str | None) -> float:
    return INDUSTRY_IMPROVEMENT_PCT.get(industry, DEFAULT_IMPROVEMENT_PCT)
