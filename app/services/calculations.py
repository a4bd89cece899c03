# app/services/calculations.py
# -----------------------------------------------------------------------------
# AI 도입 효과(연간 금액) / ROI / 회수기간 계산
# - 모든 함수는 순수 함수, 부수효과 없음
# - 인자 중 하나라도 0/None/NaN이면 0 반환 (예외 대신 센티널)
# -----------------------------------------------------------------------------
from __future__ import annotations

import math

from app.core.config import settings
from app.core.industries import get_improvement_percentage
from app.schemas.calculator import BenefitSummary, CalculatorInputCreate

HOURLY_RATE = 50  # 콘텐츠/상품설명 작업 평균 시급 가정
DEFAULT_INVESTMENT_COST = 50_000.0
NO_RETURN_ROI = -100.0
NEVER_PAYS_BACK = 999.0


def _missing(*values) -> bool:
    return any(
        not v or (isinstance(v, float) and math.isnan(v)) for v in values
    )


def calculate_email_revenue(
    list_size, current_conversion_rate, average_order_value, improvement_pct
) -> float:
    """전환율 개선으로 늘어나는 월 구매자 수 x 객단가, 연환산."""
    if _missing(list_size, current_conversion_rate, average_order_value, improvement_pct):
        return 0.0
    additional_conversion = (current_conversion_rate / 100) * (improvement_pct / 100)
    return list_size * additional_conversion * average_order_value * 12


def calculate_social_savings(monthly_spend, hours, improvement_pct) -> float:
    """콘텐츠 예산 절감 + 제작 인건비 절감, 연환산."""
    if _missing(monthly_spend, hours, improvement_pct):
        return 0.0
    rate = improvement_pct / 100
    monthly_savings = monthly_spend * rate + hours * HOURLY_RATE * rate
    return monthly_savings * 12


def calculate_chatbot_savings(tickets, cost_per_ticket, improvement_pct) -> float:
    """챗봇이 흡수하는 문의 처리 비용, 연환산."""
    if _missing(tickets, cost_per_ticket, improvement_pct):
        return 0.0
    return tickets * cost_per_ticket * (improvement_pct / 100) * 12


def calculate_product_savings(products, minutes_per_update, improvement_pct) -> float:
    """
    상품 설명 작성 시간 절감액.
    전체 SKU 기준 총량이므로 x12 연환산을 하지 않는다 (다른 세 항목과 다름).
    """
    if _missing(products, minutes_per_update, improvement_pct):
        return 0.0
    total_hours = products * (minutes_per_update / 60)
    return total_hours * HOURLY_RATE * (improvement_pct / 100)


def calculate_roi(
    total_benefit, investment_cost: float = DEFAULT_INVESTMENT_COST
) -> float:
    if _missing(total_benefit):
        return NO_RETURN_ROI
    return ((total_benefit - investment_cost) / investment_cost) * 100


def calculate_payback_period(
    total_benefit, investment_cost: float = DEFAULT_INVESTMENT_COST
) -> float:
    """투자비 회수까지 걸리는 개월 수. 효과가 없으면 999(사실상 회수 불가)."""
    if _missing(total_benefit) or total_benefit <= 0:
        return NEVER_PAYS_BACK
    return investment_cost / (total_benefit / 12)


def apply_industry_defaults(inputs: CalculatorInputCreate) -> CalculatorInputCreate:
    """네 개선율을 업종 기본값으로 일괄 치환한 사본."""
    pct = get_improvement_percentage(inputs.industry)
    return inputs.model_copy(
        update={
            "email_improvement_pct": pct,
            "social_improvement_pct": pct,
            "chatbot_improvement_pct": pct,
            "product_improvement_pct": pct,
        }
    )


def compute_results(
    inputs: CalculatorInputCreate, investment_cost: float | None = None
) -> BenefitSummary:
    if investment_cost is None:
        investment_cost = settings.INVESTMENT_COST

    email_revenue = round(
        calculate_email_revenue(
            inputs.email_list_size,
            inputs.current_conversion_rate,
            inputs.average_order_value,
            inputs.email_improvement_pct,
        ),
        2,
    )
    social_savings = round(
        calculate_social_savings(
            inputs.monthly_content_spend,
            inputs.content_creation_hours,
            inputs.social_improvement_pct,
        ),
        2,
    )
    chatbot_savings = round(
        calculate_chatbot_savings(
            inputs.support_ticket_volume,
            inputs.cost_per_inquiry,
            inputs.chatbot_improvement_pct,
        ),
        2,
    )
    product_savings = round(
        calculate_product_savings(
            inputs.number_of_products,
            inputs.description_update_time,
            inputs.product_improvement_pct,
        ),
        2,
    )

    # 반올림된 항목의 합 -> 총합 불변식이 센트 단위로 정확히 성립
    total = round(email_revenue + social_savings + chatbot_savings + product_savings, 2)

    return BenefitSummary(
        email_revenue=email_revenue,
        social_savings=social_savings,
        chatbot_savings=chatbot_savings,
        product_savings=product_savings,
        total_benefits=total,
        roi=round(calculate_roi(total, investment_cost), 2),
        payback_months=round(calculate_payback_period(total, investment_cost), 2),
    )
