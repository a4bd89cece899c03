# app/schemas/calculator.py
# -----------------------------------------------------------------------------
# 계산기 입력/결과 스키마
# - 와이어 포맷은 camelCase(companyName ...), snake_case 키도 허용
# - 음수/범위 밖 값은 422로 필드 단위 오류 반환
# -----------------------------------------------------------------------------
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class CalculatorInputCreate(CamelModel):
    company_name: str = Field(min_length=1)
    industry: str = Field(min_length=1)
    email: str = Field(min_length=1)

    # 이메일 캠페인
    email_list_size: int = Field(ge=0)
    current_open_rate: float = Field(ge=0)
    current_conversion_rate: float = Field(ge=0)
    average_order_value: float = Field(ge=0)

    # 소셜 콘텐츠
    monthly_content_spend: float = Field(ge=0)
    content_creation_hours: int = Field(ge=0)

    # 챗봇
    monthly_visitors: int = Field(ge=0)
    support_ticket_volume: int = Field(ge=0)
    cost_per_inquiry: float = Field(ge=0)

    # 상품 설명
    number_of_products: int = Field(ge=0)
    description_update_time: int = Field(ge=0)  # 분

    # 개선율 가정치
    email_improvement_pct: float = Field(ge=0, le=100)
    social_improvement_pct: float = Field(ge=0, le=100)
    chatbot_improvement_pct: float = Field(ge=0, le=100)
    product_improvement_pct: float = Field(ge=0, le=100)


class CalculatorInput(CalculatorInputCreate):
    id: int


class BenefitSummary(CamelModel):
    email_revenue: float
    social_savings: float
    chatbot_savings: float
    product_savings: float
    total_benefits: float
    roi: float
    payback_months: float


class ResultCreate(BenefitSummary):
    calculator_id: int


class ResultRecord(ResultCreate):
    id: int


class SubmitResponse(CamelModel):
    id: int
    results: ResultRecord


class IndustryDefault(CamelModel):
    industry: str
    improvement_pct: float
