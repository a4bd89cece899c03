# app/db/models.py
# -----------------------------------------------------------------------------
# ORM 모델 정의
# - CalculatorInputRow: 제출된 계산기 입력 (생성 후 불변)
# - ResultRow: 입력 1건당 계산 결과 1건, calculator_id로 역참조
# - 금액/비율은 Float: 입력값을 자릿수 제한 없이 그대로 보관
# -----------------------------------------------------------------------------
from sqlalchemy import Column, Float, ForeignKey, Integer, String

from app.db.session import Base


class CalculatorInputRow(Base):
    __tablename__ = "calculator_inputs"
    __table_args__ = {"sqlite_autoincrement": True}  # id 재사용 금지

    id = Column(Integer, primary_key=True, index=True)
    company_name = Column(String, nullable=False)
    industry = Column(String, nullable=False, index=True)
    email = Column(String, nullable=False)

    # 이메일 캠페인
    email_list_size = Column(Integer, nullable=False)
    current_open_rate = Column(Float, nullable=False)
    current_conversion_rate = Column(Float, nullable=False)
    average_order_value = Column(Float, nullable=False)

    # 소셜 콘텐츠
    monthly_content_spend = Column(Float, nullable=False)
    content_creation_hours = Column(Integer, nullable=False)

    # 챗봇
    monthly_visitors = Column(Integer, nullable=False)
    support_ticket_volume = Column(Integer, nullable=False)
    cost_per_inquiry = Column(Float, nullable=False)

    # 상품 설명
    number_of_products = Column(Integer, nullable=False)
    description_update_time = Column(Integer, nullable=False)  # 분

    # 개선율 가정치 (0~100)
    email_improvement_pct = Column(Float, nullable=False)
    social_improvement_pct = Column(Float, nullable=False)
    chatbot_improvement_pct = Column(Float, nullable=False)
    product_improvement_pct = Column(Float, nullable=False)


class ResultRow(Base):
    __tablename__ = "results"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    calculator_id = Column(
        Integer, ForeignKey("calculator_inputs.id"), nullable=False, index=True
    )
    email_revenue = Column(Float, nullable=False)
    social_savings = Column(Float, nullable=False)
    chatbot_savings = Column(Float, nullable=False)
    product_savings = Column(Float, nullable=False)
    total_benefits = Column(Float, nullable=False)
    roi = Column(Float, nullable=False)
    payback_months = Column(Float, nullable=False)
