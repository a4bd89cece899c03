# app/schemas/assessment.py

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AssessmentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    responses: Dict[str, Any] = Field(default_factory=dict)
    calculator_id: Optional[int] = Field(default=None, alias="calculatorId")


class DimensionScores(BaseModel):
    data_infrastructure: float = Field(ge=0, le=100)
    process_automation: float = Field(ge=0, le=100)
    tech_capabilities: float = Field(ge=0, le=100)


class AssessmentResult(BaseModel):
    overall_score: float = Field(ge=0, le=100)
    readiness_level: str
    dimension_scores: DimensionScores
    key_strengths: List[str] = []
    improvement_areas: List[str] = []
    recommendations: List[str] = []
