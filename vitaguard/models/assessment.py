"""
Assessment API Models
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class CategoryDetailResponse(BaseModel):
    """One body-system sub-score."""
    category: str
    risk: str
    score: int = Field(..., ge=0, le=100)


class AnalysisResponse(BaseModel):
    """Risk analysis as returned to the UI."""
    riskScore: int
    riskLevel: str
    summary: str
    recommendations: List[str]
    tips: List[str]
    dietOptions: List[str]
    details: List[CategoryDetailResponse]
    source: str = Field(..., description="'gemini' or 'fallback'")
    userName: str
    date: str


class QuestionnaireReference(BaseModel):
    """Allowed answers for the assessment form."""
    symptoms: List[str]
    sleep: Dict[str, str]
    exercise: Dict[str, str]
    smoking: Dict[str, str]
    alcohol: Dict[str, str]


class HealthResponse(BaseModel):
    """Health status response."""
    status: str
    version: str
    uptime_seconds: float
    gemini_configured: bool
    gemini_model: Optional[str] = None
    timestamp: str
