from pydantic import BaseModel, Field
from typing import Any, List, Optional


class AnalysisResult(BaseModel):
    # Fields are forwarded exactly as Gemini returned them, missing keys become None
    profileSummary: Any = None
    suggestedSkills: Any = None
    confidence: Any = None


class StrictAnalysisResult(BaseModel):
    profileSummary: str
    suggestedSkills: List[str]
    confidence: float = Field(ge=0, le=100)


class StoredAnalysisRecord(BaseModel):
    user_name: str
    user_email: str
    primary_skill: str
    experience_description: str
    ai_profile_summary: Any = None
    ai_suggested_skills: Any = None
    ai_confidence: Any = None


class AnalysisResponse(BaseModel):
    id: Optional[Any] = None
    profileSummary: Any = None
    suggestedSkills: Any = None
    confidence: Any = None
    success: bool = True
