from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

from models.roles import RoleId, RoleMode

Confidence = Literal["high", "medium", "low"]


class ComponentScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = 0.0
    max_score: int
    details: str = ""


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    core_skills: ComponentScore
    project_quality: ComponentScore
    experience_depth: ComponentScore
    resume_structure: ComponentScore


class PenaltyInfo(BaseModel):
    """One penalty rule that was checked.

    Every rule is reported, fired or not; only entries with ``applied``
    set count towards the score.
    """
    model_config = ConfigDict(frozen=True)

    reason: str
    deduction: int
    applied: bool = False


class AnalysisMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: RoleId
    role_mode: RoleMode
    analyzed_at: datetime
    confidence: Confidence


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int = 0
    skill_match_percent: int = 0
    project_relevance_percent: int = 0
    resume_depth_percent: int = 0
    strengths: list[str]
    improvements: list[str]
    breakdown: ScoreBreakdown
    penalties: list[PenaltyInfo] = []
    metadata: AnalysisMetadata
    # Scoring transparency fields
    raw_score: float = 0.0
    total_penalty: int = 0
    score_label: str = ""


class ResumeValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    rejection_reason: str | None = None
    detected_sections: list[str] = []
    detected_identifiers: list[str] = []

    @model_validator(mode="after")
    def _reason_iff_invalid(self):
        if self.is_valid == (self.rejection_reason is not None):
            raise ValueError("rejection_reason must be set exactly when is_valid is False")
        return self
