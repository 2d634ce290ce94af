from pydantic import BaseModel, Field

from config import settings
from models.roles import RoleId, RoleMode


class ValidateRequest(BaseModel):
    resume_text: str = Field(
        ..., max_length=settings.max_resume_chars, description="Plain text resume content"
    )


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(
        ..., max_length=settings.max_resume_chars, description="Plain text resume content"
    )
    role: RoleId = Field(..., description="Target role identifier")
    role_mode: RoleMode | None = Field(
        None, description="core or extended; derived from the role when omitted"
    )
