from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import AnalyzeRequest, ValidateRequest
from models.responses import AnalysisResult, ResumeValidationResult
from models.roles import RoleInfo, RoleMode
from services import resume_analyzer, resume_validator
from services.role_requirements import ROLE_REQUIREMENTS, list_roles

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _check_text(resume_text: str) -> None:
    if len(resume_text.strip()) < settings.min_resume_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Resume text too short (min {settings.min_resume_chars} chars)",
        )


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "roles": len(ROLE_REQUIREMENTS),
    }


@router.get("/roles", response_model=list[RoleInfo])
async def roles(mode: RoleMode | None = None):
    return list_roles(mode)


@router.post("/validate", response_model=ResumeValidationResult)
@limiter.limit(settings.rate_limit)
async def validate(request: Request, body: ValidateRequest):
    _check_text(body.resume_text)
    return resume_validator.validate_resume(body.resume_text)


@router.post("/analyze", response_model=AnalysisResult)
@limiter.limit(settings.rate_limit)
async def analyze(request: Request, body: AnalyzeRequest):
    _check_text(body.resume_text)

    if settings.require_valid_resume:
        validation = resume_validator.validate_resume(body.resume_text)
        if not validation.is_valid:
            raise HTTPException(
                status_code=422,
                detail={
                    "message": validation.rejection_reason,
                    "validation": validation.model_dump(),
                },
            )

    return resume_analyzer.analyze_resume(body)
