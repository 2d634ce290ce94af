"""Orchestrator: evidence-based resume scoring pipeline.

Pipeline:
1. Normalize (lower-case once)
2. Score four independent components (core skills, projects, experience,
   structure)
3. Sum into the raw score
4. Evaluate additive penalties
5. Subtract applied deductions
6. Apply soft caps for critically weak evidence
7. Round and clamp to 0-100
8. Derive display percentages
9. Build strengths and improvements
10. Estimate confidence
"""

import logging
import math
from datetime import datetime, timezone

from models.requests import AnalyzeRequest
from models.responses import (
    AnalysisMetadata,
    AnalysisResult,
    ComponentScore,
    ScoreBreakdown,
)
from models.roles import RoleId, RoleMode
from services import component_scorer, penalties, verdict
from services.role_requirements import default_role_mode, get_requirements, get_role_info

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _percent(*components: ComponentScore) -> int:
    score = sum(c.score for c in components)
    max_score = sum(c.max_score for c in components)
    return _round_half_up(score / max_score * 100)


def analyze(
    resume_text: str,
    role: RoleId | str,
    role_mode: RoleMode | str | None = None,
    *,
    now: datetime | None = None,
) -> AnalysisResult:
    """Score ``resume_text`` against ``role``.

    ``now`` fixes ``metadata.analyzed_at``; everything else depends only on
    the text, role and mode.
    """
    role = RoleId(role)
    role_mode = RoleMode(role_mode) if role_mode is not None else default_role_mode(role)
    requirements = get_requirements(role)

    # --- Stage 1: Normalize ---
    text = resume_text.lower()

    # --- Stage 2: Component scores ---
    quantified = component_scorer.count_quantified_achievements(text)
    breakdown = ScoreBreakdown(
        core_skills=component_scorer.score_core_skills(text, requirements),
        project_quality=component_scorer.score_project_quality(
            text, requirements, quantified=quantified
        ),
        experience_depth=component_scorer.score_experience_depth(
            text, requirements, original=resume_text
        ),
        resume_structure=component_scorer.score_resume_structure(text),
    )

    # --- Stage 3: Raw score ---
    raw_score = (
        breakdown.core_skills.score
        + breakdown.project_quality.score
        + breakdown.experience_depth.score
        + breakdown.resume_structure.score
    )

    # --- Stage 4-5: Additive penalties ---
    penalty_list = penalties.calculate_penalties(text, requirements)
    total_penalty = penalties.total_deduction(penalty_list)
    final_score = raw_score - total_penalty

    # --- Stage 6: Soft caps ---
    final_score = penalties.apply_soft_caps(
        final_score, breakdown.core_skills, breakdown.project_quality
    )

    # --- Stage 7: Round and clamp ---
    overall_score = max(0, min(100, _round_half_up(final_score)))

    # --- Stage 9-10: Narrative and confidence ---
    strengths = verdict.build_strengths(breakdown, get_role_info(role))
    improvements = verdict.build_improvements(
        breakdown, requirements, text, quantified=quantified
    )
    confidence = verdict.determine_confidence(text, role_mode)

    logger.info(
        "Analyzed resume: role=%s mode=%s score=%d confidence=%s",
        role.value, role_mode.value, overall_score, confidence,
    )

    return AnalysisResult(
        overall_score=overall_score,
        # --- Stage 8: Display percentages ---
        skill_match_percent=_percent(breakdown.core_skills),
        project_relevance_percent=_percent(breakdown.project_quality),
        resume_depth_percent=_percent(breakdown.experience_depth, breakdown.resume_structure),
        strengths=strengths,
        improvements=improvements,
        breakdown=breakdown,
        penalties=penalty_list,
        metadata=AnalysisMetadata(
            role=role,
            role_mode=role_mode,
            analyzed_at=now or datetime.now(timezone.utc),
            confidence=confidence,
        ),
        raw_score=raw_score,
        total_penalty=total_penalty,
        score_label=verdict.score_label(overall_score),
    )


def analyze_resume(request: AnalyzeRequest, *, now: datetime | None = None) -> AnalysisResult:
    """Run the scoring pipeline for an AnalyzeRequest."""
    return analyze(request.resume_text, request.role, request.role_mode, now=now)
