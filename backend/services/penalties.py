"""Additive penalties and soft score caps.

Every rule is evaluated on its own and always reported, so callers can show
which checks ran. Deductions are summed and subtracted from the raw score;
nothing multiplies.
"""

import logging

from models.responses import ComponentScore, PenaltyInfo
from models.roles import RoleRequirements
from services import keyword_extractor as kw

logger = logging.getLogger(__name__)

# Skills claimed without any project evidence
UNEVIDENCED_MIN_SKILLS = 3
UNEVIDENCED_DEDUCTION = 8

# Keyword stuffing: (ratio threshold, deduction), strictest first
STUFFING_TIERS = ((0.08, 12), (0.05, 6))

# Short resumes: (word count below, deduction), shortest first
LENGTH_TIERS = ((80, 10), (120, 5))

# Soft caps, applied after penalties
PROJECT_WEAK_THRESHOLD = 5
PROJECT_WEAK_CAP = 65
NO_EVIDENCE_THRESHOLD = 10
NO_EVIDENCE_CAP = 50


def skills_without_evidence_penalty(text: str, requirements: RoleRequirements) -> PenaltyInfo:
    mentioned = len(kw.find_terms(text, requirements.mandatory_skills))
    indicators = kw.count_occurrences(text, requirements.project_indicators)
    applied = mentioned >= UNEVIDENCED_MIN_SKILLS and indicators == 0
    return PenaltyInfo(
        reason="Skills listed but no project evidence",
        deduction=UNEVIDENCED_DEDUCTION,
        applied=applied,
    )


def keyword_stuffing_penalty(text: str, requirements: RoleRequirements) -> PenaltyInfo:
    ratio = kw.skill_mention_ratio(text, requirements.mandatory_skills)
    for threshold, deduction in STUFFING_TIERS:
        if ratio > threshold:
            return PenaltyInfo(
                reason=f"Potential keyword stuffing detected ({ratio:.1%} skill density)",
                deduction=deduction,
                applied=True,
            )
    return PenaltyInfo(
        reason="Potential keyword stuffing detected",
        deduction=STUFFING_TIERS[-1][1],
        applied=False,
    )


def length_penalty(text: str) -> PenaltyInfo:
    words = kw.word_count(text)
    for limit, deduction in LENGTH_TIERS:
        if words < limit:
            return PenaltyInfo(
                reason=f"Resume too short (< {limit} words)",
                deduction=deduction,
                applied=True,
            )
    limit, deduction = LENGTH_TIERS[-1]
    return PenaltyInfo(
        reason=f"Resume too short (< {limit} words)",
        deduction=deduction,
        applied=False,
    )


def calculate_penalties(text: str, requirements: RoleRequirements) -> list[PenaltyInfo]:
    """All penalty checks, in fixed order."""
    penalties = [
        skills_without_evidence_penalty(text, requirements),
        keyword_stuffing_penalty(text, requirements),
        length_penalty(text),
    ]
    for p in penalties:
        if p.applied:
            logger.debug("Penalty applied: %s (-%d)", p.reason, p.deduction)
    return penalties


def total_deduction(penalties: list[PenaltyInfo]) -> int:
    return sum(p.deduction for p in penalties if p.applied)


def apply_soft_caps(
    score: float,
    core_skills: ComponentScore,
    project_quality: ComponentScore,
) -> float:
    """Upper bounds for resumes whose skill or project evidence is critically weak."""
    if project_quality.score <= PROJECT_WEAK_THRESHOLD:
        score = min(score, PROJECT_WEAK_CAP)
    if core_skills.score < NO_EVIDENCE_THRESHOLD and project_quality.score < NO_EVIDENCE_THRESHOLD:
        score = min(score, NO_EVIDENCE_CAP)
    return score
