"""Resume validity gate: rule-based, deterministic.

Rejects text that is not a resume (lecture notes, timetables, sports lists,
garbage extraction) before it reaches scoring.

Rules:
1. At least 2 core sections (Experience, Education, Skills, Projects,
   Certifications).
2. At least 1 contact identifier (email, phone, LinkedIn, GitHub, or a
   name near the top).
"""

import logging

from models.responses import ResumeValidationResult
from services.section_parser import detect_identifiers, detect_sections

logger = logging.getLogger(__name__)

MIN_SECTIONS = 2
MIN_IDENTIFIERS = 1

REASON_MISSING_BOTH = "Missing resume sections and contact information"
REASON_MISSING_SECTIONS = (
    "Missing standard resume sections (need at least 2: "
    "Experience, Education, Skills, Projects, or Certifications)"
)
REASON_MISSING_IDENTIFIERS = "Missing contact information (email, phone, LinkedIn, GitHub, or name)"


def validate_resume(text: str) -> ResumeValidationResult:
    """Decide whether ``text`` is a real resume.

    Never raises; detected sections and identifiers are always reported so
    rejections can be debugged.
    """
    sections = detect_sections(text)
    identifiers = detect_identifiers(text)

    has_sections = len(sections) >= MIN_SECTIONS
    has_identifier = len(identifiers) >= MIN_IDENTIFIERS

    reason = None
    if not has_sections and not has_identifier:
        reason = REASON_MISSING_BOTH
    elif not has_sections:
        reason = REASON_MISSING_SECTIONS
    elif not has_identifier:
        reason = REASON_MISSING_IDENTIFIERS

    if reason is not None:
        logger.info(
            "Resume rejected: %d sections, %d identifiers", len(sections), len(identifiers)
        )

    return ResumeValidationResult(
        is_valid=reason is None,
        rejection_reason=reason,
        detected_sections=sections,
        detected_identifiers=identifiers,
    )
