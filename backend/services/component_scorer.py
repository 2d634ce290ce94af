"""Component scores: core skills, project quality, experience depth, structure.

Each scorer reads the lower-cased resume text (and the role requirements
where relevant) and returns a ComponentScore. Scorers share no state and
can run in any order.
"""

import re

from models.responses import ComponentScore
from models.roles import RoleRequirements
from services import keyword_extractor as kw
from services.section_parser import (
    CERTIFICATION_RE,
    SUMMARY_RE,
    detect_structure_sections,
    has_date,
    has_organization_context,
)

CORE_SKILLS_MAX = 35
PROJECT_QUALITY_MAX = 30
EXPERIENCE_DEPTH_MAX = 20
RESUME_STRUCTURE_MAX = 15

# Core skills
MANDATORY_SKILL_POINTS = 4
EVIDENCE_BONUS = 2
MANDATORY_CAP = 25
OPTIONAL_SKILL_POINTS = 1.5
OPTIONAL_CAP = 10

# Project quality
NO_PROJECT_SCORE = 3
PROJECT_BASE = 5
TECH_STACK_BONUS = 3
LINK_BONUS = 2

# Experience depth
NO_EXPERIENCE_SCORE = 4
EXPERIENCE_BASE = 4
DATE_BONUS = 4
ORG_BONUS = 4

# Resume structure
SECTION_POINTS = 3
SUMMARY_BONUS = 2
CERTIFICATION_BONUS = 1

# (minimum count, points), highest tier first
INDICATOR_TIERS = ((5, 10), (3, 7), (1, 4))
QUANTIFICATION_TIERS = ((4, 10), (2, 7), (1, 4))
ACTION_VERB_TIERS = ((8, 8), (5, 6), (3, 4), (1, 2))

PROJECT_LEXICON_RE = re.compile(r"project|portfolio|work|built|developed|created")
EXPERIENCE_LEXICON_RE = re.compile(r"experience|work|internship|project|freelance|volunteer")
TECH_STACK_RE = re.compile(r"\busing\b|built with|tech stack")
PROJECT_LINK_RE = re.compile(
    r"github\.com/[\w-]+|(?<![\w-])[\w-]+\.github\.io|gitlab\.com/[\w-]+"
    r"|(?<![\w-])[\w-]+\.(?:vercel|netlify)\.app|herokuapp\.com"
    r"|live[\s-]*demo|portfolio\s*[:|-]\s*\S+"
)

# Numeric patterns match only from the first digit of a number.
_NUMBER_START = r"(?<![\d.,])"
# Longest gap between the verb and its number in the reduced/increased form.
METRIC_VERB_REACH = 150

QUANTIFICATION_PATTERNS: list[re.Pattern] = [
    # 40%, 12.5 %
    re.compile(rf"{_NUMBER_START}\d+(?:\.\d+)?\s*%"),
    # 500 users, 10k+ customers
    re.compile(
        rf"{_NUMBER_START}\d[\d,]*\+?\s*k?\+?\s*"
        r"(?:users?|customers?|clients?|downloads?|visitors?|students?)\b"
    ),
    # 2x faster, 3.5x improvement
    re.compile(rf"{_NUMBER_START}\d+(?:\.\d+)?\s*x\s*(?:faster|improvement|increase|more|speed)"),
    # reduced latency by 30, improved uptime to 99
    re.compile(rf"\b(?:reduced|increased|improved)\b[^.\n]{{0,{METRIC_VERB_REACH}}}?\d+"),
    # $5000, $ 1.2m
    re.compile(r"\$\s?\d[\d,.]*"),
    # 5 projects, 3+ applications
    re.compile(
        r"\b\d+\+?\s+(?:projects?|applications?|apps|websites?|features?|services?"
        r"|apis|endpoints|models?|pipelines?|dashboards?|teams?|members?|engineers?)\b"
    ),
]


def _tier_points(count: int, tiers) -> int:
    for minimum, points in tiers:
        if count >= minimum:
            return points
    return 0


def count_quantified_achievements(text: str) -> int:
    """Number of quantification matches across all metric patterns."""
    return sum(len(p.findall(text)) for p in QUANTIFICATION_PATTERNS)


def has_project_link(text: str) -> bool:
    return bool(PROJECT_LINK_RE.search(text))


def score_core_skills(text: str, requirements: RoleRequirements) -> ComponentScore:
    """Mandatory skills with evidence of use, plus optional skill credit. Max 35."""
    evidence_terms = (*requirements.experience_keywords, *requirements.project_indicators)

    found: list[str] = []
    evidenced: list[str] = []
    mandatory_score = 0
    for skill in requirements.mandatory_skills:
        if kw.find_term(text, skill) == -1:
            continue
        found.append(skill)
        mandatory_score += MANDATORY_SKILL_POINTS
        if kw.has_evidence_nearby(text, skill, evidence_terms):
            evidenced.append(skill)
            mandatory_score += EVIDENCE_BONUS
    mandatory_score = min(mandatory_score, MANDATORY_CAP)

    optional_found = kw.find_terms(text, requirements.optional_skills)
    optional_score = min(len(optional_found) * OPTIONAL_SKILL_POINTS, OPTIONAL_CAP)

    score = min(mandatory_score + optional_score, CORE_SKILLS_MAX)
    details = (
        f"{len(found)}/{len(requirements.mandatory_skills)} core skills found "
        f"({len(evidenced)} with evidence of use), "
        f"{len(optional_found)} additional skills"
    )
    return ComponentScore(score=score, max_score=CORE_SKILLS_MAX, details=details)


def score_project_quality(
    text: str,
    requirements: RoleRequirements,
    quantified: int | None = None,
) -> ComponentScore:
    """Project depth: role indicators, quantified outcomes, stack and links. Max 30.

    ``quantified`` is a precomputed count_quantified_achievements(text).
    """
    if not PROJECT_LEXICON_RE.search(text):
        return ComponentScore(
            score=NO_PROJECT_SCORE,
            max_score=PROJECT_QUALITY_MAX,
            details="No project section detected",
        )

    score = PROJECT_BASE

    indicator_count = kw.count_occurrences(text, requirements.project_indicators)
    score += _tier_points(indicator_count, INDICATOR_TIERS)

    if quantified is None:
        quantified = count_quantified_achievements(text)
    score += _tier_points(quantified, QUANTIFICATION_TIERS)

    if TECH_STACK_RE.search(text):
        score += TECH_STACK_BONUS
    linked = has_project_link(text)
    if linked:
        score += LINK_BONUS

    details = (
        f"{indicator_count} project indicators, {quantified} quantified achievements"
        f"{', project link present' if linked else ''}"
    )
    return ComponentScore(
        score=min(score, PROJECT_QUALITY_MAX),
        max_score=PROJECT_QUALITY_MAX,
        details=details,
    )


def score_experience_depth(
    text: str,
    requirements: RoleRequirements,
    original: str | None = None,
) -> ComponentScore:
    """Action verbs, dates and organisation context. Max 20.

    ``original`` is the un-normalised resume, needed only to spot
    capitalised organisation names.
    """
    if not EXPERIENCE_LEXICON_RE.search(text):
        return ComponentScore(
            score=NO_EXPERIENCE_SCORE,
            max_score=EXPERIENCE_DEPTH_MAX,
            details="No clear experience section",
        )

    score = EXPERIENCE_BASE

    verb_count = kw.count_action_verbs(text, requirements.experience_keywords)
    score += _tier_points(verb_count, ACTION_VERB_TIERS)

    dated = has_date(text)
    if dated:
        score += DATE_BONUS
    with_org = has_organization_context(text, original)
    if with_org:
        score += ORG_BONUS

    details = (
        f"{verb_count} action verbs, "
        f"{'dates present' if dated else 'no dates found'}, "
        f"{'organization named' if with_org else 'no organization context'}"
    )
    return ComponentScore(
        score=min(score, EXPERIENCE_DEPTH_MAX),
        max_score=EXPERIENCE_DEPTH_MAX,
        details=details,
    )


def score_resume_structure(text: str) -> ComponentScore:
    """Essential sections plus summary and certification bonuses. Max 15."""
    sections = detect_structure_sections(text)
    score = len(sections) * SECTION_POINTS
    if SUMMARY_RE.search(text):
        score += SUMMARY_BONUS
    if CERTIFICATION_RE.search(text):
        score += CERTIFICATION_BONUS

    details = f"{len(sections)}/4 essential sections present"
    return ComponentScore(
        score=min(score, RESUME_STRUCTURE_MAX),
        max_score=RESUME_STRUCTURE_MAX,
        details=details,
    )
