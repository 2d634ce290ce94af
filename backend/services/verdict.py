"""Verdict: template-based strengths, improvements and confidence.

Deterministic rules engine over component scores. Both narrative lists are
guaranteed non-empty; improvements are capped and emitted in a fixed
priority order.
"""

from models.responses import Confidence, ScoreBreakdown
from models.roles import RoleInfo, RoleMode, RoleRequirements
from services import keyword_extractor as kw
from services.component_scorer import count_quantified_achievements, has_project_link

MAX_IMPROVEMENTS = 4

LOW_CONFIDENCE_WORDS = 50
HIGH_CONFIDENCE_WORDS = 250

FALLBACK_STRENGTH = "Resume submitted for analysis - clear opportunities for improvement identified"
FALLBACK_IMPROVEMENT = "Consider adding more specific examples to strengthen your profile"


def build_strengths(breakdown: ScoreBreakdown, role: RoleInfo) -> list[str]:
    """Generate strengths from component score bands."""
    strengths: list[str] = []

    core = breakdown.core_skills.score
    if core >= 25:
        strengths.append(f"Excellent alignment with the core skills for {role.label}")
    elif core >= 18:
        strengths.append(f"Strong foundation in {role.label} skills")
    elif core >= 12:
        strengths.append("Good coverage of key role skills")

    projects = breakdown.project_quality.score
    if projects >= 22:
        strengths.append("Well-documented projects with quantified impact")
    elif projects >= 14:
        strengths.append("Project work demonstrates practical, hands-on application")
    elif projects >= 8:
        strengths.append("Some relevant project work is evident")

    experience = breakdown.experience_depth.score
    if experience >= 16:
        strengths.append("Clear, action-oriented experience with dates and organizations")
    elif experience >= 12:
        strengths.append("Experience entries show relevant responsibilities")

    if breakdown.resume_structure.score >= 12:
        strengths.append("Well-structured resume with all essential sections")

    return strengths or [FALLBACK_STRENGTH]


def build_improvements(
    breakdown: ScoreBreakdown,
    requirements: RoleRequirements,
    text: str,
    quantified: int | None = None,
) -> list[str]:
    """Generate improvements in priority order, at most MAX_IMPROVEMENTS.

    Order: skills gap, project gap, quantification gap, action-verb gap,
    structure gap, link gap.
    """
    improvements: list[str] = []

    # Skills gap
    if breakdown.core_skills.score < 18:
        missing = [s for s in requirements.mandatory_skills if kw.find_term(text, s) == -1]
        if missing:
            improvements.append(f"Add experience with: {', '.join(missing[:3])}")
        else:
            improvements.append(
                "Show where you used your core skills, next to the projects or roles that used them"
            )

    # Project gap
    if breakdown.project_quality.score < 15:
        improvements.append("Add 2-3 role-relevant projects with measurable outcomes")

    # Quantification gap
    if quantified is None:
        quantified = count_quantified_achievements(text)
    if quantified == 0:
        improvements.append("Quantify achievements with numbers, percentages, or user counts")

    # Action-verb gap
    if kw.count_action_verbs(text, requirements.experience_keywords) < 5:
        examples = ", ".join(requirements.experience_keywords[:3])
        improvements.append(f"Start experience bullets with strong action verbs (e.g. {examples})")

    # Structure gap
    if breakdown.resume_structure.score < 12:
        improvements.append(
            "Label sections clearly (Education, Skills, Experience) and include contact details"
        )

    # Link gap
    if not has_project_link(text):
        improvements.append("Link to your GitHub, portfolio, or a live demo of your work")

    return improvements[:MAX_IMPROVEMENTS] or [FALLBACK_IMPROVEMENT]


def determine_confidence(text: str, role_mode: RoleMode) -> Confidence:
    """How far the score can be trusted, from text length and role tuning."""
    words = kw.word_count(text)
    if words < LOW_CONFIDENCE_WORDS:
        return "low"
    if role_mode is RoleMode.EXTENDED:
        return "medium"
    if words > HIGH_CONFIDENCE_WORDS:
        return "high"
    return "medium"


def score_label(score: int) -> str:
    if score >= 80:
        return "Excellent"
    elif score >= 60:
        return "Good"
    elif score >= 40:
        return "Fair"
    return "Needs Work"
