"""Term matching, evidence windows and skill mention ratio for resume scoring.

All helpers expect text that has already been lower-cased. Requirement
terms of three or more characters match as plain substrings; one- and
two-character terms ("r", "c", "ui", "3d") only match as standalone tokens,
otherwise they would be found inside almost every word.
"""

import re
from functools import lru_cache

EVIDENCE_WINDOW = 150
SHORT_TERM_MAX_LEN = 2

# Common action verbs accepted in experience writing, on top of each role's
# own experience keywords.
COMMON_ACTION_VERBS: tuple[str, ...] = (
    "achieved", "analyzed", "architected", "automated", "built",
    "collaborated", "configured", "contributed", "coordinated", "created",
    "delivered", "deployed", "designed", "developed", "engineered",
    "enhanced", "established", "implemented", "improved", "increased",
    "integrated", "launched", "led", "maintained", "managed", "mentored",
    "migrated", "optimized", "organized", "reduced", "resolved", "scaled",
    "streamlined", "tested", "trained",
)


@lru_cache(maxsize=512)
def _term_pattern(term: str) -> re.Pattern:
    escaped = re.escape(term)
    if len(term) <= SHORT_TERM_MAX_LEN:
        return re.compile(rf"(?<![a-z0-9+#]){escaped}(?![a-z0-9+#])")
    return re.compile(escaped)


@lru_cache(maxsize=512)
def _verb_pattern(verb: str) -> re.Pattern:
    """Word-bounded pattern for a verb with an optional -ed/-ing/-s suffix.

    Past-tense keywords are reduced to their stem first, so "deployed" also
    matches "deploying" and "deploys".
    """
    stem = verb[:-2] if verb.endswith("ed") and len(verb) > 5 else verb
    return re.compile(rf"\b{re.escape(stem)}(?:ed|ing|s)?\b")


def word_count(text: str) -> int:
    return len(text.split())


def find_term(text: str, term: str) -> int:
    """Index of the first occurrence of term, or -1."""
    match = _term_pattern(term).search(text)
    return match.start() if match else -1


def count_term(text: str, term: str) -> int:
    """Non-overlapping occurrences of term."""
    return len(_term_pattern(term).findall(text))


def find_terms(text: str, terms) -> list[str]:
    """Terms (in the given order) that occur at least once."""
    return [t for t in terms if find_term(text, t) != -1]


def count_occurrences(text: str, terms) -> int:
    """Total occurrences of all terms."""
    return sum(count_term(text, t) for t in terms)


def has_evidence_nearby(
    text: str,
    term: str,
    evidence_terms,
    window: int = EVIDENCE_WINDOW,
) -> bool:
    """Whether any evidence term occurs within +/-window chars of term's first use.

    Evidence terms are action verbs and project indicators: a skill that
    sits next to one was used, not just listed.
    """
    index = find_term(text, term)
    if index == -1:
        return False
    start = max(0, index - window)
    end = min(len(text), index + len(term) + window)
    context = text[start:end]
    return any(find_term(context, ev) != -1 for ev in evidence_terms)


def action_verbs_for(experience_keywords) -> list[str]:
    """Role keywords followed by the common verbs, de-duplicated by stem."""
    verbs: list[str] = []
    seen: set[str] = set()
    for verb in (*experience_keywords, *COMMON_ACTION_VERBS):
        key = _verb_pattern(verb).pattern
        if key not in seen:
            seen.add(key)
            verbs.append(verb)
    return verbs


def count_action_verbs(text: str, experience_keywords) -> int:
    """Occurrences of role and common action verbs in text."""
    return sum(
        len(_verb_pattern(v).findall(text))
        for v in action_verbs_for(experience_keywords)
    )


def skill_mention_ratio(text: str, skills) -> float:
    """Total skill mentions divided by word count (0.0 for empty text).

    Multi-word skills count once per occurrence, so the ratio can exceed
    the share of words that belong to skills.
    """
    total_words = word_count(text)
    if total_words == 0:
        return 0.0
    return count_occurrences(text, skills) / total_words
