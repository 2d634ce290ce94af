"""Resume section, contact identifier and date detection.

Pattern tables shared by the validity gate and the structure/experience
scorers. Everything here is a compiled regex or a small pure function over
text; nothing keeps state between calls.
"""

import re

# ---------------------------------------------------------------------------
# Canonical resume sections (validity gate)
# ---------------------------------------------------------------------------

# Section name -> headings and synonyms. Names keep their display casing
# because they are reported back to the caller.
SECTION_PATTERNS: dict[str, list[str]] = {
    "Experience": [
        r"experience",
        r"work\s*experience",
        r"employment",
        r"work\s*history",
        r"professional\s*experience",
        r"internship",
        r"career\s*history",
    ],
    "Education": [
        r"education", r"academic", r"qualification", r"university", r"college",
        r"degree", r"bachelor", r"master",
        r"b\.?tech", r"b\.e\.?", r"m\.?tech", r"m\.e\.?",
        r"b\.?sc", r"m\.?sc", r"b\.a\.?", r"m\.a\.?", r"ph\.?d",
        r"diploma", r"schooling", r"12th", r"10th", r"hsc", r"ssc",
    ],
    "Skills": [
        r"skills",
        r"technical\s*skills",
        r"core\s*competencies",
        r"technologies",
        r"proficiencies",
        r"expertise",
        r"competencies",
        r"tools",
        r"programming\s*languages",
    ],
    "Projects": [
        r"projects",
        r"personal\s*projects",
        r"academic\s*projects",
        r"key\s*projects",
        r"portfolio",
    ],
    "Certifications": [
        r"certifications?",
        r"certificates?",
        r"licensed?",
        r"accreditations?",
        r"credentials?",
        r"professional\s*development",
    ],
}

_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(rf"\b(?:{combined})\b", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Contact identifiers
# ---------------------------------------------------------------------------
EMAIL_RE = re.compile(r"(?<![a-zA-Z0-9._%+-])[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{2,4}\)?[-.\s]?\d{3,4}[-.\s]?\d{3,4}")
LINKEDIN_RE = re.compile(r"linkedin\.com/in/[a-zA-Z0-9_-]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/[a-zA-Z0-9_-]+", re.IGNORECASE)
# A line made only of two or more capitalised words, e.g. "Priya Sharma".
# Case-sensitive.
NAME_RE = re.compile(r"^[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)+[ \t]*$", re.MULTILINE)

NAME_SEARCH_LINES = 5

# ---------------------------------------------------------------------------
# Structure sections (resume structure scorer, lower-cased text)
# ---------------------------------------------------------------------------
STRUCTURE_PATTERNS: dict[str, re.Pattern] = {
    "education": re.compile(r"education|university|college|degree|bachelor|master|b\.tech"),
    "skills": re.compile(r"skills|technologies|expertise|tech stack"),
    "experience": re.compile(r"experience|employment|internship|work history"),
    "contact": re.compile(r"contact|email|e-mail|phone|mobile|linkedin|github|@[\w-]+\.[a-z]{2,}"),
}
SUMMARY_RE = re.compile(r"\b(?:objective|summary|profile|about me)\b")
CERTIFICATION_RE = re.compile(r"certif|achievement|award|honou?rs?\b|accomplishment")

# ---------------------------------------------------------------------------
# Dates and organisations (experience depth scorer)
# ---------------------------------------------------------------------------
_MONTHS = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*"
DATE_PATTERNS: list[re.Pattern] = [
    # "Jan 2021", "september 2019", "aug. 2020"
    re.compile(rf"\b{_MONTHS}\.?,?\s*(?:19|20)\d{{2}}\b"),
    # "2019 - 2021", "2022 – present", "2020 to current"
    re.compile(r"\b(?:19|20)\d{2}\s*(?:-|–|—|to)\s*(?:present|current|now|(?:19|20)\d{2})\b"),
    # "06/2021", "6/21"
    re.compile(r"\b\d{1,2}/(?:\d{4}|\d{2})\b"),
    # bare year
    re.compile(r"\b(?:19|20)\d{2}\b"),
]

# Needs the original casing: "Intern at Infosys", "worked at Google".
ORG_CAPITALIZED_RE = re.compile(r"\bat\s+[A-Z][a-zA-Z&.]+")
ORG_CONTEXT_RE = re.compile(r"internship at|\bcompany\b|\buniversity\b|\bpvt\.? ltd\b|\binc\b")


def detect_sections(text: str) -> list[str]:
    """Canonical section names whose headings or synonyms appear in text."""
    return [name for name, pattern in _COMPILED.items() if pattern.search(text)]


def detect_identifiers(text: str) -> list[str]:
    """Contact signals present in text, in fixed report order.

    The name heuristic only looks at the top of the document, where resumes
    put the candidate's name.
    """
    found: list[str] = []
    if EMAIL_RE.search(text):
        found.append("Email")
    if PHONE_RE.search(text):
        found.append("Phone")
    if LINKEDIN_RE.search(text):
        found.append("LinkedIn")
    if GITHUB_RE.search(text):
        found.append("GitHub")

    first_lines = "\n".join(text.splitlines()[:NAME_SEARCH_LINES])
    if NAME_RE.search(first_lines):
        found.append("Name")
    return found


def detect_structure_sections(text: str) -> list[str]:
    """Structure sections found in already lower-cased text."""
    return [name for name, pattern in STRUCTURE_PATTERNS.items() if pattern.search(text)]


def has_date(text: str) -> bool:
    return any(p.search(text) for p in DATE_PATTERNS)


def has_organization_context(text: str, original: str | None = None) -> bool:
    """Whether the resume names where the work happened.

    ``text`` is the lower-cased resume; ``original`` keeps the casing needed
    for the "at <Company>" form.
    """
    if ORG_CONTEXT_RE.search(text):
        return True
    return bool(original and ORG_CAPITALIZED_RE.search(original))
