"""Shared test configuration and sample resume texts."""

from datetime import datetime, timezone

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end scoring scenarios over sample resumes"
    )


# Frontend resume with controlled signals:
# core 28 (5 evidenced mandatory skills capped at 25, plus typescript and git),
# projects 19 (no tech-stack phrase, no links, one metric),
# experience 16 (no organisation context), structure 12 (no summary or
# certification lexicon). Raw 75, no penalties, ~265 words.
RICH_FRONTEND_RESUME = """Aarav Mehta
Frontend Developer
aarav.mehta@example.com | +91 98765 43210 | linkedin.com/in/aaravmehta

Skills
Frontend: HTML, CSS, JavaScript, TypeScript, React, responsive design, Git, Figma, accessibility testing, browser developer tools
Languages: English, Hindi, Tamil

Experience
Frontend Intern, Pixelcraft Studios | Jun 2023 - Dec 2023
- Developed reusable components for a client dashboard serving 1200 users
- Implemented responsive layouts for checkout and account pages across phones, tablets and desktops
- Collaborated with designers to turn Figma mockups into clean, accessible UI screens
- Tested every new page with screen readers and keyboard navigation before release
- Maintained a shared component library with written guidelines for other interns

Freelance Web Developer | 2022 - 2023
- Built landing page sites for local shops, bakeries and tutoring centres
- Designed simple content workflows so owners could edit text and photos themselves
- Optimized images and fonts so each website loaded quickly on slow mobile networks
- Delivered every site on schedule and trained owners to publish updates

Projects
Campus Events Portal
- Designed and built a web app for browsing college events with search, filters and saved favourites
- Created an admin dashboard for club leads to publish events and track registrations

Weather Glance
- Developed a small frontend that shows hourly forecasts with clear icons and colour-coded alerts
- Integrated a public weather feed and cached results in the browser for offline viewing
- Wrote unit tests for the filtering logic and documented setup steps in the readme

Education
B.Tech in Computer Science, Vellore Institute of Technology | 2020 - 2024
Relevant coursework: web engineering, human computer interaction, data structures, databases
"""

# 40 words of prose: no headings, no contact details, no capitalised name.
NON_RESUME_PROSE = (
    "the weather this week was mild and pleasant with light rain on tuesday "
    "and clear skies on the weekend so we walked along the river and watched "
    "the boats drift past while eating fresh bread from the market nearby today"
)

STUFFED_ML_TEXT = "python python python machine learning python " * 30

FIXED_NOW = datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def rich_resume() -> str:
    return RICH_FRONTEND_RESUME


@pytest.fixture
def non_resume_text() -> str:
    return NON_RESUME_PROSE


@pytest.fixture
def stuffed_text() -> str:
    return STUFFED_ML_TEXT


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW
