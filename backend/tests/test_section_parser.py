import pytest

from services.section_parser import (
    detect_identifiers,
    detect_sections,
    detect_structure_sections,
    has_date,
    has_organization_context,
)


SAMPLE_RESUME = """John Doe
john.doe@email.com | (555) 123-4567
linkedin.com/in/johndoe | github.com/johndoe

Summary
Software engineer building web applications.

Work Experience
Software Engineer | StartupXYZ | 2019 - 2021
- Developed React frontend components

Education
B.S. Computer Science | State University | 2019

Technical Skills
Python, JavaScript, React, Docker

Certifications
AWS Certified Cloud Practitioner
"""


def test_detect_sections_all():
    assert detect_sections(SAMPLE_RESUME) == [
        "Experience", "Education", "Skills", "Certifications",
    ]


def test_detect_sections_case_insensitive():
    assert detect_sections("PROJECTS\nPERSONAL PROJECTS") == ["Projects"]


def test_detect_sections_whole_words_only():
    # "toolshed" and "skillset" must not count as headings
    assert detect_sections("a toolshed and a skillset") == []


def test_detect_sections_empty():
    assert detect_sections("") == []


def test_detect_identifiers_order():
    assert detect_identifiers(SAMPLE_RESUME) == [
        "Email", "Phone", "LinkedIn", "GitHub", "Name",
    ]


def test_name_must_be_whole_line():
    assert "Name" not in detect_identifiers("I worked With Many People here")
    assert "Name" not in detect_identifiers("JOHN DOE")


def test_structure_sections_lowercase_text():
    text = SAMPLE_RESUME.lower()
    assert detect_structure_sections(text) == ["education", "skills", "experience", "contact"]


def test_structure_contact_from_bare_email():
    assert detect_structure_sections("reach me: jane@mail.io") == ["contact"]


@pytest.mark.parametrize("text,expected", [
    ("jan 2021 - mar 2022", True),
    ("aug. 2020", True),
    ("2020 to current", True),
    ("graduated 2019", True),
    ("05/21", True),
    ("team of 12", False),
    ("", False),
])
def test_has_date(text, expected):
    assert has_date(text) is expected


def test_organization_context_lexicon():
    assert has_organization_context("internship at a startup")
    assert has_organization_context("tcs pvt ltd")
    assert not has_organization_context("at home")


def test_organization_context_needs_capitalised_name():
    original = "Analyst at Deloitte"
    assert not has_organization_context(original.lower())
    assert has_organization_context(original.lower(), original)
    assert not has_organization_context("analyst at home", "analyst at home")
