import pytest
from pydantic import ValidationError

from models.responses import ResumeValidationResult
from services.resume_validator import (
    REASON_MISSING_BOTH,
    REASON_MISSING_IDENTIFIERS,
    REASON_MISSING_SECTIONS,
    validate_resume,
)


def test_valid_resume(rich_resume):
    result = validate_resume(rich_resume)
    assert result.is_valid
    assert result.rejection_reason is None
    assert result.detected_sections == ["Experience", "Education", "Skills", "Projects"]
    assert result.detected_identifiers == ["Email", "Phone", "LinkedIn", "Name"]


def test_rejects_plain_prose(non_resume_text):
    result = validate_resume(non_resume_text)
    assert not result.is_valid
    assert result.rejection_reason == REASON_MISSING_BOTH
    assert result.detected_sections == []
    assert result.detected_identifiers == []


def test_rejects_missing_sections_only():
    text = "Priya Sharma\npriya.sharma@example.com\nLooking for an internship this summer."
    result = validate_resume(text)
    assert not result.is_valid
    assert result.rejection_reason == REASON_MISSING_SECTIONS
    assert result.detected_sections == ["Experience"]
    assert "Email" in result.detected_identifiers
    assert "Name" in result.detected_identifiers


def test_rejects_missing_identifiers_only():
    text = "education\nschool of engineering\n\nskills\nwelding, carpentry\n"
    result = validate_resume(text)
    assert not result.is_valid
    assert result.rejection_reason == REASON_MISSING_IDENTIFIERS
    assert result.detected_sections == ["Education", "Skills"]
    assert result.detected_identifiers == []


def test_name_alone_is_enough_identifier():
    text = "Priya Sharma\n\nEducation\nB.Sc Physics\n\nCertifications\nFirst aid"
    result = validate_resume(text)
    assert result.is_valid
    assert result.detected_identifiers == ["Name"]


def test_name_only_searched_in_first_five_lines():
    text = "\n".join(["education", "skills", "x", "y", "z", "Priya Sharma"])
    result = validate_resume(text)
    assert "Name" not in result.detected_identifiers
    assert result.rejection_reason == REASON_MISSING_IDENTIFIERS


@pytest.mark.parametrize("text,identifier", [
    ("reach me at dev.kumar+jobs@mail.co.in", "Email"),
    ("call +91 98765 43210", "Phone"),
    ("(555) 123-4567", "Phone"),
    ("linkedin.com/in/dev-kumar", "LinkedIn"),
    ("https://github.com/devkumar", "GitHub"),
])
def test_detects_identifiers(text, identifier):
    assert identifier in validate_resume(text).detected_identifiers


def test_two_letter_words_are_not_degrees():
    result = validate_resume("let me be clear about the ma and ba of it")
    assert "Education" not in result.detected_sections


def test_degree_abbreviations_detected():
    result = validate_resume("B.E. Mechanical, 12th from state board")
    assert "Education" in result.detected_sections


@pytest.mark.parametrize("text", [
    "",
    "   \n\n\t",
    "\x00\x01\x02��%PDF-1.4 obj endobj",
    "a" * 20000,
])
def test_never_raises_and_reason_matches_validity(text):
    result = validate_resume(text)
    assert result.is_valid == (result.rejection_reason is None)


def test_deterministic(rich_resume):
    assert validate_resume(rich_resume) == validate_resume(rich_resume)


class TestValidationResultSchema:
    def test_invalid_requires_reason(self):
        with pytest.raises(ValidationError):
            ResumeValidationResult(is_valid=False)

    def test_valid_rejects_reason(self):
        with pytest.raises(ValidationError):
            ResumeValidationResult(is_valid=True, rejection_reason="nope")

    def test_defaults(self):
        r = ResumeValidationResult(is_valid=True)
        assert r.detected_sections == []
        assert r.detected_identifiers == []


def test_crlf_line_endings():
    result = validate_resume("Priya Sharma\r\nSkills\r\nEducation\r\n")
    assert result.is_valid
    assert result.detected_identifiers == ["Name"]


@pytest.mark.parametrize("text,is_education", [
    ("M.A. English Literature", True),
    ("B.E. Mechanical", True),
    ("MA English Literature", False),
    ("BE Mechanical", False),
])
def test_two_letter_degrees_need_dots(text, is_education):
    assert ("Education" in validate_resume(text).detected_sections) is is_education
