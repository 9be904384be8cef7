"""Tests for core schemas: CandidateProfile, Applicant, JobOpening."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from src.core.schemas import Applicant, CandidateProfile, JobOpening, ProjectEntry


class TestCandidateProfile:
    def test_defaults(self) -> None:
        p = CandidateProfile()
        assert p.name == ""
        assert p.technical_skills == []
        assert p.projects == []
        assert p.experience_years == 0

    def test_negative_experience_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CandidateProfile(experience_years=-1)

    def test_all_skills_order(self) -> None:
        p = CandidateProfile(technical_skills=["React", "SQL"], tools=["Git"])
        assert p.all_skills == ["React", "SQL", "Git"]

    def test_frozen_model(self) -> None:
        p = CandidateProfile(name="Alice")
        with pytest.raises(ValidationError):
            p.name = "Bob"  # type: ignore[misc]

    def test_project_category_optional(self) -> None:
        assert ProjectEntry(name="Shop").category == ""


class TestApplicant:
    def test_create_with_required_fields(self) -> None:
        a = Applicant(applicant_id="app-1")
        assert a.status == "Pending"
        assert a.applied_at is None
        assert a.profile == CandidateProfile()

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("pending", "Pending"), ("ACCEPTED", "Accepted"), (" Rejected ", "Rejected"), ("", "Pending")],
    )
    def test_status_normalized(self, raw: str, expected: str) -> None:
        assert Applicant(applicant_id="1", status=raw).status == expected

    def test_unknown_status_rejected(self) -> None:
        with pytest.raises(ValidationError, match="status must be one of"):
            Applicant(applicant_id="1", status="Shortlisted")

    def test_applied_at_parsed_from_iso(self) -> None:
        a = Applicant(applicant_id="1", applied_at="2026-01-25T09:30:00")  # type: ignore[arg-type]
        assert a.applied_at == datetime(2026, 1, 25, 9, 30)

    def test_equality(self) -> None:
        assert Applicant(applicant_id="1") == Applicant(applicant_id="1")
        assert Applicant(applicant_id="1") != Applicant(applicant_id="2")


class TestJobOpening:
    def test_applicants_default_empty(self) -> None:
        job = JobOpening(job_id="job-1", title="Designer")
        assert job.applicants == []
