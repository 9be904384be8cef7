"""Core data models for the applicant screening engine."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

APPLICATION_STATUSES = ("Pending", "Accepted", "Rejected")


class ProjectEntry(BaseModel):
    """A project listed on a candidate profile."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    category: str = ""


class EducationEntry(BaseModel):
    """A single education record."""

    model_config = ConfigDict(frozen=True)

    degree: str = ""
    institution: str = ""
    year: str = ""


class CandidateProfile(BaseModel):
    """Profile data joined onto an application.

    Frozen: filters and exporters only read it.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    resume: str = ""
    technical_skills: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    areas_of_interest: list[str] = Field(default_factory=list)
    project_types: list[str] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    experience_years: int = Field(default=0, ge=0)

    @property
    def all_skills(self) -> list[str]:
        """Technical skills followed by tools, as entered."""
        return [*self.technical_skills, *self.tools]


class Applicant(BaseModel):
    """One application to a job opening, with the applicant's profile."""

    model_config = ConfigDict(frozen=True)

    applicant_id: str
    status: str = "Pending"
    applied_at: datetime | None = None
    profile: CandidateProfile = Field(default_factory=CandidateProfile)

    @field_validator("status")
    @classmethod
    def status_in_allowed(cls, v: str) -> str:
        v = v.strip()
        if not v:
            return "Pending"
        for allowed in APPLICATION_STATUSES:
            if v.lower() == allowed.lower():
                return allowed
        msg = f"status must be one of {list(APPLICATION_STATUSES)}, got '{v}'"
        raise ValueError(msg)


class JobOpening(BaseModel):
    """A job opening together with everyone who applied to it."""

    model_config = ConfigDict(frozen=True)

    job_id: str
    title: str
    applicants: list[Applicant] = Field(default_factory=list)
