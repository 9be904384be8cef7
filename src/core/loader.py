"""Loads job openings and their applicants from backend JSON documents.

Accepted shapes:
  - a list of job documents, or
  - the grouped-applications response: {"jobsWithApplicants": [...]}.

Applicant documents carry a populated ``userId`` profile with the backend's
camelCase keys. Missing optional fields become "" / [] / 0 (never crash);
a status outside Pending/Accepted/Rejected raises ValidationError.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from src.core.schemas import (
    Applicant,
    CandidateProfile,
    EducationEntry,
    JobOpening,
    ProjectEntry,
)

logger = logging.getLogger(__name__)


def load_job_openings(path: str | Path) -> list[JobOpening]:
    """Load job openings from a JSON or YAML file."""
    path = Path(path)
    if not path.exists():
        msg = f"Applications file not found: {path}"
        raise FileNotFoundError(msg)

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        raw: Any = json.loads(text)
    else:
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in {path}: {e}"
            raise ValueError(msg) from e

    if isinstance(raw, dict):
        raw = raw.get("jobsWithApplicants", [])
    if not isinstance(raw, list):
        msg = f"Expected a list of job openings in {path}"
        raise ValueError(msg)

    jobs = [job_from_document(doc) for doc in raw]
    logger.info(
        "Loaded %d jobs with %d applicants from %s",
        len(jobs), sum(len(j.applicants) for j in jobs), path,
    )
    return jobs


def job_from_document(doc: dict[str, Any]) -> JobOpening:
    """Convert a job document (with embedded applicants) into a JobOpening."""
    _require_dict(doc, "job")
    applicants = doc.get("applicants")
    return JobOpening(
        job_id=_text(doc.get("_id", doc.get("id"))),
        title=_text(doc.get("title")),
        applicants=[
            applicant_from_document(a)
            for a in (applicants if isinstance(applicants, list) else [])
        ],
    )


def applicant_from_document(doc: dict[str, Any]) -> Applicant:
    """Convert an application document into an Applicant."""
    _require_dict(doc, "applicant")
    return Applicant(
        applicant_id=_text(doc.get("_id", doc.get("id"))),
        status=_text(doc.get("status")),
        applied_at=_unwrap(doc.get("date")) or None,
        profile=profile_from_document(_dict(doc.get("userId"))),
    )


def profile_from_document(user: dict[str, Any]) -> CandidateProfile:
    """Convert a populated user document into a CandidateProfile."""
    user = _dict(user)
    contact = _dict(user.get("contactInfo"))
    experience = _dict(user.get("experience"))
    return CandidateProfile(
        name=_text(user.get("name")),
        email=_text(user.get("email")),
        phone=_text(contact.get("phone")),
        linkedin=_text(contact.get("linkedin")),
        resume=_text(user.get("resume")),
        technical_skills=_str_list(user.get("technicalSkills")),
        tools=_str_list(user.get("tools")),
        projects=[
            ProjectEntry(name=_text(p.get("name")), category=_text(p.get("category")))
            for p in _dict_list(user.get("projects"))
        ],
        areas_of_interest=_str_list(user.get("areasOfInterest")),
        project_types=_str_list(user.get("projectTypes")),
        education=[
            EducationEntry(
                degree=_text(e.get("degree")),
                institution=_text(e.get("institution")),
                year=_text(e.get("year")),
            )
            for e in _dict_list(user.get("education"))
        ],
        experience_years=_as_int(experience.get("years")),
    )


def find_job(jobs: list[JobOpening], key: str) -> JobOpening:
    """Find a job by id, or by title (case-insensitive)."""
    for job in jobs:
        if job.job_id == key:
            return job
    for job in jobs:
        if job.title.lower() == key.lower().strip():
            return job
    msg = f"No job with id or title '{key}'"
    raise LookupError(msg)


def _unwrap(value: Any) -> Any:
    """Unwrap MongoDB extended JSON ({"$oid": ...}, {"$date": ...})."""
    if isinstance(value, dict):
        for marker in ("$oid", "$date"):
            if marker in value:
                return value[marker]
    return value


def _text(value: Any) -> str:
    value = _unwrap(value)
    if value is None:
        return ""
    return str(value).strip()


def _require_dict(doc: Any, kind: str) -> None:
    if not isinstance(doc, dict):
        msg = f"Expected {kind} document to be an object, got {type(doc).__name__}"
        raise ValueError(msg)


def _dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _dict_list(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def _as_int(value: Any) -> int:
    """Coerce a years value to a non-negative int (0 when unusable)."""
    try:
        return max(0, int(float(value)))
    except (TypeError, ValueError, OverflowError):
        return 0
