"""Status counts and result descriptions for a screened applicant list."""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from src.core.schemas import Applicant


class StatusSummary(BaseModel):
    """Applicant counts per application status."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    pending: int = 0
    accepted: int = 0
    rejected: int = 0


def count_by_status(applicants: Sequence[Applicant]) -> StatusSummary:
    statuses = [a.status for a in applicants]
    return StatusSummary(
        total=len(statuses),
        pending=statuses.count("Pending"),
        accepted=statuses.count("Accepted"),
        rejected=statuses.count("Rejected"),
    )


def describe_result(filtered_count: int, total_count: int) -> str:
    """Tell "nobody applied" apart from "nobody matched"."""
    if total_count == 0:
        return "No applicants yet"
    if filtered_count == 0:
        return "No applicants match the current filters"
    return f"Showing {filtered_count} of {total_count} applicants"
