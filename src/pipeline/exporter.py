"""CSV export of (filtered) applicants.

One row per applicant in input order. Missing values render as fixed
placeholders so every cell is non-empty.
"""

import csv
import io
import logging
import re
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from src.core.schemas import Applicant

logger = logging.getLogger(__name__)

CSV_HEADERS = (
    "Name",
    "Email",
    "Phone",
    "Applied Date",
    "Status",
    "Skills",
    "Experience (Years)",
    "Resume URL",
)

_WHITESPACE_RUN = re.compile(r"\s+")

# English month abbreviations, independent of LC_TIME.
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_applied_date(applied_at: datetime | None) -> str:
    """Format as DD-Mon-YYYY (e.g. 25-Jan-2026), or N/A."""
    if applied_at is None:
        return "N/A"
    return f"{applied_at.day:02d}-{_MONTHS[applied_at.month - 1]}-{applied_at.year:04d}"


def applicant_row(applicant: Applicant) -> list[str]:
    """Project one applicant onto the CSV columns."""
    profile = applicant.profile
    skills = profile.all_skills
    return [
        profile.name or "N/A",
        profile.email or "N/A",
        profile.phone or "Not provided",
        format_applied_date(applicant.applied_at),
        applicant.status or "Pending",
        "; ".join(skills) if skills else "Not provided",
        str(profile.experience_years),
        profile.resume or "Not uploaded",
    ]


def export_applicants_csv(applicants: Sequence[Applicant]) -> str:
    """Render applicants as CSV text (header + rows, no trailing newline).

    Cells containing a comma, quote or newline are quoted, quotes doubled.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(CSV_HEADERS)
    for applicant in applicants:
        writer.writerow(applicant_row(applicant))
    return buffer.getvalue().removesuffix("\n")


def csv_filename(job_title: str) -> str:
    """Download filename: whitespace runs in the title become underscores."""
    return f"{_WHITESPACE_RUN.sub('_', job_title)}_applicants.csv"


def write_applicants_csv(
    applicants: Sequence[Applicant],
    job_title: str,
    output_dir: str | Path,
) -> Path:
    """Write the CSV export for a job and return the file path."""
    if not applicants:
        msg = "No applicants to export"
        raise ValueError(msg)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / csv_filename(job_title)
    path.write_text(export_applicants_csv(applicants), encoding="utf-8")
    logger.info("Exported %d applicants to %s", len(applicants), path)
    return path
