"""Orchestrator: wires the filter chain, status summary, and CSV export per job.

Data flow:
  1. Job openings (loaded by src.core.loader)
  2. Filter chain → matching applicants
  3. Status summary + result description
  4. Optional CSV export of the matching applicants
"""

import logging
from pathlib import Path

from src.core.config import Settings
from src.core.schemas import Applicant, JobOpening
from src.pipeline.criteria import FilterCriteria
from src.pipeline.exporter import write_applicants_csv
from src.pipeline.filters import filter_applicants
from src.pipeline.summary import StatusSummary, count_by_status, describe_result

logger = logging.getLogger(__name__)


class ScreeningResult:
    """Outcome of screening one job's applicants."""

    def __init__(
        self,
        job: JobOpening,
        matched: list[Applicant],
        summary: StatusSummary,
    ) -> None:
        self.job = job
        self.matched = matched
        self.summary = summary

    @property
    def total_count(self) -> int:
        return len(self.job.applicants)

    @property
    def matched_count(self) -> int:
        return len(self.matched)

    @property
    def description(self) -> str:
        return describe_result(self.matched_count, self.total_count)


def screen_job(
    job: JobOpening,
    criteria: FilterCriteria,
    settings: Settings,
) -> ScreeningResult:
    """Filter a single job's applicants and summarize the result."""
    matched = filter_applicants(
        job.applicants, criteria, settings.filters.experience_ceiling,
    )
    logger.info(
        "Job '%s': %d of %d applicants match",
        job.title, len(matched), len(job.applicants),
    )
    return ScreeningResult(job=job, matched=matched, summary=count_by_status(matched))


def screen_all_jobs(
    jobs: list[JobOpening],
    criteria: FilterCriteria,
    settings: Settings,
) -> list[ScreeningResult]:
    """Screen every job with the same criteria."""
    return [screen_job(job, criteria, settings) for job in jobs]


def export_results_csv(
    results: list[ScreeningResult],
    settings: Settings,
) -> list[Path]:
    """Write one CSV per job with matching applicants. Empty results are skipped."""
    paths: list[Path] = []
    for r in results:
        if not r.matched:
            logger.info("Job '%s': no applicants to export", r.job.title)
            continue
        paths.append(write_applicants_csv(r.matched, r.job.title, settings.export.output_dir))
    return paths
