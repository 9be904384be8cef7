"""Filter chain for applicant screening.

Stage order:
  1. SearchTermFilter       : name OR email, case-insensitive substring
  2. StatusFilter           : exact status, case-insensitive
  3. SkillsFilter           : any selected skill inside any technical skill/tool
  4. ProjectTypeFilter      : any selected type inside any project category,
                              area of interest or project type
  5. ExperienceRangeFilter  : experience_years within [min, max] inclusive

Every stage keeps the input order and never mutates its input. A stage whose
criteria are at default passes everything through, and build_filter_chain
leaves it out entirely.
"""

import logging
from collections.abc import Callable, Sequence

from src.core.schemas import Applicant
from src.pipeline.criteria import STATUS_ALL, FilterCriteria, parse_experience_bound

logger = logging.getLogger(__name__)

# A filter is a callable that takes applicants and returns a subset.
Filter = Callable[[list[Applicant]], list[Applicant]]

# Upper bound the filter panel uses when no max experience is entered.
DEFAULT_EXPERIENCE_CEILING = 100


class SearchTermFilter:
    """Keep applicants whose name or email contains the search term."""

    def __init__(self, search_term: str) -> None:
        self._term = search_term.lower() if search_term.strip() else ""

    def __call__(self, applicants: list[Applicant]) -> list[Applicant]:
        if not self._term:
            return applicants
        result = [a for a in applicants if self._matches(a)]
        _log_removed("SearchTermFilter", applicants, result)
        return result

    def _matches(self, applicant: Applicant) -> bool:
        profile = applicant.profile
        return self._term in profile.name.lower() or self._term in profile.email.lower()


class StatusFilter:
    """Keep applicants with the selected status. "all" is a no-op."""

    def __init__(self, status: str) -> None:
        status = status.strip().lower()
        self._status = "" if status == STATUS_ALL else status

    def __call__(self, applicants: list[Applicant]) -> list[Applicant]:
        if not self._status:
            return applicants
        result = [a for a in applicants if a.status.lower() == self._status]
        _log_removed("StatusFilter", applicants, result)
        return result


class SkillsFilter:
    """Keep applicants owning at least one selected skill (partial match).

    Owned skills are technical skills plus tools.
    """

    def __init__(self, skills: Sequence[str]) -> None:
        self._skills = [s.lower() for s in skills]

    def __call__(self, applicants: list[Applicant]) -> list[Applicant]:
        if not self._skills:
            return applicants
        result = [a for a in applicants if _any_partial(self._skills, skill_terms(a))]
        _log_removed("SkillsFilter", applicants, result)
        return result


class ProjectTypeFilter:
    """Keep applicants matching at least one selected project type (partial match)."""

    def __init__(self, project_types: Sequence[str]) -> None:
        self._types = [t.lower() for t in project_types]

    def __call__(self, applicants: list[Applicant]) -> list[Applicant]:
        if not self._types:
            return applicants
        result = [a for a in applicants if _any_partial(self._types, project_type_terms(a))]
        _log_removed("ProjectTypeFilter", applicants, result)
        return result


class ExperienceRangeFilter:
    """Keep applicants whose experience_years is within [min, max].

    Bounds are raw panel text. An unparseable min is 0; an unparseable or
    empty max is the ceiling (None = unbounded). No-op when both are empty.
    """

    def __init__(
        self,
        min_text: str,
        max_text: str,
        ceiling: int | None = DEFAULT_EXPERIENCE_CEILING,
    ) -> None:
        self._active = bool(min_text.strip() or max_text.strip())
        self._min = parse_experience_bound(min_text, 0) or 0
        self._max = parse_experience_bound(max_text, ceiling)

    def __call__(self, applicants: list[Applicant]) -> list[Applicant]:
        if not self._active:
            return applicants
        result = [a for a in applicants if self._in_range(a.profile.experience_years)]
        _log_removed("ExperienceRangeFilter", applicants, result)
        return result

    def _in_range(self, years: int) -> bool:
        if years < self._min:
            return False
        return self._max is None or years <= self._max


def skill_terms(applicant: Applicant) -> list[str]:
    """Lower-cased technical skills and tools of an applicant."""
    return [s.lower() for s in applicant.profile.all_skills]


def project_type_terms(applicant: Applicant) -> list[str]:
    """Lower-cased project categories (non-empty), areas of interest and project types."""
    profile = applicant.profile
    categories = [p.category.lower() for p in profile.projects if p.category]
    return [
        *categories,
        *(a.lower() for a in profile.areas_of_interest),
        *(t.lower() for t in profile.project_types),
    ]


def build_filter_chain(
    criteria: FilterCriteria,
    experience_ceiling: int | None = DEFAULT_EXPERIENCE_CEILING,
) -> list[Filter]:
    """Build the active stages for the given criteria, in stage order."""
    filters: list[Filter] = []
    if criteria.has_search:
        filters.append(SearchTermFilter(criteria.search_term))
    if criteria.has_status:
        filters.append(StatusFilter(criteria.status_filter))
    if criteria.selected_skills:
        filters.append(SkillsFilter(criteria.selected_skills))
    if criteria.selected_project_types:
        filters.append(ProjectTypeFilter(criteria.selected_project_types))
    if criteria.has_experience_bounds:
        filters.append(ExperienceRangeFilter(
            criteria.min_experience, criteria.max_experience, experience_ceiling,
        ))
    return filters


def run_filter_chain(
    applicants: list[Applicant],
    filters: list[Filter],
) -> list[Applicant]:
    """Apply filters in order, returning the surviving applicants."""
    result = applicants
    for f in filters:
        result = f(result)
    return result


def filter_applicants(
    applicants: Sequence[Applicant],
    criteria: FilterCriteria,
    experience_ceiling: int | None = DEFAULT_EXPERIENCE_CEILING,
) -> list[Applicant]:
    """Return the applicants matching every active criterion, in input order."""
    filters = build_filter_chain(criteria, experience_ceiling)
    result = run_filter_chain(list(applicants), filters)
    logger.debug(
        "filter_applicants: %d stages, kept %d of %d",
        len(filters), len(result), len(applicants),
    )
    return result


def _any_partial(selected: list[str], owned: list[str]) -> bool:
    return any(sel in term for sel in selected for term in owned)


def _log_removed(name: str, before: list[Applicant], after: list[Applicant]) -> None:
    removed = len(before) - len(after)
    if removed:
        logger.debug("%s: removed %d applicants", name, removed)
