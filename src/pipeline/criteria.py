"""Filter criteria value object for the applicant filter panel.

Criteria are frozen: every edit (toggle, clear) returns a new value, so the
panel that owns them can hand the current value to the filter engine as-is.
Experience bounds stay as the raw text typed into the panel and are parsed
leniently when the experience stage runs.
"""

import re

from pydantic import BaseModel, ConfigDict, field_validator

STATUS_ALL = "all"

_LEADING_INT = re.compile(r"^\s*([+-]?)0*(\d+)")

# Bounds longer than this many digits are clamped to +/- _MAX_BOUND.
_MAX_BOUND_DIGITS = 9
_MAX_BOUND = 10**_MAX_BOUND_DIGITS - 1


class FilterCriteria(BaseModel):
    """What the reviewer has selected in the filter panel."""

    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    status_filter: str = STATUS_ALL
    selected_skills: tuple[str, ...] = ()
    selected_project_types: tuple[str, ...] = ()
    min_experience: str = ""
    max_experience: str = ""

    @field_validator("min_experience", "max_experience", mode="before")
    @classmethod
    def bound_as_text(cls, v: object) -> str:
        if v is None:
            return ""
        return str(v)

    @field_validator("status_filter", mode="before")
    @classmethod
    def status_default_all(cls, v: object) -> object:
        if v is None or (isinstance(v, str) and not v.strip()):
            return STATUS_ALL
        return v

    @property
    def has_search(self) -> bool:
        return bool(self.search_term.strip())

    @property
    def has_status(self) -> bool:
        return self.status_filter.strip().lower() != STATUS_ALL

    @property
    def has_experience_bounds(self) -> bool:
        return bool(self.min_experience.strip() or self.max_experience.strip())

    def toggle_skill(self, skill: str) -> "FilterCriteria":
        """Add the skill if not selected, remove it otherwise."""
        return self.model_copy(
            update={"selected_skills": _toggle(self.selected_skills, skill)},
        )

    def toggle_project_type(self, project_type: str) -> "FilterCriteria":
        """Add the project type if not selected, remove it otherwise."""
        return self.model_copy(
            update={
                "selected_project_types": _toggle(self.selected_project_types, project_type),
            },
        )

    def cleared(self) -> "FilterCriteria":
        """Criteria with every filter reset to its default."""
        return FilterCriteria()

    def active_filter_count(self) -> int:
        """Number of active filter groups, as shown on the panel badge."""
        return sum((
            self.has_search,
            self.has_status,
            bool(self.selected_skills),
            bool(self.selected_project_types),
            self.has_experience_bounds,
        ))

    def has_active_filters(self) -> bool:
        return self.active_filter_count() > 0


def parse_experience_bound(text: str, default: int | None) -> int | None:
    """Parse the leading integer of a bound ("3", "3.7", " 5 yrs").

    Anything without a leading integer yields ``default``. Very long numbers
    are clamped to +/- 999_999_999.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return default
    sign, digits = match.groups()
    value = _MAX_BOUND if len(digits) > _MAX_BOUND_DIGITS else int(digits)
    return -value if sign == "-" else value


def _toggle(items: tuple[str, ...], item: str) -> tuple[str, ...]:
    if item in items:
        return tuple(i for i in items if i != item)
    return (*items, item)
