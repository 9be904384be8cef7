"""Profile completion calculator.

Ten checks, each worth the same; percentage is rounded to a whole number.
"""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from src.core.schemas import CandidateProfile

# (label, check) in display order.
_CHECKS: list[tuple[str, Callable[[CandidateProfile], bool]]] = [
    ("Full Name", lambda p: bool(p.name)),
    ("Email", lambda p: bool(p.email)),
    ("Resume", lambda p: bool(p.resume)),
    ("Technical Skills", lambda p: len(p.technical_skills) > 0),
    ("Tools/Software", lambda p: len(p.tools) > 0),
    ("Education", lambda p: len(p.education) > 0),
    ("Work Experience", lambda p: p.experience_years > 0),
    ("Projects", lambda p: len(p.projects) > 0),
    ("Phone Number", lambda p: bool(p.phone)),
    ("LinkedIn Profile", lambda p: bool(p.linkedin)),
]


class ProfileCompletion(BaseModel):
    """How much of a candidate profile is filled in."""

    model_config = ConfigDict(frozen=True)

    percentage: int = Field(ge=0, le=100)
    completed: int
    total: int
    missing: list[str] = Field(default_factory=list)


def calculate_profile_completion(profile: CandidateProfile | None) -> ProfileCompletion:
    """Evaluate every check against the profile.

    A missing profile reports 0% and no missing items (nothing to prompt for).
    """
    total = len(_CHECKS)
    if profile is None:
        return ProfileCompletion(
            percentage=0,
            completed=0,
            total=total,
            missing=[],
        )

    missing = [label for label, check in _CHECKS if not check(profile)]
    completed = total - len(missing)
    return ProfileCompletion(
        percentage=int(completed / total * 100 + 0.5),
        completed=completed,
        total=total,
        missing=missing,
    )
