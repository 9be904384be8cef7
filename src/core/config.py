"""Configuration models and YAML loader for the applicant screening engine."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_SKILL_TAGS = (
    "React", "Node.js", "Python", "JavaScript", "TypeScript",
    "Java", "SQL", "MongoDB", "AWS", "Docker",
    "UI/UX", "Figma", "Data Analysis", "Machine Learning", "Excel",
)

DEFAULT_PROJECT_TYPE_TAGS = (
    "UI/UX Design", "Web Development", "Mobile Development", "AI/ML",
    "Data Science", "IoT", "Cloud/DevOps", "Blockchain",
    "Game Development", "E-commerce", "Education",
)


class FilterConfig(BaseModel):
    """Applicant filter panel settings."""

    # None means an unset max experience bound is unbounded.
    experience_ceiling: int | None = Field(default=100, ge=0)
    skill_tags: list[str] = Field(default_factory=lambda: list(DEFAULT_SKILL_TAGS))
    project_type_tags: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PROJECT_TYPE_TAGS),
    )

    @field_validator("skill_tags", "project_type_tags")
    @classmethod
    def tags_not_blank(cls, v: list[str]) -> list[str]:
        tags = [tag.strip() for tag in v]
        if any(not tag for tag in tags):
            msg = "tags must not be empty"
            raise ValueError(msg)
        return tags


class ExportConfig(BaseModel):
    """CSV export configuration."""

    output_dir: str = "exports"

    @field_validator("output_dir")
    @classmethod
    def output_dir_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "output_dir must not be empty"
            raise ValueError(msg)
        return v.strip()


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    filters: FilterConfig = Field(default_factory=FilterConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
