"""Tests for configuration models and YAML loading."""

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from src.core.config import (
    DEFAULT_PROJECT_TYPE_TAGS,
    DEFAULT_SKILL_TAGS,
    ExportConfig,
    FilterConfig,
    Settings,
)

SHIPPED_SETTINGS = Path(__file__).resolve().parents[2] / "config" / "settings.yaml"


class TestFilterConfig:
    def test_defaults(self) -> None:
        f = FilterConfig()
        assert f.experience_ceiling == 100
        assert f.skill_tags == list(DEFAULT_SKILL_TAGS)
        assert f.project_type_tags == list(DEFAULT_PROJECT_TYPE_TAGS)

    def test_unbounded_ceiling(self) -> None:
        assert FilterConfig(experience_ceiling=None).experience_ceiling is None

    def test_negative_ceiling_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FilterConfig(experience_ceiling=-1)

    def test_tags_stripped(self) -> None:
        f = FilterConfig(skill_tags=["  Rust ", "Go"])
        assert f.skill_tags == ["Rust", "Go"]

    def test_blank_tag_rejected(self) -> None:
        with pytest.raises(ValidationError, match="tags must not be empty"):
            FilterConfig(project_type_tags=["IoT", "  "])


class TestExportConfig:
    def test_default_output_dir(self) -> None:
        assert ExportConfig().output_dir == "exports"

    def test_empty_output_dir_rejected(self) -> None:
        with pytest.raises(ValidationError, match="output_dir must not be empty"):
            ExportConfig(output_dir=" ")


class TestSettings:
    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_content = dedent("""\
            filters:
              experience_ceiling: 40
              skill_tags: [Python, SQL]
            export:
              output_dir: out/csv
        """)
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(yaml_content)

        settings = Settings.from_yaml(config_file)

        assert settings.filters.experience_ceiling == 40
        assert settings.filters.skill_tags == ["Python", "SQL"]
        assert settings.filters.project_type_tags == list(DEFAULT_PROJECT_TYPE_TAGS)
        assert settings.export.output_dir == "out/csv"

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("")
        settings = Settings.from_yaml(config_file)
        assert settings == Settings()

    def test_null_ceiling_from_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("filters:\n  experience_ceiling: null\n")
        assert Settings.from_yaml(config_file).filters.experience_ceiling is None

    def test_file_not_found(self) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml("/nonexistent/path.yaml")

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("filters:\n  experience_ceiling: lots\n")
        with pytest.raises(ValidationError):
            Settings.from_yaml(config_file)

    def test_load_shipped_settings(self) -> None:
        """The shipped config/settings.yaml must be valid."""
        settings = Settings.from_yaml(SHIPPED_SETTINGS)
        assert settings.filters.experience_ceiling == 100
        assert settings.filters.skill_tags == list(DEFAULT_SKILL_TAGS)
        assert settings.filters.project_type_tags == list(DEFAULT_PROJECT_TYPE_TAGS)
        assert settings.export.output_dir == "exports"
