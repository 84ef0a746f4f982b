"""
Unit Tests for Curriculum Loading
"""

import json
import logging
from pathlib import Path

import pytest

from tokenmerge.curriculum import (
    CurriculumLoadError,
    DEFAULT_CURRICULUM_PATH,
    load_curriculum,
    load_default_curriculum,
)


def _write(tmp_path: Path, data) -> Path:
    path = tmp_path / "curriculum.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadCurriculum:
    """Tests for load_curriculum."""

    def test_load_when_valid_file_then_returns_curriculum(self, tmp_path, sample_curriculum_data):
        curriculum = load_curriculum(_write(tmp_path, sample_curriculum_data))

        assert curriculum.step_count == 2
        assert curriculum.example_word(1) == "cow"

    def test_load_when_missing_file_then_raises_load_error(self, tmp_path):
        with pytest.raises(CurriculumLoadError, match="does not exist"):
            load_curriculum(tmp_path / "nope.json")

    def test_load_when_bad_json_then_raises_load_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CurriculumLoadError, match="Failed to read"):
            load_curriculum(path)

    def test_load_when_invalid_schema_then_wraps_validation_error(self, tmp_path, sample_curriculum_data):
        sample_curriculum_data["schema_version"] = 0

        with pytest.raises(CurriculumLoadError, match="at schema_version"):
            load_curriculum(_write(tmp_path, sample_curriculum_data))

    def test_load_when_rule_invalid_without_strict_then_raises_load_error(self, tmp_path, sample_curriculum_data):
        """Model validation still rejects malformed patterns."""
        sample_curriculum_data["steps"][0]["rules"][0]["from"] = " d"

        with pytest.raises(CurriculumLoadError, match="single-space"):
            load_curriculum(_write(tmp_path, sample_curriculum_data), strict=False)

    def test_load_when_step_unsolvable_then_logs_warning(self, tmp_path, sample_curriculum_data, caplog):
        sample_curriculum_data["steps"][1]["rules"] = []

        with caplog.at_level(logging.WARNING, logger="tokenmerge.curriculum.loader"):
            curriculum = load_curriculum(_write(tmp_path, sample_curriculum_data))

        assert curriculum.rules_for_step(1) == ()
        assert "never be completed" in caplog.text


class TestLoadDefaultCurriculum:
    """Tests for the packaged curriculum."""

    def test_default_path_when_installed_then_exists(self):
        assert DEFAULT_CURRICULUM_PATH.exists()

    def test_load_default_when_called_twice_then_same_instance(self):
        assert load_default_curriculum() is load_default_curriculum()

    def test_load_default_when_called_then_four_steps(self):
        curriculum = load_default_curriculum()
        assert curriculum.name == "Learning to Read"
        assert curriculum.step_count == 4
        assert len(curriculum.rules) == 13
        assert curriculum.step(3).narration.startswith("Finally")
