"""
Module: curriculum.loader

Purpose:
    Load curricula (rule catalogs grouped by step) from JSON files with
    validation. The default four-step curriculum ships as package data.

Key Functions:
    - load_curriculum(): Load and validate a curriculum file
    - load_default_curriculum(): The packaged "Learning to Read" curriculum

Key Classes:
    - CurriculumLoadError: Exception for loading failures

Dependencies:
    - json, pathlib (std)
    - tokenmerge.core.utils.serialization: dict -> Curriculum
    - tokenmerge.core.schemas.validator: Schema validation

Used By:
    - engine.session.create_session
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from tokenmerge.core.models import Curriculum
from tokenmerge.core.schemas.validator import CurriculumValidationError
from tokenmerge.core.utils.serialization import deserialize_curriculum

logger = logging.getLogger(__name__)

DEFAULT_CURRICULUM_PATH = Path(__file__).parent / "data" / "default_curriculum.json"


class CurriculumLoadError(Exception):
    """Error loading a curriculum file."""
    pass


def load_curriculum(path: Path, *, strict: bool = True) -> Curriculum:
    """
    Load a curriculum from a JSON file.

    Process:
    1. Read and parse JSON
    2. Validate structure (and JSON Schema when strict)
    3. Build Curriculum models
    4. Warn about steps whose rules never produce the target word

    Args:
        path: Path to curriculum JSON
        strict: Run full JSON Schema validation

    Returns:
        Validated Curriculum

    Raises:
        CurriculumLoadError: If the file is missing, unreadable or invalid

    Example:
        >>> curriculum = load_curriculum(Path("curricula/animals.json"))
        >>> curriculum.step_count
        3
    """
    path = Path(path)
    if not path.exists():
        raise CurriculumLoadError(f"Curriculum file does not exist: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CurriculumLoadError(f"Failed to read curriculum {path.name}: {e}") from e

    try:
        curriculum = deserialize_curriculum(data, validate=True, strict=strict)
    except CurriculumValidationError as e:
        location = f" at {e.path}" if e.path else ""
        raise CurriculumLoadError(f"Invalid curriculum {path.name}{location}: {e}") from e
    except ValueError as e:
        raise CurriculumLoadError(f"Invalid curriculum {path.name}: {e}") from e

    for step in curriculum.steps:
        if not step.produces_target:
            logger.warning(
                f"Step {step.index} of {path.name}: no rule produces {step.example_word!r}, "
                "the step can never be completed"
            )

    logger.info(
        f"Loaded curriculum {curriculum.name or path.stem!r}: "
        f"{curriculum.step_count} steps, {len(curriculum.rules)} rules"
    )
    return curriculum


@lru_cache(maxsize=1)
def load_default_curriculum() -> Curriculum:
    """Load the packaged default curriculum (cached, it is immutable)."""
    return load_curriculum(DEFAULT_CURRICULUM_PATH)
