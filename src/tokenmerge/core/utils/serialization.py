"""
Serialization Utilities

Provides to/from dict utilities for curriculum models.

The JSON field names follow the learner-facing vocabulary ("from"/"to")
while the models use `source`/`target`, since `from` is a Python keyword.
Step indices are positional and never stored.
"""

from __future__ import annotations

from typing import Any

from ..models.curriculum import Curriculum, CurriculumStep
from ..models.rules import MergeRule
from ..schemas.validator import validate_curriculum, CURRICULUM_SCHEMA_VERSION


# ─────────────────────────────────────────────────────────────────────────────
# Rule Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_rule(rule: MergeRule) -> dict[str, Any]:
    """Serialize a MergeRule to a dictionary."""
    return {
        "from": rule.source,
        "to": rule.target,
        "description": rule.description,
        "explanation": rule.explanation,
    }


def deserialize_rule(data: dict[str, Any]) -> MergeRule:
    """
    Deserialize a MergeRule from a dictionary.

    Raises:
        ValueError: If the rule fields are invalid
    """
    return MergeRule(
        source=data["from"],
        target=data["to"],
        description=data.get("description", ""),
        explanation=data.get("explanation", ""),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Curriculum Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_curriculum(curriculum: Curriculum) -> dict[str, Any]:
    """
    Serialize a Curriculum to a dictionary.

    The output can be written to JSON and will pass schema validation.

    Args:
        curriculum: Curriculum instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    data: dict[str, Any] = {"schema_version": CURRICULUM_SCHEMA_VERSION}
    if curriculum.name:
        data["name"] = curriculum.name
    data["steps"] = [
        {
            "example_word": step.example_word,
            "narration": step.narration,
            "rules": [serialize_rule(rule) for rule in step.rules],
        }
        for step in curriculum.steps
    ]
    return data


def deserialize_curriculum(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = True,
) -> Curriculum:
    """
    Deserialize a Curriculum from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate the data first
        strict: Passed to validate_curriculum (full JSON Schema check)

    Returns:
        Curriculum instance

    Raises:
        CurriculumValidationError: If validate=True and data is invalid
        ValueError: If data cannot be turned into models
    """
    if validate:
        validate_curriculum(data, strict=strict)

    steps = tuple(
        CurriculumStep(
            index=i,
            example_word=step_data["example_word"],
            narration=step_data.get("narration", ""),
            rules=tuple(deserialize_rule(r) for r in step_data.get("rules", [])),
        )
        for i, step_data in enumerate(data["steps"])
    )
    return Curriculum(steps=steps, name=data.get("name", ""))
