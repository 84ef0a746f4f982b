"""
Schema Validation Utilities

Validates curriculum JSON data before it is turned into models.

Two levels:
- Basic checks (always): required fields, schema version, field types
- Strict checks: full JSON Schema validation with jsonschema
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
CURRICULUM_SCHEMA_VERSION = 1


_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class CurriculumValidationError(Exception):
    """Raised when curriculum data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_curriculum(data: dict[str, Any], *, strict: bool = True) -> None:
    """
    Validate curriculum data.

    Args:
        data: Curriculum dictionary (as loaded from JSON)
        strict: If True, also validate against the JSON Schema

    Raises:
        CurriculumValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise CurriculumValidationError(
            f"Curriculum must be a JSON object, got {type(data).__name__}"
        )

    missing = [f for f in ("schema_version", "steps") if f not in data]
    if missing:
        raise CurriculumValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data.get("schema_version")
    if version != CURRICULUM_SCHEMA_VERSION:
        raise CurriculumValidationError(
            f"Unsupported curriculum schema version: {version} (expected {CURRICULUM_SCHEMA_VERSION})",
            path="schema_version",
        )

    steps = data["steps"]
    if not isinstance(steps, list) or not steps:
        raise CurriculumValidationError(
            "Curriculum must define at least one step", path="steps"
        )

    for i, step in enumerate(steps):
        _validate_step(step, f"steps.{i}")

    if strict:
        schema = _load_schema("curriculum")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise CurriculumValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def _validate_step(step: Any, path: str) -> None:
    """Basic structure checks for a single step."""
    if not isinstance(step, dict):
        raise CurriculumValidationError("Step must be an object", path=path)

    word = step.get("example_word")
    if not isinstance(word, str) or not word:
        raise CurriculumValidationError(
            f"Invalid example_word: {word!r}", path=f"{path}.example_word"
        )

    rules = step.get("rules")
    if not isinstance(rules, list):
        raise CurriculumValidationError(
            "Step rules must be a list", path=f"{path}.rules"
        )

    for j, rule in enumerate(rules):
        rule_path = f"{path}.rules.{j}"
        if not isinstance(rule, dict):
            raise CurriculumValidationError("Rule must be an object", path=rule_path)
        missing = [f for f in ("from", "to") if f not in rule]
        if missing:
            raise CurriculumValidationError(
                f"Missing required fields: {missing}",
                path=rule_path,
                errors=[f"Missing field: {f}" for f in missing],
            )
        if not isinstance(rule["from"], str) or not isinstance(rule["to"], str):
            raise CurriculumValidationError(
                "Rule 'from' and 'to' must be strings", path=rule_path
            )
