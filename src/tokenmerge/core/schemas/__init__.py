"""
Schemas Package

JSON schema definitions and validation utilities for curriculum files.
"""

from .validator import (
    validate_curriculum,
    CurriculumValidationError,
    CURRICULUM_SCHEMA_VERSION,
)

__all__ = [
    "validate_curriculum",
    "CurriculumValidationError",
    "CURRICULUM_SCHEMA_VERSION",
]
