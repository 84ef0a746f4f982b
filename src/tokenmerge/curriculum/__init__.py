"""
Module: curriculum

Purpose:
    Curriculum loading. A curriculum is the fixed, ordered rule catalog
    partitioned into one rule group per step, plus each step's target word.

Key Functions:
    - load_curriculum(): Load and validate a curriculum JSON file
    - load_default_curriculum(): The packaged four-step curriculum
"""

from .loader import (
    load_curriculum,
    load_default_curriculum,
    CurriculumLoadError,
    DEFAULT_CURRICULUM_PATH,
)

__all__ = [
    "load_curriculum",
    "load_default_curriculum",
    "CurriculumLoadError",
    "DEFAULT_CURRICULUM_PATH",
]
