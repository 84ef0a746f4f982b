"""
Module: engine.config

Purpose:
    Configuration dataclass for creating a tokenization session.
    Immutable configuration with validation on construction.

Key Classes:
    - SessionConfig: Curriculum source and starting step

Used By:
    - engine.session.create_session
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class SessionConfig:
    """
    Configuration for a tokenization session (immutable).

    Attributes:
        curriculum_path: Custom curriculum JSON, None for the packaged default
        start_step: Step to reset to on creation
        strict_validation: Validate the curriculum against the JSON Schema

    Invariants:
        - start_step >= 0 (upper bound is checked against the curriculum)

    Example:
        >>> config = SessionConfig(start_step=2)
        >>> session = create_session(config)
        >>> session.current_word
        'playing'
    """

    curriculum_path: Optional[Path] = None
    start_step: int = 0
    strict_validation: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.start_step < 0:
            raise ValueError(f"start_step must be non-negative: {self.start_step}")
        if self.curriculum_path is not None and not isinstance(self.curriculum_path, Path):
            object.__setattr__(self, "curriculum_path", Path(self.curriculum_path))

    @property
    def uses_default_curriculum(self) -> bool:
        return self.curriculum_path is None
