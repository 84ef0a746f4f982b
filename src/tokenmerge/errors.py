"""
Module: errors

Purpose:
    Exceptions raised by the step controller.

    Only caller misuse is raised. A selection that matches no rule is an
    expected outcome and is reported as a failed MergeOutcome instead.

Key Classes:
    - InvalidStepError: Reset/advance outside [0, step_count)

Used By:
    - engine.session.TokenizationSession
    - core.models.curriculum.Curriculum
"""

from __future__ import annotations


class InvalidStepError(IndexError):
    """Raised when a curriculum step index is outside [0, step_count)."""

    def __init__(self, step: int, step_count: int):
        super().__init__(
            f"Step {step} is out of range (curriculum has {step_count} steps)"
        )
        self.step = step
        self.step_count = step_count
