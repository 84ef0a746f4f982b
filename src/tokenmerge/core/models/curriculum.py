"""
Module: curriculum

Purpose:
    Provides the rule catalog: an ordered list of merge rules partitioned
    into one contiguous group per curriculum step, each step owning the
    target word the learner must build.

Key Classes:
    - CurriculumStep: Target word, narration and rule group for one step
    - Curriculum: Ordered steps; the concatenation of their groups is the
      catalog

Dependencies:
    - dataclasses (std)
    - functools (std)
    - .rules.MergeRule

Used By:
    - core.utils.serialization: to/from dict
    - curriculum.loader: Loading the packaged and custom curricula
    - engine.availability: Step group lookup
    - engine.session: Step controller
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Optional

from tokenmerge.errors import InvalidStepError

from .rules import MergeRule


@dataclass(frozen=True)
class CurriculumStep:
    """
    One stage of the exercise.

    Attributes:
        index: Position of the step in the curriculum
        example_word: Word that must appear as a single output token
        narration: Learner-facing sentence shown for the step
        rules: Rule group unlocked by this step, in catalog order

    Invariants:
        - index >= 0
        - example_word is non-empty and contains no whitespace
    """

    index: int
    example_word: str
    narration: str = ""
    rules: tuple[MergeRule, ...] = ()

    def __post_init__(self) -> None:
        """Validate step on construction."""
        if self.index < 0:
            raise ValueError(f"Step index cannot be negative: {self.index}")
        if not self.example_word:
            raise ValueError(f"Step {self.index} has an empty example word")
        if any(ch.isspace() for ch in self.example_word):
            raise ValueError(
                f"Step {self.index} example word cannot contain whitespace: {self.example_word!r}"
            )

    @property
    def produces_target(self) -> bool:
        """True if some rule in the group produces the example word."""
        return any(rule.target == self.example_word for rule in self.rules)


@dataclass(frozen=True)
class Curriculum:
    """
    Fixed, ordered rule catalog grouped by step.

    Attributes:
        steps: Curriculum steps in order
        name: Optional display name

    Invariants:
        - At least one step
        - steps[i].index == i

    Example:
        >>> curriculum = load_default_curriculum()
        >>> curriculum.step_count
        4
        >>> curriculum.example_word(0)
        'cat'
        >>> [r.source for r in curriculum.rules_for_step(0)]
        ['c a', 'ca t']
    """

    steps: tuple[CurriculumStep, ...]
    name: str = ""

    def __post_init__(self) -> None:
        """Validate curriculum on construction."""
        if not self.steps:
            raise ValueError("Curriculum must have at least one step")
        for position, step in enumerate(self.steps):
            if step.index != position:
                raise ValueError(
                    f"Step at position {position} has index {step.index}"
                )

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties (NEVER stored)
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def step_count(self) -> int:
        return len(self.steps)

    @cached_property
    def rules(self) -> tuple[MergeRule, ...]:
        """
        Full catalog in order.

        Returns:
            Concatenation of every step's rule group
        """
        return tuple(rule for step in self.steps for rule in step.rules)

    @property
    def final_step(self) -> int:
        return len(self.steps) - 1

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def check_step(self, step: int) -> None:
        """
        Raise InvalidStepError unless 0 <= step < step_count.

        bool is rejected even though it is an int subclass.
        """
        if isinstance(step, bool) or not isinstance(step, int):
            raise InvalidStepError(step, self.step_count)
        if not 0 <= step < self.step_count:
            raise InvalidStepError(step, self.step_count)

    def step(self, step: int) -> CurriculumStep:
        self.check_step(step)
        return self.steps[step]

    def example_word(self, step: int) -> str:
        return self.step(step).example_word

    def rules_for_step(self, step: int) -> tuple[MergeRule, ...]:
        """
        Get the rule group unlocked by a step.

        Args:
            step: Step index

        Returns:
            The step's rules in catalog order

        Raises:
            InvalidStepError: If step is out of range
        """
        return self.step(step).rules

    def step_of(self, rule: MergeRule) -> Optional[int]:
        """Index of the step whose group contains rule, or None."""
        for step in self.steps:
            if rule in step.rules:
                return step.index
        return None

    def __repr__(self) -> str:
        words = [s.example_word for s in self.steps]
        return f"Curriculum({self.name!r}, words={words}, rules={len(self.rules)})"
