"""
Module: engine.session

Purpose:
    The step controller: owns the two token sequences for the current
    curriculum step and is the only place they change.

Key Functions:
    - create_session(): Build a session from a SessionConfig

Key Classes:
    - TokenizationSession: Reset, merge, advance

State machine:
    Step(0) -> Step(1) -> ... -> Step(n-1)

    Within a step, (input, output) changes only through a successful
    merge. Advancing requires the step's word as an output token and is
    impossible from the final step; finishing the final word completes
    the curriculum, and moving on from there is the caller's business.

Dependencies:
    - engine.availability: Rule availability filter
    - engine.merge: Matching and rewriting
    - curriculum.loader: Curriculum loading
    - scoring: Merge result notification

Used By:
    - UI layers driving the tokenization puzzle
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from tokenmerge.core.models import (
    Curriculum,
    MergeOutcome,
    MergeRule,
    SessionState,
    Token,
    TokenId,
    tokenize,
)
from tokenmerge.curriculum import load_curriculum, load_default_curriculum
from tokenmerge.errors import InvalidStepError
from tokenmerge.scoring import notify_scorer
from tokenmerge.scoring.scorer import ScorerLike

from .availability import available_rules
from .config import SessionConfig
from .merge import apply_merge, plan_merge

logger = logging.getLogger(__name__)


def create_session(
    config: Optional[SessionConfig] = None,
    *,
    scorer: Optional[ScorerLike] = None,
) -> TokenizationSession:
    """
    Create a session from configuration.

    Args:
        config: Session configuration (defaults to the packaged curriculum)
        scorer: Default scorer notified of every merge attempt

    Returns:
        Session reset to config.start_step

    Raises:
        CurriculumLoadError: If a custom curriculum cannot be loaded
        InvalidStepError: If start_step is beyond the curriculum

    Example:
        >>> session = create_session()
        >>> [t.text for t in session.input_tokens]
        ['c', 'a', 't']
    """
    config = config or SessionConfig()
    if config.uses_default_curriculum:
        curriculum = load_default_curriculum()
    else:
        curriculum = load_curriculum(config.curriculum_path, strict=config.strict_validation)

    session = TokenizationSession(curriculum, scorer=scorer)
    if config.start_step != 0:
        session.reset_to_step(config.start_step)
    return session


@dataclass
class TokenizationSession:
    """
    Single-actor session over one curriculum.

    Every public operation completes synchronously. A merge either applies
    exactly one rewrite or leaves the sequences untouched.

    Attributes:
        curriculum: Rule catalog and step words
        scorer: Default scorer for try_merge (may be None)
    """

    curriculum: Curriculum
    scorer: Optional[ScorerLike] = None

    # Internal state
    _current_step: int = field(init=False, default=0)
    _input: List[Token] = field(init=False, default_factory=list)
    _output: List[Token] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        """Start at the first step."""
        self.reset_to_step(0)

    # ─────────────────────────────────────────────────────────────────────────
    # State Access
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def step_count(self) -> int:
        return self.curriculum.step_count

    @property
    def input_tokens(self) -> tuple[Token, ...]:
        """Tokens still waiting to be merged (read-only snapshot)."""
        return tuple(self._input)

    @property
    def output_tokens(self) -> tuple[Token, ...]:
        """Merge results in creation order (read-only snapshot)."""
        return tuple(self._output)

    @property
    def current_word(self) -> str:
        return self.curriculum.example_word(self._current_step)

    @property
    def current_narration(self) -> str:
        return self.curriculum.step(self._current_step).narration

    def current_available_rules(self) -> tuple[MergeRule, ...]:
        """
        Rules usable right now, in catalog order.

        Recomputed on every call from the step and the token texts.
        """
        return available_rules(self.curriculum, self._current_step, self._input, self._output)

    def snapshot(self) -> SessionState:
        """Immutable copy of the current state."""
        return SessionState(
            current_step=self._current_step,
            input=tuple(self._input),
            output=tuple(self._output),
            available_rules=self.current_available_rules(),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Step Control
    # ─────────────────────────────────────────────────────────────────────────

    def reset_to_step(self, step: int) -> None:
        """
        Start a step from scratch.

        Input becomes one token per character of the step's word and
        output is emptied.

        Args:
            step: Step index, 0 <= step < step_count

        Raises:
            InvalidStepError: If step is out of range (state unchanged)
        """
        word = self.curriculum.example_word(step)
        self._current_step = step
        self._input = tokenize(word)
        self._output = []
        logger.info(f"Reset to step {step + 1}/{self.step_count}: {word!r}")

    def retry(self) -> None:
        """Restart the current step."""
        self.reset_to_step(self._current_step)

    @property
    def step_solved(self) -> bool:
        """True once the step's word exists as a single output token."""
        word = self.current_word
        return any(token.text == word for token in self._output)

    def can_advance(self) -> bool:
        """True if the step is solved and a later step exists."""
        return self.step_solved and self._current_step < self.step_count - 1

    def advance(self) -> None:
        """
        Move to the next step.

        Raises:
            InvalidStepError: If can_advance() is False
        """
        if not self.can_advance():
            raise InvalidStepError(self._current_step + 1, self.step_count)
        self.reset_to_step(self._current_step + 1)

    @property
    def is_complete(self) -> bool:
        """True on the final step once its word has been built."""
        return self._current_step == self.curriculum.final_step and self.step_solved

    # ─────────────────────────────────────────────────────────────────────────
    # Merging
    # ─────────────────────────────────────────────────────────────────────────

    def try_merge(
        self,
        selection: Iterable[TokenId],
        scorer: Optional[ScorerLike] = None,
    ) -> MergeOutcome:
        """
        Attempt to merge the selected tokens.

        Args:
            selection: Ids of the selected tokens (from input, output or both)
            scorer: Scorer for this attempt, overriding the session default

        Returns:
            MergeOutcome; success=False means no available rule matched and
            nothing changed

        Example:
            >>> c, a, t = session.input_tokens
            >>> session.try_merge({c.id, a.id}).matched_rule.target
            'ca'
        """
        selection = frozenset(selection)
        outcome = plan_merge(
            selection,
            self._input,
            self._output,
            self.current_available_rules(),
            target_word=self.current_word,
        )

        if outcome.success:
            self._input, self._output = apply_merge(outcome, self._input, self._output)
            logger.debug(
                f"Applied {outcome.matched_rule!r}: "
                f"{len(self._input)} input, {len(self._output)} output tokens"
            )
            if outcome.step_complete:
                logger.info(f"Step {self._current_step + 1} solved: {self.current_word!r}")

        notify_scorer(scorer if scorer is not None else self.scorer, outcome.success)
        return outcome

    def __repr__(self) -> str:
        return (
            f"TokenizationSession(step={self._current_step}, "
            f"input={[t.text for t in self._input]}, "
            f"output={[t.text for t in self._output]})"
        )
