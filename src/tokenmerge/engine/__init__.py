"""
Module: engine

Purpose:
    The token merge engine: rule availability, selection matching and the
    step controller that owns the token sequences.

Key Functions:
    - create_session(): Build a session from configuration
    - available_rules(): Pure availability filter
    - plan_merge(): Match a selection without mutating anything

Key Classes:
    - TokenizationSession: Step controller
    - SessionConfig: Session configuration
"""

from .config import SessionConfig
from .availability import available_rules
from .merge import plan_merge, apply_merge, partition_selection, candidate_sequences
from .session import TokenizationSession, create_session

__all__ = [
    "SessionConfig",
    "available_rules",
    "plan_merge",
    "apply_merge",
    "partition_selection",
    "candidate_sequences",
    "TokenizationSession",
    "create_session",
]
