"""
Core Utilities Package

Serialization helpers for curriculum data.
"""

from .serialization import (
    serialize_rule,
    deserialize_rule,
    serialize_curriculum,
    deserialize_curriculum,
)

__all__ = [
    "serialize_rule",
    "deserialize_rule",
    "serialize_curriculum",
    "deserialize_curriculum",
]
