"""Pydantic models for protocol-playground."""

from protocol_playground.models.model_named import (
    FullyNamed,
    Person,
    Starship,
    describe,
    same_full_name,
)
from protocol_playground.models.model_roll import RollSession

__all__ = [
    # Named entities
    "FullyNamed",
    "Person",
    "Starship",
    "describe",
    "same_full_name",
    # Roll reports
    "RollSession",
]
