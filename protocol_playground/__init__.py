"""protocol-playground - Capability-typed named entities and dice rolling."""

from protocol_playground.dice import Dice, roll_session
from protocol_playground.errors import InvalidArgumentError
from protocol_playground.generators import (
    GeneratesRandomNumbers,
    GeneratorRegistry,
    LinearCongruentialGenerator,
    OneThroughTen,
    ReportsRange,
    UniformRange,
)
from protocol_playground.models import FullyNamed, Person, RollSession, Starship

__all__ = [
    # Errors
    "InvalidArgumentError",
    # Named entities
    "FullyNamed",
    "Person",
    "Starship",
    # Generators
    "GeneratesRandomNumbers",
    "ReportsRange",
    "UniformRange",
    "OneThroughTen",
    "LinearCongruentialGenerator",
    "GeneratorRegistry",
    # Dice
    "Dice",
    "RollSession",
    "roll_session",
]
