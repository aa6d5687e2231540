"""Random number generators.

Every generator satisfies the GeneratesRandomNumbers protocol:
- UniformRange / OneThroughTen (backed by random.Random)
- LinearCongruentialGenerator (deterministic, seedable)

GeneratorRegistry creates them by name.
"""

from protocol_playground.generators.base import GeneratesRandomNumbers, ReportsRange
from protocol_playground.generators.lcg import LinearCongruentialGenerator
from protocol_playground.generators.registry import GeneratorRegistry
from protocol_playground.generators.uniform import OneThroughTen, UniformRange

__all__ = [
    # Protocol
    "GeneratesRandomNumbers",
    "ReportsRange",
    # Generators
    "UniformRange",
    "OneThroughTen",
    "LinearCongruentialGenerator",
    # Orchestration
    "GeneratorRegistry",
]
