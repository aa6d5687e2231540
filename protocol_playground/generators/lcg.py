"""Deterministic linear congruential generator."""

import logging

from protocol_playground.consts import (
    LCG_DEFAULT_SEED,
    LCG_INCREMENT,
    LCG_MODULUS,
    LCG_MULTIPLIER,
)
from protocol_playground.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class LinearCongruentialGenerator:
    """Reproducible generator: ``state = (state * a + c) % m``.

    Algorithm:
        m = 139968, a = 3877, c = 29573
        Each call advances the state once and returns it.
        Output range: 0 through m - 1

    The same seed always yields the same sequence, which makes it handy for
    repeatable demos. It is not suitable where real randomness matters.
    """

    def __init__(self, seed: int = LCG_DEFAULT_SEED) -> None:
        """Initialize the generator.

        Args:
            seed: Starting state, must be non-negative

        Raises:
            InvalidArgumentError: If seed is negative
        """
        if seed < 0:
            raise InvalidArgumentError(f"Seed must be non-negative, got {seed}")
        self._state = seed % LCG_MODULUS

    @property
    def low(self) -> int:
        return 0

    @property
    def high(self) -> int:
        return LCG_MODULUS - 1

    def random(self) -> int:
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        logger.debug(f"LCG advanced to {self._state}")
        return self._state

    def __repr__(self) -> str:
        return f"LinearCongruentialGenerator(state={self._state})"


def main() -> None:
    """Demonstrate that the LCG replays the same sequence for a seed."""
    print("Linear Congruential Generator Demo")
    print("=" * 50)

    for seed in (LCG_DEFAULT_SEED, LCG_DEFAULT_SEED, 7):
        generator = LinearCongruentialGenerator(seed=seed)
        values = [generator.random() for _ in range(5)]
        print(f"  seed={seed}: {values}")

    print(f"\nRange: 0-{LCG_MODULUS - 1}")


if __name__ == "__main__":
    main()
