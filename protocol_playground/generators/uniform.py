"""Uniform generators backed by ``random.Random``."""

import logging
import random

from protocol_playground.consts import ONE_THROUGH_TEN_HIGH, ONE_THROUGH_TEN_LOW
from protocol_playground.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class UniformRange:
    """Draws integers uniformly from ``[low, high]``.

    Uses its own ``random.Random`` instance so that seeding one generator
    never affects another or the module-level ``random`` state.
    """

    def __init__(
        self,
        low: int,
        high: int,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            low: Lowest value returned (inclusive)
            high: Highest value returned (inclusive)
            rng: Random instance to draw from; takes precedence over seed
            seed: Seed for a new Random instance when rng is not given

        Raises:
            InvalidArgumentError: If low is greater than high
        """
        if low > high:
            raise InvalidArgumentError(f"Range low bound {low} is above high bound {high}")
        self._low = low
        self._high = high
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def low(self) -> int:
        return self._low

    @property
    def high(self) -> int:
        return self._high

    def random(self) -> int:
        value = self._rng.randint(self._low, self._high)
        logger.debug(f"Drew {value} from [{self._low}, {self._high}]")
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(low={self._low}, high={self._high})"


class OneThroughTen(UniformRange):
    """Uniform generator fixed to the range 1 through 10."""

    def __init__(self, rng: random.Random | None = None, seed: int | None = None) -> None:
        super().__init__(ONE_THROUGH_TEN_LOW, ONE_THROUGH_TEN_HIGH, rng=rng, seed=seed)

    def __repr__(self) -> str:
        return "OneThroughTen()"


def main() -> None:
    """Demonstrate uniform generators with and without a seed."""
    print("Uniform Generators Demo")
    print("=" * 50)

    print("\n## OneThroughTen (unseeded)")
    generator = OneThroughTen()
    print(f"  {[generator.random() for _ in range(10)]}")

    print("\n## OneThroughTen (seed=7, twice)")
    for _ in range(2):
        seeded = OneThroughTen(seed=7)
        print(f"  {[seeded.random() for _ in range(10)]}")

    print("\n## UniformRange(2, 12)")
    two_to_twelve = UniformRange(2, 12, seed=1)
    print(f"  {[two_to_twelve.random() for _ in range(10)]}")


if __name__ == "__main__":
    main()
