"""Generator registry for creating generators by name."""

import logging
from collections.abc import Callable

from protocol_playground.consts import (
    GENERATOR_LCG,
    GENERATOR_ONE_THROUGH_TEN,
    LCG_DEFAULT_SEED,
)
from protocol_playground.errors import InvalidArgumentError
from protocol_playground.generators.base import GeneratesRandomNumbers
from protocol_playground.generators.lcg import LinearCongruentialGenerator
from protocol_playground.generators.uniform import OneThroughTen

logger = logging.getLogger(__name__)

GeneratorFactory = Callable[[int | None], GeneratesRandomNumbers]


def _one_through_ten(seed: int | None) -> GeneratesRandomNumbers:
    return OneThroughTen(seed=seed)


def _lcg(seed: int | None) -> GeneratesRandomNumbers:
    return LinearCongruentialGenerator(seed=LCG_DEFAULT_SEED if seed is None else seed)


class GeneratorRegistry:
    """Creates generators by name.

    The CLI and the demo pick generators through this registry so that the
    dice never see a concrete generator type. Built-in entries:
    - one_through_ten: uniform 1-10, optionally seeded
    - lcg: deterministic linear congruential generator
    """

    def __init__(self) -> None:
        """Initialize registry with the built-in generators."""
        self._factories: dict[str, GeneratorFactory] = {
            GENERATOR_ONE_THROUGH_TEN: _one_through_ten,
            GENERATOR_LCG: _lcg,
        }

    def register(self, name: str, factory: GeneratorFactory) -> None:
        """Register a generator factory, replacing any existing entry.

        Args:
            name: Registry name used by create()
            factory: Callable taking an optional seed and returning a generator
        """
        if name in self._factories:
            logger.info(f"Replacing generator factory '{name}'")
        self._factories[name] = factory

    def names(self) -> list[str]:
        """Return registered generator names in registration order."""
        return list(self._factories)

    def create(self, name: str, seed: int | None = None) -> GeneratesRandomNumbers:
        """Create a new generator.

        Args:
            name: Registered generator name
            seed: Optional seed passed to the factory

        Returns:
            A fresh generator instance

        Raises:
            InvalidArgumentError: If name is not registered
        """
        factory = self._factories.get(name)
        if factory is None:
            logger.warning(f"Unknown generator '{name}'")
            raise InvalidArgumentError(
                f"Unknown generator '{name}'. Must be one of: {', '.join(self._factories)}"
            )
        generator = factory(seed)
        logger.debug(f"Created {generator!r} for '{name}' (seed={seed})")
        return generator


def main() -> None:
    """Demonstrate creating generators by name and rolling dice with them."""
    from protocol_playground.consts import DEFAULT_SIDES, DEFAULT_TRIALS
    from protocol_playground.dice import Dice

    print("Generator Registry Demo")
    print("=" * 50)

    registry = GeneratorRegistry()
    print(f"\nRegistered: {', '.join(registry.names())}")

    for name in registry.names():
        dice = Dice(DEFAULT_SIDES, registry.create(name, seed=1))
        print(f"\n## {name}")
        print(f"  d{DEFAULT_SIDES} x{DEFAULT_TRIALS}: {dice.roll_many(DEFAULT_TRIALS)}")

    print("\n## Unknown name")
    try:
        registry.create("coin")
    except InvalidArgumentError as e:
        print(f"  {e}")


if __name__ == "__main__":
    main()
