"""Dice that roll through any GeneratesRandomNumbers conformer."""

import logging

from protocol_playground.errors import InvalidArgumentError
from protocol_playground.generators.base import GeneratesRandomNumbers
from protocol_playground.models.model_roll import RollSession

logger = logging.getLogger(__name__)


class Dice:
    """A die with a fixed number of sides.

    The die only knows its generator through the GeneratesRandomNumbers
    protocol. Rolling is stateless: each roll draws exactly one value ``v``
    and returns ``(v % sides) + 1``. Python's ``%`` takes the sign of the
    divisor, so negative draws still land in ``[1, sides]``.
    """

    def __init__(self, sides: int, generator: GeneratesRandomNumbers) -> None:
        """Initialize the die.

        Args:
            sides: Number of faces, must be a positive integer
            generator: Source of random integers

        Raises:
            InvalidArgumentError: If sides is not a positive integer or the
                generator has no ``random()`` method
        """
        if isinstance(sides, bool) or not isinstance(sides, int) or sides <= 0:
            raise InvalidArgumentError(f"Dice needs a positive number of sides, got {sides!r}")
        if not isinstance(generator, GeneratesRandomNumbers):
            raise InvalidArgumentError(
                f"{type(generator).__name__} does not provide random() -> int"
            )
        self._sides = sides
        self._generator = generator

    @property
    def sides(self) -> int:
        return self._sides

    @property
    def generator(self) -> GeneratesRandomNumbers:
        return self._generator

    def roll(self) -> int:
        """Roll once.

        Returns:
            A value between 1 and sides, inclusive

        Raises:
            InvalidArgumentError: If the generator draws something other than
                an int (``random.Random.random`` returns a float, for example)
        """
        value = self._generator.random()
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(
                f"{type(self._generator).__name__}.random() returned "
                f"{type(value).__name__} {value!r}, expected int"
            )
        result = value % self._sides + 1
        logger.debug(f"d{self._sides}: drew {value}, rolled {result}")
        return result

    def roll_many(self, trials: int) -> list[int]:
        """Roll several times, drawing a fresh value for each roll.

        Args:
            trials: Number of rolls, zero or more

        Returns:
            Results in roll order

        Raises:
            InvalidArgumentError: If trials is negative
        """
        if trials < 0:
            raise InvalidArgumentError(f"Number of trials must be non-negative, got {trials}")
        return [self.roll() for _ in range(trials)]

    def __repr__(self) -> str:
        return f"Dice(sides={self._sides}, generator={self._generator!r})"


def roll_session(dice: Dice, trials: int, generator_name: str) -> RollSession:
    """Roll a die several times and collect the results.

    Args:
        dice: The die to roll
        trials: Number of rolls
        generator_name: Registry name recorded in the session

    Returns:
        RollSession with every result
    """
    rolls = dice.roll_many(trials)
    logger.info(f"Rolled d{dice.sides} {trials} times with '{generator_name}': {rolls}")
    return RollSession(sides=dice.sides, generator=generator_name, rolls=rolls)


def main() -> None:
    """Demonstrate dice rolling through interchangeable generators."""
    from protocol_playground.generators.lcg import LinearCongruentialGenerator
    from protocol_playground.generators.uniform import OneThroughTen

    print("Dice Demo")
    print("=" * 50)

    for generator in (OneThroughTen(), LinearCongruentialGenerator()):
        dice = Dice(6, generator)
        print(f"\n## {generator!r}")
        for _ in range(5):
            print(f"  Random dice roll is {dice.roll()}")

    print("\n## Zero sides")
    try:
        Dice(0, OneThroughTen())
    except InvalidArgumentError as e:
        print(f"  {e}")


if __name__ == "__main__":
    main()
