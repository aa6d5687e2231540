"""Base generator protocol defining the contract for all random number generators."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class GeneratesRandomNumbers(Protocol):
    """Protocol defining the random number generator contract.

    Every call to ``random`` returns an integer inside a fixed inclusive range
    chosen by the generator. Nothing else is promised: the values need not be
    uniform, seedable or reproducible. Consumers such as ``Dice`` depend on
    this protocol only, never on a concrete generator.
    """

    def random(self) -> int:
        """Produce the next random integer.

        Returns:
            An integer in the generator's inclusive range
        """
        ...


@runtime_checkable
class ReportsRange(Protocol):
    """Optional capability for generators that expose their inclusive bounds.

    Not required by ``Dice``. The built-in generators all provide it; the CLI
    uses it to describe generators and shows "N/A" for those without it.
    """

    @property
    def low(self) -> int: ...

    @property
    def high(self) -> int: ...


def main() -> None:
    """Demonstrate the GeneratesRandomNumbers protocol contract."""
    print("GeneratesRandomNumbers Protocol Contract")
    print("=" * 50)
    print("\nAll generators must implement:")
    print("  def random(self) -> int")
    print("\nContract guarantees:")
    print("  - Returns an int in a fixed, generator-defined inclusive range")
    print("  - No uniformity, seeding or determinism is promised")
    print("\nOptional ReportsRange capability:")
    print("  low: int, high: int (inclusive bounds)")


if __name__ == "__main__":
    main()
