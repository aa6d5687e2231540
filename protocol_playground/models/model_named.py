"""Named entity models sharing the FullyNamed capability."""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, computed_field

from protocol_playground.consts import NAME_SEPARATOR


@runtime_checkable
class FullyNamed(Protocol):
    """Anything exposing a readable full name.

    Conformance is structural: a stored field, a property or a computed
    field all satisfy it. Consumers only ever read the attribute.
    """

    @property
    def full_name(self) -> str: ...


class Person(BaseModel):
    """A person whose full name is stored as given."""

    model_config = ConfigDict(frozen=True)

    full_name: str = Field(description="Full name, returned unmodified")


class Starship(BaseModel):
    """A starship whose full name is derived from an optional prefix and a name.

    Two starships are equal when their computed full names are equal, so
    ``Starship(name="Enterprise", prefix="USS")`` equals
    ``Starship(name="USS Enterprise")``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Ship name")
    prefix: str | None = Field(default=None, description="Registry prefix such as 'USS'")

    @computed_field
    @property
    def full_name(self) -> str:
        """Prefix and name joined by a space, or just the name without a prefix."""
        if self.prefix is None:
            return self.name
        return f"{self.prefix}{NAME_SEPARATOR}{self.name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Starship):
            return NotImplemented
        return self.full_name == other.full_name

    def __hash__(self) -> int:
        return hash(self.full_name)


def describe(entity: FullyNamed) -> str:
    """Return the full name of any FullyNamed conformer."""
    return entity.full_name


def same_full_name(first: FullyNamed, second: FullyNamed) -> bool:
    """Compare two conformers of any type by their full names.

    Unlike ``Starship.__eq__`` this works across types, e.g. a Person and a
    Starship that happen to share a name.
    """
    return first.full_name == second.full_name
