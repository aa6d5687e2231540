"""Roll report models."""

from pydantic import BaseModel, Field, computed_field, model_validator


class RollSession(BaseModel):
    """A batch of dice rolls made with one die and one generator."""

    sides: int = Field(gt=0, description="Number of faces on the die")
    generator: str = Field(description="Registry name of the generator used")
    rolls: list[int] = Field(default_factory=list, description="Results in roll order")

    @computed_field
    @property
    def total(self) -> int:
        """Sum of all rolls."""
        return sum(self.rolls)

    @model_validator(mode="after")
    def rolls_within_sides(self) -> "RollSession":
        """Validate that every roll lies in [1, sides]."""
        for value in self.rolls:
            if not 1 <= value <= self.sides:
                msg = f"Roll {value} outside [1, {self.sides}]"
                raise ValueError(msg)
        return self
