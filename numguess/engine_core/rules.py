"""
Game Rules - The fixed range a secret number is drawn from.

The range is not user-configurable. It is modelled once here so that the
picker, the input validation and the session all agree on it.
"""

from pydantic import BaseModel, Field, model_validator


class GameRules(BaseModel):
    """Inclusive bounds for targets and guesses."""
    minimum: int = Field(default=1, description="Smallest allowed number")
    maximum: int = Field(default=100, description="Largest allowed number")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_bounds(self) -> "GameRules":
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum ({self.minimum}) must not exceed maximum ({self.maximum})"
            )
        return self

    def contains(self, value: int) -> bool:
        """Check if a number lies inside the range."""
        return self.minimum <= value <= self.maximum


DEFAULT_RULES = GameRules()
