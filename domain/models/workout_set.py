"""
WorkoutSet value object: one validated rep/weight pair.

Drafts hold raw text for reps and weight (see domain.models.draft.DraftSet);
a WorkoutSet only exists once that text has been validated, so every set
that reaches persistence carries numeric values.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class WorkoutSet(BaseModel):
    """
    Value object representing a single performed set.

    Examples:
        >>> WorkoutSet(reps=10, weight=20)
        WorkoutSet(reps=10, weight=20.0)

        >>> str(WorkoutSet(reps=12))
        '12 reps'
    """

    reps: int = Field(..., gt=0, description="Repetitions performed (> 0)")
    weight: Optional[float] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Load in kg; None means bodyweight/unspecified",
    )

    @field_validator("weight", mode="before")
    @classmethod
    def blank_weight_is_none(cls, v: Any) -> Any:
        """Treat a blank weight (legacy string records) as bodyweight."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_bodyweight(self) -> bool:
        return self.weight is None

    def __str__(self) -> str:
        if self.weight is None:
            return f"{self.reps} reps"
        return f"{self.reps} reps x {self.weight:g} kg"

    model_config = {"frozen": True}
