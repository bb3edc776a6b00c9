"""Pydantic models for equation requests and results."""
from pydantic import BaseModel, Field


class EquationRequest(BaseModel):
    """Represents a single equation to evaluate."""

    equation: str = Field(..., description="Equation as a string")


class EquationResult(BaseModel):
    """Represents the result of an evaluated equation."""

    equation: str = Field(..., description="Original equation")
    sanitized: str = Field(..., description="Equation after invalid characters were dropped")
    result: float = Field(..., description="Evaluated numeric result of the equation")

    @property
    def was_sanitized(self) -> bool:
        """True when characters had to be dropped before parsing."""
        return self.sanitized != self.equation
