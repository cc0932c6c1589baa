"""Face comparison value objects."""
from typing import Optional

from pydantic import BaseModel, Field


class ComparisonOutcome(BaseModel):
    """Result of comparing the reference template with one candidate.

    Exactly one of ``similarity`` and ``error`` is set.
    """
    index: int = Field(..., ge=0, description="Position of the candidate in the request list")
    similarity: Optional[float] = Field(None, ge=0.0, le=1.0,
                                        description="Normalized similarity, 0 when no match was found")
    error: Optional[str] = Field(None, description="Reason the comparison failed")

    @classmethod
    def ok(cls, index: int, similarity: float) -> "ComparisonOutcome":
        return cls(index=index, similarity=similarity)

    @classmethod
    def failed(cls, index: int, reason: str) -> "ComparisonOutcome":
        return cls(index=index, error=reason)

    @property
    def succeeded(self) -> bool:
        return self.error is None
