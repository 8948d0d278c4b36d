"""Request/response schemas for the HTTP API."""

from typing import List, Optional
from pydantic import BaseModel, Field

from boxfinder.models import FitMode


class DimensionsSchema(BaseModel):
    """Schema for box dimensions."""
    length: int = Field(ge=0, description="Length")
    width: int = Field(ge=0, description="Width")
    height: int = Field(ge=0, default=0, description="Height, 0 if unconstrained")


class MatchRequestSchema(BaseModel):
    """Schema for a box matching request."""
    length: int = Field(ge=0, description="Target length")
    width: int = Field(ge=0, description="Target width")
    height: int = Field(ge=0, default=0, description="Target height, 0 if unconstrained")
    mode: FitMode = Field(default=FitMode.OVER, description="'over' to cover the target, 'into' to fit inside it")
    sideways: bool = Field(default=False, description="Allow turning the box on its side")
    results: Optional[int] = Field(ge=1, default=None, description="Maximum number of matches, BOXFINDER_RESULTS if omitted")


class RankedBoxSchema(BaseModel):
    """Schema for one matching box."""
    rank: int = Field(ge=1, description="Position in the ranking, starting at 1")
    name: str = Field(description="Catalog name of the box")
    dimensions: DimensionsSchema
    fill_ratio: Optional[float] = Field(description="Fill ratio, null if not finite")
    fill_percent: Optional[float] = Field(description="Fill ratio in percent, rounded to 2 decimals")


class MatchResponseSchema(BaseModel):
    """Schema for a box matching response."""
    target: DimensionsSchema
    mode: FitMode
    sideways: bool
    results: List[RankedBoxSchema] = Field(default_factory=list, description="Matches, best first")
