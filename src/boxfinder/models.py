from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from boxfinder.geometry import footprint_fits, height_compatible, target_orientations


class FitMode(str, Enum):
    """How catalog boxes relate to the target."""

    INTO = "into"
    OVER = "over"


class Dimensions(BaseModel):
    """Size of an axis-aligned box. A height of 0 means "any height"."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(ge=0, description="Length of the box")
    width: int = Field(ge=0, description="Width of the box")
    height: int = Field(default=0, ge=0, description="Height of the box, 0 if unconstrained")

    @property
    def area(self) -> int:
        return self.length * self.width

    @property
    def volume(self) -> int:
        return self.length * self.width * self.height

    def __str__(self) -> str:
        return f"{self.length} x {self.width} x {self.height}"

    def rotate_width_into_height(self) -> "Dimensions":
        return Dimensions(length=self.length, width=self.height, height=self.width)

    def rotate_length_into_height(self) -> "Dimensions":
        return Dimensions(length=self.height, width=self.width, height=self.length)

    def fits_into(self, target: "Dimensions", allow_sideways: bool = False) -> bool:
        """True if this box fits inside target."""
        return any(
            height_compatible(self.height, t.height)
            and footprint_fits(self.length, self.width, t.length, t.width)
            for t in target_orientations(target, allow_sideways)
        )

    def fits_over(self, target: "Dimensions", allow_sideways: bool = False) -> bool:
        """True if this box covers target."""
        return any(
            height_compatible(t.height, self.height)
            and footprint_fits(t.length, t.width, self.length, self.width)
            for t in target_orientations(target, allow_sideways)
        )


class BoxSize(BaseModel):
    """Named catalog box with the dimensions used for matching."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name of the box")
    dimensions: Dimensions

    def __str__(self) -> str:
        return f"{self.name}: {self.dimensions}"


class CatalogEntry(BaseModel):
    """Catalog row with both outer and inner dimensions."""

    model_config = ConfigDict(frozen=True)

    name: str
    outer: Dimensions
    inner: Dimensions

    def dimensions_for(self, mode: FitMode) -> Dimensions:
        # A box goes over something with its inside, into something with its outside.
        return self.inner if mode is FitMode.OVER else self.outer

    def to_box(self, mode: FitMode) -> BoxSize:
        return BoxSize(name=self.name, dimensions=self.dimensions_for(mode))


class RankedBox(BaseModel):
    """A matching box, its position in the ranking and its fill ratio."""

    box: BoxSize
    rank: int = Field(ge=1)
    ratio: float

    @property
    def percent(self) -> float:
        return self.ratio * 100
