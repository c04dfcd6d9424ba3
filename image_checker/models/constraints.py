from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SizeConstraints(BaseModel):
    """Byte and pixel bounds applied to a checked image. Zero means no limit."""

    model_config = ConfigDict(frozen=True)

    max_data_size: int = Field(default=0, ge=0, description="Maximum stream length in bytes.")
    max_width: int = Field(default=0, ge=0)
    max_height: int = Field(default=0, ge=0)
    min_width: int = Field(default=0, ge=0)
    min_height: int = Field(default=0, ge=0)

    @property
    def exact_width(self) -> bool:
        return self.min_width == self.max_width

    @property
    def exact_height(self) -> bool:
        return self.min_height == self.max_height
