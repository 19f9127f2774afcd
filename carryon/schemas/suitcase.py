from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field


class SuitcaseInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)
    weight: float | None = Field(default=None, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_length(self) -> float:
        return self.width + self.height + self.depth
