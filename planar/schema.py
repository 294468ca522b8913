from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from planar import config
from planar.structs.vector2 import Vector2


class Vector2Model(BaseModel):
    x: float
    y: float
    w: Optional[float] = Field(default=None, description="Creation timestamp (epoch ms). Defaults to now.")

    def to_vector(self) -> Vector2:
        return Vector2(self.x, self.y, self.w)

    @classmethod
    def from_vector(cls, v: Vector2) -> "Vector2Model":
        return cls(x=v.x, y=v.y, w=v.w)


class DemoSettings(BaseModel):
    start: Vector2Model = Field(
        default_factory=lambda: Vector2Model(x=config.DEFAULT_START_X, y=config.DEFAULT_START_Y)
    )
    forward: float = Field(default=config.DEFAULT_FORWARD, description="Distance to advance along the start vector.")
    backward: float = Field(default=config.DEFAULT_BACKWARD, ge=0.0, description="Distance to step back from the start vector.")
    pivot: Vector2Model = Field(
        default_factory=lambda: Vector2Model(x=config.DEFAULT_PIVOT_X, y=config.DEFAULT_PIVOT_Y)
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = config.DEFAULT_LOG_LEVEL
