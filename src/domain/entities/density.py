"""
DensityBucket value object

Open work order load for a single room.
"""

from pydantic import BaseModel, ConfigDict, Field

from .enums import DensityTier


class DensityBucket(BaseModel):
    """Open work order count for a room and its heatmap tier"""

    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=0)
    tier: DensityTier
