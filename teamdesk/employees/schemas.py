"""Employee / department response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DepartmentStatsOut(BaseModel):
    """Headcount and mean task completion for one department."""

    model_config = ConfigDict(from_attributes=True)

    department: str
    count: int = 0
    average_completion: float = Field(0.0, description="Unrounded mean task completion (%)")
