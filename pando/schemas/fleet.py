"""Fleet schemas"""

from pydantic import BaseModel, Field
from datetime import datetime
from uuid import UUID


class FleetResponse(BaseModel):
    """Fleet response schema"""
    id: UUID
    name: str = Field(..., description="Fleet name")
    organization_id: UUID
    is_default: bool = Field(default=False, description="Whether this is the auto-created fleet")
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class FleetListResponse(BaseModel):
    """List of fleets for one organization"""
    fleets: list[FleetResponse]
    total: int = Field(..., description="Total number of fleets")
