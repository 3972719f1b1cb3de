"""Organization schemas"""

from pydantic import BaseModel, Field
from datetime import datetime
from uuid import UUID


class OrganizationResponse(BaseModel):
    """Organization response schema"""
    id: UUID
    name: str = Field(..., description="Organization name")
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
