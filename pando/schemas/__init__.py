"""Pydantic response schemas"""

from pando.schemas.fleet import FleetResponse, FleetListResponse
from pando.schemas.organization import OrganizationResponse

__all__ = [
    "FleetResponse",
    "FleetListResponse",
    "OrganizationResponse",
]
