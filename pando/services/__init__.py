"""Services package"""

from pando.services.fleet_service import FleetService
from pando.services.organization_service import OrganizationService, UserNotFoundError

__all__ = [
    "FleetService",
    "OrganizationService",
    "UserNotFoundError",
]
