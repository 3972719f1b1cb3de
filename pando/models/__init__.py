"""Database models package"""

from pando.models.base import BaseModel
from pando.models.organization import Organization, OrganizationUser
from pando.models.user import User
from pando.models.fleet import Fleet

# Export all models
__all__ = [
    "BaseModel",
    "Organization",
    "OrganizationUser",
    "User",
    "Fleet",
]
