"""Organization service for membership and default organization lookups"""

import logging
from typing import List
from uuid import UUID
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from pando.models.organization import Organization, OrganizationUser
from pando.models.user import User

logger = logging.getLogger(__name__)


class UserNotFoundError(ValueError):
    """Raised when a user ID does not match any user"""


class OrganizationService:
    """
    Service for managing organizations and resolving a user's default one.
    """

    def __init__(self, db: Session):
        """Initialize with database session"""
        self.db = db

    def create_organization(self, name: str, user_id: UUID) -> Organization:
        """
        Create an organization with the given user as its first member.

        The organization and its membership link are written in one commit.

        Args:
            name: Organization name
            user_id: UUID of the first member

        Returns:
            Created Organization instance

        Raises:
            IntegrityError: If the user does not exist
        """
        organization = Organization(
            name=name,
            members=[OrganizationUser(user_id=user_id)],
        )

        try:
            self.db.add(organization)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        self.db.refresh(organization)

        logger.info(f"Created organization {organization.id} for user {user_id}")
        return organization

    def get_user_default_organization(self, user_id: UUID) -> Organization:
        """
        Resolve the organization a user works in by default.

        The earliest membership wins. A user without memberships gets a new
        organization named after them.

        Args:
            user_id: UUID of the user

        Returns:
            The user's default Organization

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = (
            self.db.query(User)
            .options(selectinload(User.memberships).selectinload(OrganizationUser.organization))
            .filter(User.id == user_id)
            .populate_existing()
            .first()
        )
        if not user:
            logger.error(f"User {user_id} not found")
            raise UserNotFoundError(f"User {user_id} not found")

        memberships = _ordered(user.memberships)
        if memberships:
            return memberships[0].organization

        logger.info(f"User {user_id} has no organization, creating one")
        return self.create_organization(f"{user.display_name}'s Organization", user_id)

    def list_user_organizations(self, user_id: UUID) -> List[Organization]:
        """
        List all organizations a user belongs to.

        Args:
            user_id: UUID of the user

        Returns:
            List of Organization objects, default organization first
        """
        return (
            self.db.query(Organization)
            .join(OrganizationUser, OrganizationUser.organization_id == Organization.id)
            .filter(OrganizationUser.user_id == user_id)
            .order_by(OrganizationUser.created_at, OrganizationUser.organization_id)
            .all()
        )


def _ordered(memberships: List[OrganizationUser]) -> List[OrganizationUser]:
    # Earliest membership first, ties broken by organization id
    return sorted(memberships, key=lambda m: (m.created_at, str(m.organization_id)))
