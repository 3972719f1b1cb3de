"""Fleet service for database operations"""

import logging
import uuid
from datetime import datetime
from typing import Callable, List, Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pando.config import settings
from pando.models.fleet import Fleet

logger = logging.getLogger(__name__)


class FleetService:
    """
    Service for managing fleets scoped to an organization.

    Every organization that is listed gets at least one fleet: the first
    listing of an organization without fleets creates its default fleet.
    """

    def __init__(self, db: Session, id_generator: Callable[[], UUID] = uuid.uuid4):
        """Initialize with database session and fleet identifier generator"""
        self.db = db
        self.id_generator = id_generator

    def create_fleet(
        self,
        name: str,
        organization_id: UUID,
        is_default: bool = False,
    ) -> Fleet:
        """
        Create a new fleet for an organization.

        Args:
            name: Fleet display name
            organization_id: UUID of the owning organization
            is_default: Mark the fleet as the organization's default fleet

        Returns:
            Created Fleet instance

        Raises:
            IntegrityError: If the organization does not exist
        """
        fleet = self._build_fleet(name, organization_id, is_default)

        try:
            self.db.add(fleet)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        self.db.refresh(fleet)

        logger.info(f"Created fleet {fleet.id} for organization {organization_id}")
        return fleet

    def list_fleets_for_organization(self, organization_id: UUID) -> List[Fleet]:
        """
        List fleets of an organization, creating the default fleet if it has none.

        Args:
            organization_id: UUID of the organization

        Returns:
            Non-empty list of Fleet objects, oldest first
        """
        fleets = (
            self.db.query(Fleet)
            .filter(Fleet.organization_id == organization_id)
            .order_by(Fleet.created_at, Fleet.id)
            .all()
        )
        if fleets:
            return fleets

        logger.info(f"Organization {organization_id} has no fleets, creating default fleet")
        return [self._create_default_fleet(organization_id)]

    def get_fleet(self, fleet_id: UUID) -> Optional[Fleet]:
        """Get a fleet by ID, or None if not found"""
        return self.db.query(Fleet).filter(Fleet.id == fleet_id).first()

    def get_default_fleet(self, organization_id: UUID) -> Optional[Fleet]:
        """Get the auto-created default fleet of an organization, if any"""
        return (
            self.db.query(Fleet)
            .filter(Fleet.organization_id == organization_id, Fleet.is_default.is_(True))
            .first()
        )

    def _create_default_fleet(self, organization_id: UUID) -> Fleet:
        """
        Insert the default fleet inside a savepoint.

        A concurrent caller that already created the default fleet trips the
        one-default-per-organization index; in that case its fleet is returned.
        """
        fleet = self._build_fleet(settings.default_fleet_name, organization_id, True)

        try:
            with self.db.begin_nested():
                self.db.add(fleet)
        except IntegrityError:
            existing = self.get_default_fleet(organization_id)
            if existing is None:
                self.db.rollback()
                raise
            logger.warning(
                f"Default fleet for organization {organization_id} was created "
                f"concurrently, using fleet {existing.id}"
            )
            return existing

        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        self.db.refresh(fleet)

        logger.info(f"Created default fleet {fleet.id} for organization {organization_id}")
        return fleet

    def _build_fleet(self, name: str, organization_id: UUID, is_default: bool) -> Fleet:
        now = datetime.utcnow()
        return Fleet(
            id=self.id_generator(),
            name=name,
            organization_id=organization_id,
            is_default=is_default,
            created_at=now,
            updated_at=now,
        )
