#!/usr/bin/env python3
"""
Database seeding script for development and testing.
Creates sample users, resolves their default organizations and fleets.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path to import our modules
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pando.database import Base, SessionLocal, engine
from pando.logging_config import configure_logging
from pando.models import User
from pando.services import FleetService, OrganizationService

logger = logging.getLogger("seed_data")


def create_tables():
    """Create all database tables"""
    Base.metadata.create_all(engine)
    logger.info("Database tables created")


def seed_data():
    """Seed the database with sample data"""
    db = SessionLocal()
    try:
        # Create users
        users = [
            User(email="john.doe@acme.com", given_name="John"),
            User(email="jane.smith@acme.com", given_name="Jane"),
            User(email="ops@buildright.com"),
        ]
        db.add_all(users)
        db.commit()
        logger.info(f"Created {len(users)} users")

        organization_service = OrganizationService(db)
        fleet_service = FleetService(db)

        # Every user gets a personal organization with a default fleet
        for user in users:
            org = organization_service.get_user_default_organization(user.id)
            fleets = fleet_service.list_fleets_for_organization(org.id)
            logger.info(f"{org.name}: {', '.join(f.name for f in fleets)}")

        # A second fleet for the first organization
        first_org = organization_service.get_user_default_organization(users[0].id)
        fleet_service.create_fleet("Delivery Vans", first_org.id)
        logger.info(f"Added extra fleet to {first_org.name}")
    except Exception:
        db.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        db.close()


def main():
    """Main seeding function"""
    configure_logging()
    logger.info("Starting database seeding...")
    create_tables()
    seed_data()
    logger.info("Database seeding completed")


if __name__ == "__main__":
    main()
