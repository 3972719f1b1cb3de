"""Organization and membership models"""

from datetime import datetime
from sqlalchemy import Column, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship
from pando.database import Base
from pando.models.base import BaseModel


class Organization(BaseModel):
    """
    Organization model representing a tenant account.
    Owns fleets and groups users through membership links.
    """

    __tablename__ = "organization"

    name = Column(String(255), nullable=False)

    # Relationships
    members = relationship(
        "OrganizationUser", back_populates="organization", cascade="all, delete-orphan"
    )
    fleets = relationship("Fleet", back_populates="organization", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Organization(id={self.id}, name={self.name})>"


class OrganizationUser(Base):
    """
    Membership link between a user and an organization.
    A user is linked to a given organization at most once.
    """

    __tablename__ = "organization_user"

    user_id = Column(
        Uuid(as_uuid=True), ForeignKey("user.id"), primary_key=True, index=True
    )
    organization_id = Column(
        Uuid(as_uuid=True), ForeignKey("organization.id"), primary_key=True, index=True
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="memberships")
    organization = relationship("Organization", back_populates="members")

    def __repr__(self):
        return (
            f"<OrganizationUser(user_id={self.user_id}, "
            f"organization_id={self.organization_id})>"
        )
