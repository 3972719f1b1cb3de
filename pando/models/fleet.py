"""Fleet model"""

from sqlalchemy import Boolean, Column, ForeignKey, Index, String, Uuid, text
from sqlalchemy.orm import relationship
from pando.models.base import BaseModel


class Fleet(BaseModel):
    """
    Fleet model representing a named grouping of devices.
    Fleets belong to exactly one organization.
    """

    __tablename__ = "fleet"

    organization_id = Column(
        Uuid(as_uuid=True), ForeignKey("organization.id"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    is_default = Column(Boolean, default=False, nullable=False)

    # Relationships
    organization = relationship("Organization", back_populates="fleets")

    __table_args__ = (
        # At most one default fleet per organization
        Index(
            "uq_fleet_default_per_organization",
            "organization_id",
            unique=True,
            postgresql_where=text("is_default"),
            sqlite_where=text("is_default = 1"),
        ),
    )

    def __repr__(self):
        return f"<Fleet(id={self.id}, name={self.name}, organization_id={self.organization_id})>"
