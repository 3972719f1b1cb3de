"""User model"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from pando.models.base import BaseModel


class User(BaseModel):
    """
    User model representing application users.
    Users reach organizations through membership links.
    """

    __tablename__ = "user"

    email = Column(String(255), unique=True, nullable=False, index=True)
    given_name = Column(String(100), nullable=True)

    # Relationships
    memberships = relationship(
        "OrganizationUser", back_populates="user", cascade="all, delete-orphan"
    )

    @property
    def display_name(self):
        """Given name, falling back to email"""
        return self.given_name or self.email

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
