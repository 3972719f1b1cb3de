"""Tests for organization service"""

import pytest
from datetime import datetime
from uuid import uuid4
from sqlalchemy.exc import IntegrityError

from pando.models import Organization, OrganizationUser, User
from pando.services.organization_service import OrganizationService, UserNotFoundError


class TestOrganizationService:
    """Test suite for OrganizationService"""

    @pytest.fixture
    def organization_service(self, test_db):
        """Create OrganizationService instance"""
        return OrganizationService(test_db)

    def test_create_organization(self, organization_service, sample_user):
        """Test creating an organization with its first member"""
        org = organization_service.create_organization("Acme", sample_user.id)

        assert org.id is not None
        assert org.name == "Acme"
        assert len(org.members) == 1
        assert org.members[0].user_id == sample_user.id

    def test_create_organization_unknown_user_raises_error(self, organization_service, test_db):
        """Test that a missing user leaves no organization behind"""
        with pytest.raises(IntegrityError):
            organization_service.create_organization("Ghost Co", uuid4())

        assert test_db.query(Organization).count() == 0
        assert test_db.query(OrganizationUser).count() == 0

    def test_default_organization_existing_membership(
        self, organization_service, test_db, sample_user
    ):
        """Test that an existing membership is returned without creating another"""
        org = organization_service.create_organization("Acme", sample_user.id)

        default = organization_service.get_user_default_organization(sample_user.id)

        assert default.id == org.id
        assert test_db.query(Organization).count() == 1

    def test_default_organization_created_from_given_name(
        self, organization_service, test_db, sample_user
    ):
        """Test that a user without memberships gets an organization named after them"""
        first = organization_service.get_user_default_organization(sample_user.id)
        second = organization_service.get_user_default_organization(sample_user.id)

        assert first.name == "Test's Organization"
        assert second.id == first.id
        assert test_db.query(Organization).count() == 1

    def test_default_organization_falls_back_to_email(self, organization_service, test_db):
        """Test that the email is used when the user has no given name"""
        user = User(email="nobody@example.com")
        test_db.add(user)
        test_db.commit()

        org = organization_service.get_user_default_organization(user.id)

        assert org.name == "nobody@example.com's Organization"

    def test_default_organization_unknown_user_raises_error(self, organization_service, test_db):
        """Test that an unknown user is reported instead of named 'undefined'"""
        with pytest.raises(UserNotFoundError, match="not found"):
            organization_service.get_user_default_organization(uuid4())

        assert test_db.query(Organization).count() == 0

    def test_default_organization_is_earliest_membership(
        self, organization_service, test_db, sample_user
    ):
        """Test that the earliest membership decides the default organization"""
        late = Organization(
            name="Late",
            members=[OrganizationUser(user_id=sample_user.id, created_at=datetime(2024, 2, 1))],
        )
        early = Organization(
            name="Early",
            members=[OrganizationUser(user_id=sample_user.id, created_at=datetime(2024, 1, 1))],
        )
        test_db.add_all([late, early])
        test_db.commit()

        default = organization_service.get_user_default_organization(sample_user.id)

        assert default.id == early.id

    def test_list_user_organizations(self, organization_service, test_db, sample_user):
        """Test listing a user's organizations in default order"""
        late = Organization(
            name="Late",
            members=[OrganizationUser(user_id=sample_user.id, created_at=datetime(2024, 2, 1))],
        )
        early = Organization(
            name="Early",
            members=[OrganizationUser(user_id=sample_user.id, created_at=datetime(2024, 1, 1))],
        )
        unrelated = Organization(name="Unrelated")
        test_db.add_all([late, early, unrelated])
        test_db.commit()

        orgs = organization_service.list_user_organizations(sample_user.id)

        assert [o.name for o in orgs] == ["Early", "Late"]
