"""Tests for resource permission sets."""

import pytest

from rolegate.rbac.errors import InvalidArgumentError, RbacError
from rolegate.rbac.resource import Resource


TEST_ID = "test_resource"

INVALID_IDENTIFIERS = [None, 0.0, 5, "", True, False]
VALID_IDENTIFIERS = ["test", "1111", "resource1"]

INVALID_PERMISSIONS = [None, 0.0, 5, "", True, False]
VALID_PERMISSIONS = ["read", "write"]

UNIQUE_PERMISSION = "unique"


class TestResourceConstruction:
    """Test Resource construction."""

    def test_invalid_identifier_raises(self):
        """Test that invalid identifiers are rejected."""
        for resource_id in INVALID_IDENTIFIERS:
            with pytest.raises(InvalidArgumentError) as exc_info:
                Resource(resource_id)
            assert exc_info.value.argument == "resource_id"

    def test_valid_identifier(self):
        """Test construction with valid identifiers."""
        for resource_id in VALID_IDENTIFIERS:
            resource = Resource(resource_id)
            assert resource.id == resource_id
            assert resource.size() == 0
            assert resource.is_open

    def test_error_hierarchy(self):
        """Test that argument errors are also ValueErrors."""
        with pytest.raises(ValueError):
            Resource("")
        with pytest.raises(RbacError):
            Resource("")


class TestResourceCheck:
    """Test Resource.check."""

    def test_invalid_permission_raises(self):
        """Test that invalid permissions are rejected."""
        resource = Resource(TEST_ID)

        for permission in INVALID_PERMISSIONS:
            with pytest.raises(InvalidArgumentError):
                resource.check(permission)

    def test_open_resource_allows_everything(self):
        """Test that a resource without permissions passes every check."""
        resource = Resource(TEST_ID)

        for permission in VALID_PERMISSIONS + [UNIQUE_PERMISSION, "anything"]:
            assert resource.check(permission)

    def test_restricted_resource_allows_only_listed(self):
        """Test that an allowed permission restricts the resource."""
        resource = Resource(TEST_ID)
        resource.allow(UNIQUE_PERMISSION)

        assert not resource.is_open
        assert resource.check(UNIQUE_PERMISSION)
        for permission in VALID_PERMISSIONS:
            assert not resource.check(permission)


class TestResourceAllow:
    """Test Resource.allow."""

    def test_invalid_permission_raises(self):
        """Test that invalid permissions are rejected."""
        resource = Resource(TEST_ID)

        for permission in INVALID_PERMISSIONS:
            with pytest.raises(InvalidArgumentError):
                resource.allow(permission)
        assert resource.size() == 0

    def test_no_permissions_raises(self):
        """Test that missing or empty permission batches are rejected."""
        resource = Resource(TEST_ID)

        with pytest.raises(InvalidArgumentError):
            resource.allow(None)
        with pytest.raises(InvalidArgumentError):
            resource.allow([])

        resource.allow("read")
        assert resource.size() == 1

    def test_allow_single_permissions(self):
        """Test allowing permissions one at a time."""
        resource = Resource(TEST_ID)

        for permission in VALID_PERMISSIONS:
            resource.allow(permission)

        assert resource.size() == len(VALID_PERMISSIONS)
        assert resource.permissions == frozenset(VALID_PERMISSIONS)

    def test_allow_list(self):
        """Test allowing a list of permissions."""
        resource = Resource(TEST_ID)

        with pytest.raises(InvalidArgumentError):
            resource.allow(INVALID_PERMISSIONS)
        assert resource.size() == 0

        resource.allow(VALID_PERMISSIONS)
        assert resource.size() == len(VALID_PERMISSIONS)
        for permission in VALID_PERMISSIONS:
            assert resource.check(permission)
            assert permission in resource

    def test_allow_deduplicates(self):
        """Test that repeated permissions are stored once."""
        resource = Resource(TEST_ID)

        resource.allow(["read", "read", "write"])
        resource.allow("write")

        assert resource.size() == 2
        assert len(resource) == 2

    def test_partial_list_is_not_rolled_back(self):
        """Test that elements before an invalid one stay allowed."""
        resource = Resource(TEST_ID)

        with pytest.raises(InvalidArgumentError):
            resource.allow(["read", "", "write"])

        assert resource.permissions == frozenset(["read"])
        assert resource.check("read")
        assert not resource.check("write")


class TestResourceDeny:
    """Test Resource.deny."""

    def test_invalid_permission_raises(self):
        """Test that invalid permissions are rejected."""
        resource = Resource(TEST_ID)

        for permission in INVALID_PERMISSIONS:
            with pytest.raises(InvalidArgumentError):
                resource.deny(permission)

    def test_deny_on_open_resource_is_noop(self):
        """Test that denying on an open resource keeps it open."""
        resource = Resource(TEST_ID)

        for permission in VALID_PERMISSIONS:
            resource.deny(permission)
            assert resource.size() == 0
            assert resource.is_open

    def test_deny_removes_permissions(self):
        """Test removing permissions."""
        resource = Resource(TEST_ID)
        resource.allow(VALID_PERMISSIONS)
        resource.allow(UNIQUE_PERMISSION)

        assert resource.size() == len(VALID_PERMISSIONS) + 1

        for permission in VALID_PERMISSIONS:
            resource.deny(permission)
            assert not resource.check(permission)

        assert resource.size() == 1
        assert resource.check(UNIQUE_PERMISSION)

    def test_deny_last_permission_reopens(self):
        """Test that removing the last permission makes the resource open."""
        resource = Resource(TEST_ID)
        resource.allow(UNIQUE_PERMISSION)

        resource.deny(UNIQUE_PERMISSION)

        assert resource.is_open
        assert resource.check("anything")

    def test_deny_missing_permission_is_noop(self):
        """Test denying a permission that was never allowed."""
        resource = Resource(TEST_ID)
        resource.allow("read")

        resource.deny("write")

        assert resource.permissions == frozenset(["read"])
