"""Pytest configuration and shared fixtures."""

import pytest

from rolegate.rbac import AccessControl, Role


@pytest.fixture
def sample_config():
    """Sample configuration dictionary."""
    return {
        "logging": {
            "level": "DEBUG",
            "log_dir": "/var/log/rolegate",
            "file_logging": False,
        },
        "access_control": {
            "strict_roles": True,
        },
    }


@pytest.fixture
def access():
    """Empty access control registry."""
    return AccessControl()


@pytest.fixture
def role():
    """Standard role with no resources."""
    return Role("test_role")


@pytest.fixture
def admin():
    """Administrator role."""
    return Role.create_admin("test_admin")
