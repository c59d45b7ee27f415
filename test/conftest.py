"""
Shared pytest configuration and fixtures for the configtree tests.
"""

import pytest

from configtree import ConfigRegistry, WritePolicy
from configtree.tree import to_node
from config_stubs import FIRST_SEED, make_hierarchy


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external resources")


@pytest.fixture
def registry():
    """A registry isolated from the process-wide one."""
    return ConfigRegistry()


@pytest.fixture
def hierarchy():
    """Fresh (first, second, third) configuration types using the STRICT policy."""
    return make_hierarchy()


@pytest.fixture
def merge_hierarchy():
    """Fresh (first, second, third) configuration types using the MERGE policy."""
    return make_hierarchy(WritePolicy.MERGE)


@pytest.fixture
def seed_tree():
    """A tree built from the shared seed, independent of any configuration type."""
    return to_node(FIRST_SEED)
