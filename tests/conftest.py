"""
Pytest configuration and shared fixtures.
"""

import pytest


@pytest.fixture
def empty_net():
    """A net with no agents."""
    from icnet.core import Net
    return Net()


@pytest.fixture
def seed_net():
    """The canonical four-agent seed net."""
    from icnet.core import Net
    return Net.seed()


@pytest.fixture
def erase_pair_net():
    """Two erasers facing each other, identifiers 0 and 1."""
    from icnet.core import Net
    from icnet.patterns import create_erase_pair
    net = Net()
    create_erase_pair(net)
    return net
