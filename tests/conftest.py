"""
Fixtures used in the tests
"""
import pytest

from tests.utility import random_octets, random_groups


@pytest.fixture()
def rand_octets():
    return random_octets()


@pytest.fixture()
def rand_groups():
    return random_groups()
