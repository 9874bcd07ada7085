"""
Shared fixtures for agmnet tests
"""

import pytest

from agmnet import AffiliationGraph


class FixedStream:
    """Random stream returning a fixed sequence of values, then cycling."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def build_two_groups(weight=None):
    """Four users in two overlapping groups."""
    A = AffiliationGraph()
    A.add_membership('user 0', 'group 1', weight)
    A.add_membership('user 1', 'group 1', weight)
    A.add_membership('user 2', 'group 1', weight)
    A.add_membership('user 1', 'group 2', weight)
    A.add_membership('user 2', 'group 2', weight)
    A.add_membership('user 3', 'group 2', weight)
    return A


@pytest.fixture
def two_groups():
    """Affiliation graph with all weights unset"""
    return build_two_groups()


@pytest.fixture
def zero_weight_groups():
    """Affiliation graph with every membership weight explicitly 0"""
    return build_two_groups(weight=0)


@pytest.fixture
def fixed_stream():
    return FixedStream
