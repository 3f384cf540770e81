"""
Shared test fixtures: standard sieve stacks and sample records.
"""

import pytest

from sieve_analysis.stack import SieveStack


@pytest.fixture
def sample():
    """Sample masses from a typical 2 kg oven-dried split."""
    return {
        "wet_mass": 2100,
        "dry_mass": 2000,
        "washed_mass": 1900,
    }


@pytest.fixture
def stack():
    """Metric stack with no sample data."""
    return SieveStack([20, 16, 12, 5, 0.08])


@pytest.fixture
def loaded_stack(sample):
    """
    16/12/5/2 mm stack with 100 g on every sieve and the pan,
    then an empty 20 mm sieve added on top.
    """
    test = SieveStack([16, 12, 5, 2], sample=sample)
    for sieve in test:
        sieve.retained(100)
    test.add(20)
    return test
