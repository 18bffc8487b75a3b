"""
Configuration for pytest to set up the proper import paths and shared fixtures.
"""

import random
import sys
from pathlib import Path

import pytest


# Add the project root to Python path so we can import lazy, recursion, tour, etc.
parent_dir = Path(__file__).parent.parent
sys.path.insert(0, str(parent_dir))

# Import after path setup
from models import TourConfig
from utils import clear_performance_metrics


@pytest.fixture
def seeded_rng():
    """Fixture providing a deterministic random number generator."""
    return random.Random(1234)


@pytest.fixture
def tour_config():
    """Fixture providing a small, repeatable tour configuration."""
    return TourConfig(walk_start=5.0, walk_length=20, random_seed=42)


@pytest.fixture(autouse=True)
def reset_performance_metrics():
    """Auto-applied fixture so measurements never leak between tests."""
    clear_performance_metrics()
    yield
    clear_performance_metrics()


@pytest.fixture
def count_calls():
    """Fixture providing a wrapper factory that counts how often a function runs."""

    def _wrap(fn):
        def wrapper(*args, **kwargs):
            wrapper.calls += 1
            return fn(*args, **kwargs)
        wrapper.calls = 0
        return wrapper

    return _wrap
