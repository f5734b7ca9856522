"""Pytest configuration and fixtures.

This file sets up the Python path so tests can import from the backend package,
and provides the fake-data fixtures shared across test layers.
"""

import os
import sys
from pathlib import Path

import pytest
from faker import Faker

# Add backend directory to Python path for imports
backend_path = Path(__file__).parent / "backend"
sys.path.insert(0, str(backend_path))

os.environ.setdefault("APP_ENV", "test")


@pytest.fixture
def fake() -> Faker:
    """Create a seeded Faker instance for reproducible test data."""
    fake = Faker()
    fake.seed_instance(1234)
    return fake
