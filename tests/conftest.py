"""
Pytest configuration and fixtures for all tests.

This file is automatically loaded by pytest and provides common fixtures
and configuration for all test modules.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from class_base import ClassBase, error_slots


class FailingWidget(ClassBase):
    """Always declines."""

    def init(self, config):
        return self.error('expected failure')


class NamedWidget(ClassBase):
    """Only accepts a configuration with a 'name'."""

    def init(self, config):
        self._name = config.get('name')
        if not self._name:
            return self.error("No name!")
        return self

    def name(self):
        return self._name


@pytest.fixture(autouse=True)
def reset_error_slots():
    """Start every test with empty class-level error slots."""
    error_slots.clear()
    yield
    error_slots.clear()


@pytest.fixture
def failing_class():
    return FailingWidget


@pytest.fixture
def named_class():
    return NamedWidget


@pytest.fixture
def sample_config():
    """Sample configuration mapping."""
    return {
        'name': 'foo',
        'size': 3,
        'tags': ['a', 'b'],
    }
