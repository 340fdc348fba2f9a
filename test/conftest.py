"""
Pytest configuration and fixtures for sparse field selection tests
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from sparse_fields import FieldSelector  # noqa: E402


@pytest.fixture
def user_options():
    """Field schema for a user resource"""
    return {
        "available_fields": ["id", "name", "email", "address", "phone", "createdAt", "updatedAt"],
        "default_fields": ["id", "name", "email"],
        "field_groups": {
            "basic": ["id", "name"],
            "contact": ["email", "phone"],
            "timestamps": ["createdAt", "updatedAt"],
        },
    }


@pytest.fixture
def selector(user_options):
    """Selector with default configuration"""
    return FieldSelector(user_options)


@pytest.fixture
def user_record():
    return {
        "id": 1,
        "name": "John",
        "email": "john@example.com",
        "phone": "123456789",
        "address": "123 Main St",
    }
