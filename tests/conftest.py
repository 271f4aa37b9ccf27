"""
Shared pytest configuration: every test starts from empty in-memory stores
"""

import pytest

from database.store import reset_stores


@pytest.fixture(autouse=True)
def fresh_stores():
    """Reset the process-wide users/posts stores around each test"""
    reset_stores()
    yield
    reset_stores()
