"""
Shared pytest fixtures.
"""
import pytest

from rfetch import system_info


@pytest.fixture(autouse=True)
def clear_lru_caches():
    """Prevent lru_cache state from leaking between tests."""
    yield
    system_info.is_termux.cache_clear()
    system_info._process_names.cache_clear()
