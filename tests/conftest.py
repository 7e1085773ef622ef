import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.events.registry import get_registry


@pytest.fixture(autouse=True)
def clear_registry():
    """Wipe the process-wide event catalog before and after each test."""
    get_registry().clear()
    yield
    get_registry().clear()
