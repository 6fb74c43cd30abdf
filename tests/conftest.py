"""
Shared pytest fixtures for gke-guestbook tests.

Mocks are installed at import time so every resource declared by a test
goes to StackMocks instead of a live engine.
"""

from pathlib import Path

import pulumi
import pytest

from stack_mocks import StackMocks

FIXTURES = Path(__file__).parent / "fixtures"

MOCKS = StackMocks()
pulumi.runtime.set_mocks(MOCKS, preview=False)


@pytest.fixture
def mocks():
    """The global mock monitor with a clean registration log."""
    MOCKS.resources.clear()
    return MOCKS


@pytest.fixture
def guestbook_path():
    """Local copy of the guestbook manifest."""
    return str(FIXTURES / "guestbook.yaml")


@pytest.fixture
def service_obj():
    """A labelled guestbook frontend Service."""
    return {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {"name": "frontend", "labels": {"app": "guestbook", "tier": "frontend"}},
        "spec": {"ports": [{"port": 80}], "selector": {"app": "guestbook"}},
    }
