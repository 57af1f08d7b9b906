"""Shared fixtures for implementor registry tests."""

from __future__ import annotations

import pytest

from implementor_registry.registration import global_mailbox


@pytest.fixture(autouse=True)
def _reset_global_mailbox():
    """Keep the process-wide mailbox empty between tests."""

    global_mailbox().reset()
    yield
    global_mailbox().reset()
