# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for client tests.

This module provides common test fixtures, fake transports, and sample data
that can be used across all test modules.
"""

import pytest

from odoo_xmlrpc.core.config import OdooConfig
from tests.unit.test_helpers import FakeOdooServer, make_client


@pytest.fixture
def test_config():
    """Test configuration with a short timeout."""
    return OdooConfig(http_timeout=5)


@pytest.fixture
def fake_server():
    """In-memory Odoo-like server."""
    return FakeOdooServer()


@pytest.fixture
def client(fake_server):
    """OdooClient wired to the in-memory server."""
    return make_client(fake_server)


@pytest.fixture
def sample_partner():
    """Sample partner values for testing."""
    return {
        "name": "Kinnara Studio",
        "email": "hello@kinnara.example",
    }
