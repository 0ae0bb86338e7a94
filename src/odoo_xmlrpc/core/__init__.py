# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the Odoo client.

This module contains the foundational components including authentication,
configuration, XML-RPC transport, telemetry, and error handling.
"""

from .config import OdooConfig
from .errors import AuthorizationError, CallMethodError, OdooError, TransportError
from .telemetry import TelemetryConfig, TelemetryHook

__all__ = [
    "OdooConfig",
    "OdooError",
    "TransportError",
    "AuthorizationError",
    "CallMethodError",
    "TelemetryConfig",
    "TelemetryHook",
]
