# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .telemetry import TelemetryConfig


@dataclass(frozen=True)
class OdooConfig:
    """
    Configuration settings for Odoo client operations.

    :param http_timeout: Request timeout in seconds. Default is None (no timeout, calls block until the server answers).
    :type http_timeout: float or None
    :param user_agent: Optional ``User-Agent`` header sent with every call.
    :type user_agent: str or None
    :param telemetry: Optional telemetry settings. Telemetry is disabled when None.
    :type telemetry: ~odoo_xmlrpc.core.telemetry.TelemetryConfig or None
    """

    http_timeout: Optional[float] = None
    user_agent: Optional[str] = None
    telemetry: Optional[TelemetryConfig] = None

    @classmethod
    def from_env(cls) -> "OdooConfig":
        """
        Create a configuration instance with default settings.

        :return: Configuration instance with default values.
        :rtype: ~odoo_xmlrpc.core.config.OdooConfig
        """
        return cls(
            http_timeout=None,
            user_agent=None,
            telemetry=None,
        )
