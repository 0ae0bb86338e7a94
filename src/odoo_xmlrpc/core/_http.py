# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
HTTP client used to carry XML-RPC payloads.

This module provides :class:`~odoo_xmlrpc.core._http._HttpClient`, a thin wrapper
around the requests library. Each call performs exactly one attempt; no timeout
is applied unless one is configured.
"""

from __future__ import annotations

from typing import Any, Optional

import requests


class _HttpClient:
    """
    Single-attempt HTTP client with optional default timeout.

    :param timeout: Default request timeout in seconds. If None, requests waits indefinitely.
    :type timeout: :class:`float` | None
    :param user_agent: Optional ``User-Agent`` header sent with every request.
    :type user_agent: :class:`str` | None
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        self.default_timeout: Optional[float] = timeout
        self.user_agent = user_agent

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Execute an HTTP request.

        :param method: HTTP method (GET, POST, ...).
        :type method: :class:`str`
        :param url: Target URL for the request.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()``, including headers, data, etc.
        :return: HTTP response object.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: If the request fails.
        """
        if "timeout" not in kwargs and self.default_timeout is not None:
            kwargs["timeout"] = self.default_timeout
        if self.user_agent:
            headers = dict(kwargs.get("headers") or {})
            headers.setdefault("User-Agent", self.user_agent)
            kwargs["headers"] = headers
        return requests.request(method, url, **kwargs)
