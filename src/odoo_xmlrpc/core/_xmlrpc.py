# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
XML-RPC procedure invocation over HTTP.

:class:`_XmlRpcInvoker` marshals a positional argument list with
:mod:`xmlrpc.client`, posts it through :class:`~odoo_xmlrpc.core._http._HttpClient`
and decodes the single value returned by the server.
"""

from __future__ import annotations

import xmlrpc.client
from typing import Any, Optional, Sequence, Union
from urllib.parse import urlsplit
from xml.parsers.expat import ExpatError

import requests

from ._error_codes import (
    TRANSIENT_HTTP_STATUSES,
    TRANSPORT_CONNECTION,
    TRANSPORT_FAULT,
    TRANSPORT_MALFORMED_URL,
    TRANSPORT_MARSHAL,
    TRANSPORT_PROTOCOL,
    http_subcode,
)
from ._http import _HttpClient
from .errors import TransportError
from .telemetry import NoOpTelemetryManager, TelemetryManager

_HEADERS = {"Content-Type": "text/xml", "Accept": "text/xml"}


def _validate_url(url: str) -> None:
    try:
        scheme = urlsplit(url or "").scheme
        if scheme in ("http", "https"):
            requests.models.PreparedRequest().prepare_url(url, None)
    except (
        ValueError,
        requests.exceptions.InvalidURL,
        requests.exceptions.InvalidSchema,
        requests.exceptions.MissingSchema,
    ) as exc:
        raise TransportError(f"Malformed endpoint URL {url!r}: {exc}", subcode=TRANSPORT_MALFORMED_URL, url=url) from exc
    if scheme not in ("http", "https"):
        raise TransportError(f"Malformed endpoint URL {url!r}: scheme must be http or https", subcode=TRANSPORT_MALFORMED_URL, url=url)


def _marshal(procedure: str, params: Sequence[Any], url: str) -> bytes:
    try:
        return xmlrpc.client.dumps(tuple(params), procedure, allow_none=True).encode("utf-8")
    except (TypeError, OverflowError) as exc:
        raise TransportError(
            f"Cannot marshal arguments of {procedure}: {exc}",
            subcode=TRANSPORT_MARSHAL,
            url=url,
        ) from exc


class _XmlRpcInvoker:
    """
    Invoke a named remote procedure with positional arguments.

    One HTTP round-trip per call. No retries.

    :param http: HTTP client carrying the payloads.
    :param telemetry: Telemetry manager wrapping each call, defaults to a no-op manager.
    """

    def __init__(
        self,
        http: Optional[_HttpClient] = None,
        telemetry: Optional[Union[TelemetryManager, NoOpTelemetryManager]] = None,
    ) -> None:
        self._http = http or _HttpClient()
        self._telemetry = telemetry or NoOpTelemetryManager()

    def invoke(
        self,
        url: str,
        procedure: str,
        params: Sequence[Any],
        *,
        operation: Optional[str] = None,
        model: Optional[str] = None,
    ) -> Any:
        """
        Call ``procedure`` on ``url`` and return the decoded result.

        :param url: Absolute endpoint URL, e.g. ``https://odoo.example.com/xmlrpc/2/object``.
        :type url: :class:`str`
        :param procedure: Remote procedure name (``login``, ``execute_kw``...).
        :type procedure: :class:`str`
        :param params: Positional arguments, marshalled in order.
        :param operation: Logical client operation, used for telemetry only.
        :param model: Model name addressed by the call, used for telemetry only.
        :return: Decoded value: ``int``, ``float``, ``str``, ``bool``, ``list``, ``dict``, ``bytes``,
            ``datetime`` or ``None``.
        :raises ~odoo_xmlrpc.core.errors.TransportError: On malformed URL, connection failure,
            unmarshallable arguments, HTTP error status, undecodable response or XML-RPC fault.
        """
        _validate_url(url)
        body = _marshal(procedure, params, url)

        with self._telemetry.trace_call(operation or procedure, procedure, url, model) as ctx:
            try:
                response = self._http._request("post", url, data=body, headers=dict(_HEADERS))
            except requests.exceptions.RequestException as exc:
                raise TransportError(
                    f"Could not reach {url}: {exc}",
                    subcode=TRANSPORT_CONNECTION,
                    url=url,
                    is_transient=True,
                ) from exc

            status = response.status_code
            if status >= 400:
                self._telemetry.record_failure(ctx, status_code=status)
                raise TransportError(
                    f"HTTP {status} calling {procedure} on {url}",
                    subcode=http_subcode(status),
                    status_code=status,
                    url=url,
                    is_transient=status in TRANSIENT_HTTP_STATUSES,
                )

            try:
                result, _ = xmlrpc.client.loads(response.content, use_builtin_types=True)
            except xmlrpc.client.Fault as fault:
                self._telemetry.record_failure(ctx, status_code=status, fault_code=fault.faultCode)
                raise TransportError(
                    f"Remote fault calling {procedure}: {fault.faultString}",
                    subcode=TRANSPORT_FAULT,
                    status_code=status,
                    fault_code=fault.faultCode,
                    fault_string=fault.faultString,
                    url=url,
                ) from fault
            except (ExpatError, xmlrpc.client.ResponseError, ValueError, TypeError) as exc:
                # ValueError/TypeError come from malformed scalars such as <int>abc</int>
                self._telemetry.record_failure(ctx, status_code=status)
                raise TransportError(
                    f"Undecodable response calling {procedure} on {url}: {exc}",
                    subcode=TRANSPORT_PROTOCOL,
                    status_code=status,
                    url=url,
                ) from exc

            self._telemetry.record_result(ctx, status_code=status)

        return result[0] if result else None
