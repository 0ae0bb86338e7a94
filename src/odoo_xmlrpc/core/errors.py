# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured exceptions raised by the Odoo XML-RPC client.

All errors derive from :class:`OdooError` and carry a machine readable
``code``/``subcode`` pair plus a ``details`` mapping. The original exception
(transport fault, HTTP failure, authorization failure) is always chained as
``__cause__``.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional


class OdooError(Exception):
    """Base structured error for the Odoo XML-RPC client."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class TransportError(OdooError):
    """
    The remote procedure could not be invoked or answered with a fault.

    :param message: Human readable description.
    :param subcode: One of the ``transport_*`` constants from ``_error_codes``.
    :param status_code: HTTP status of the response, when one was received.
    :param fault_code: XML-RPC ``faultCode`` for server faults.
    :param fault_string: XML-RPC ``faultString`` for server faults.
    :param url: Endpoint the call was addressed to.
    """

    def __init__(
        self,
        message: str,
        *,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        fault_code: Any = None,
        fault_string: Optional[str] = None,
        url: Optional[str] = None,
        is_transient: bool = False,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = dict(details or {})
        if fault_code is not None:
            d["fault_code"] = fault_code
        if fault_string is not None:
            d["fault_string"] = fault_string
        if url is not None:
            d["url"] = url
        super().__init__(
            message,
            code="transport_error",
            subcode=subcode,
            status_code=status_code,
            details=d,
            source="server" if fault_code is not None or status_code is not None else "client",
            is_transient=is_transient,
        )


class AuthorizationError(OdooError):
    """A session could not be established with the ``login`` procedure."""

    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="authorization_error", subcode=subcode, details=details, source="server")


class CallMethodError(OdooError):
    """A business call through ``execute_kw`` failed."""

    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="call_error", subcode=subcode, details=details, source="client")


__all__ = ["OdooError", "TransportError", "AuthorizationError", "CallMethodError"]
