# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Session authentication against the ``common`` XML-RPC endpoint.
"""

from __future__ import annotations

from ..common.constants import PATH_COMMON, PROCEDURE_LOGIN
from ._error_codes import AUTH_INVALID_LOGIN, AUTH_TRANSPORT_FAILURE
from ._xmlrpc import _XmlRpcInvoker
from .errors import AuthorizationError, TransportError


class _AuthManager:
    """
    Exchange database, user and API key for a numeric session id (``uid``).

    Sessions are never cached: every call to :meth:`_login` performs a fresh
    round-trip, so a revoked key fails the very next operation.

    .. note::
        The API key is not included in error messages or details.
    """

    def __init__(self, invoker: _XmlRpcInvoker, base_url: str, database: str, user: str, api_key: str) -> None:
        self._invoker = invoker
        self._url = f"{base_url}{PATH_COMMON}"
        self._database = database
        self._user = user
        self._api_key = api_key

    def _login(self) -> int:
        """
        Authenticate and return the session id.

        :return: Positive integer user id.
        :rtype: :class:`int`
        :raises ~odoo_xmlrpc.core.errors.AuthorizationError: If the server rejects the credentials
            or the call fails.
        """
        try:
            uid = self._invoker.invoke(
                self._url,
                PROCEDURE_LOGIN,
                [self._database, self._user, self._api_key],
                operation="login",
            )
        except TransportError as exc:
            raise AuthorizationError(
                f"Login failed for user [{self._user}] database [{self._database}]: {exc.message}",
                subcode=AUTH_TRANSPORT_FAILURE,
                details={"user": self._user, "database": self._database},
            ) from exc

        # bool is an int subclass; the server answers False for bad credentials
        if isinstance(uid, bool) or not isinstance(uid, int):
            raise AuthorizationError(
                f"Invalid login authorization for user [{self._user}] database [{self._database}]",
                subcode=AUTH_INVALID_LOGIN,
                details={"user": self._user, "database": self._database, "response": repr(uid)},
            )
        return uid
