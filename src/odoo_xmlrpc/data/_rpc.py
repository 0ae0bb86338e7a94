# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level ``execute_kw`` client.

:class:`_RpcClient` owns the connection settings and assembles the positional
argument list every business call shares::

    [database, uid, api_key, model, method, args]            # no keyword arguments
    [database, uid, api_key, model, method, args, kwargs]
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..common.constants import PATH_OBJECT, PROCEDURE_EXECUTE_KW
from ..core._auth import _AuthManager
from ..core._error_codes import CALL_AUTHORIZATION_FAILED, CALL_TRANSPORT_FAILURE
from ..core._http import _HttpClient
from ..core._xmlrpc import _XmlRpcInvoker
from ..core.config import OdooConfig
from ..core.errors import AuthorizationError, CallMethodError, TransportError
from ..core.telemetry import create_telemetry_manager


class _RpcClient:
    """
    Authenticate and call model methods on the ``object`` endpoint.

    :param base_url: Server URL without trailing slash.
    :param database: Database name.
    :param user: Login of the user.
    :param api_key: API key or password.
    :param config: Client configuration.
    """

    def __init__(
        self,
        base_url: str,
        database: str,
        user: str,
        api_key: str,
        config: Optional[OdooConfig] = None,
    ) -> None:
        self.base_url = base_url
        self.database = database
        self.config = config or OdooConfig.from_env()
        self._api_key = api_key
        self._object_url = f"{base_url}{PATH_OBJECT}"
        self._invoker = _XmlRpcInvoker(
            _HttpClient(timeout=self.config.http_timeout, user_agent=self.config.user_agent),
            create_telemetry_manager(self.config.telemetry),
        )
        self.auth = _AuthManager(self._invoker, base_url, database, user, api_key)

    def _login(self) -> int:
        return self.auth._login()

    def _execute_kw(
        self,
        model: str,
        method: str,
        args: Any,
        kwargs: Optional[Dict[str, Any]] = None,
        *,
        operation: str,
    ) -> Any:
        """
        Log in, then call ``method`` on ``model``.

        :param model: Model name, e.g. ``"res.partner"``.
        :param method: Model method, e.g. ``"search_read"``.
        :param args: Positional arguments of the model method, sent as one value after the method name.
        :param kwargs: Keyword arguments of the model method, sent last when given.
        :param operation: Logical operation id, used for telemetry.
        :return: Decoded result of the call.
        :raises ~odoo_xmlrpc.core.errors.CallMethodError: If authentication or the call fails.
        """
        try:
            uid = self._login()
        except AuthorizationError as exc:
            raise CallMethodError(
                f"{model}.{method}: {exc.message}",
                subcode=CALL_AUTHORIZATION_FAILED,
                details={"model": model, "method": method},
            ) from exc

        params = [self.database, uid, self._api_key, model, method, args]
        if kwargs is not None:
            params.append(kwargs)
        try:
            return self._invoker.invoke(
                self._object_url,
                PROCEDURE_EXECUTE_KW,
                params,
                operation=operation,
                model=model,
            )
        except TransportError as exc:
            raise CallMethodError(
                f"{model}.{method}: {exc.message}",
                subcode=CALL_TRANSPORT_FAILURE,
                details={"model": model, "method": method, **exc.details},
            ) from exc
