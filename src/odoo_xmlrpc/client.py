# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional

from .core.config import OdooConfig
from .data._rpc import _RpcClient
from .operations.dataframe import DataFrameOperations
from .operations.fields import FieldOperations
from .operations.query import QueryOperations
from .operations.records import RecordOperations

Observer = Callable[[str, Dict[str, Any]], None]
"""Callback receiving an operation id and the caller-supplied arguments."""


class OdooClient:
    """
    High-level client for the Odoo external XML-RPC API.

    Every operation logs in on ``/xmlrpc/2/common`` and then calls
    ``execute_kw`` on ``/xmlrpc/2/object``. Sessions are not reused between
    operations, so a revoked API key fails the next call.

    Operations are organized under namespaces:

    - ``client.fields``: model introspection (``fields_get``)
    - ``client.query``: ``search``, ``search_read``, ``search_count`` and a fluent builder
    - ``client.records``: ``read``, ``create``, ``write``, ``unlink``, ``message_post``
    - ``client.dataframe``: pandas wrappers over ``search_read`` and ``create``

    :param base_url: Server URL, for example ``"https://mycompany.odoo.com"``.
        Trailing slash is automatically removed.
    :type base_url: :class:`str`
    :param database: Database name.
    :type database: :class:`str`
    :param user: Login of the user.
    :type user: :class:`str`
    :param api_key: API key (or password) of the user.
    :type api_key: :class:`str`
    :param config: Optional configuration for timeouts and telemetry.
        If not provided, defaults are loaded from :meth:`~odoo_xmlrpc.core.config.OdooConfig.from_env`.
    :type config: ~odoo_xmlrpc.core.config.OdooConfig or None
    :param observer: Optional callback invoked once per operation, before any
        network call, with the operation id (e.g. ``"records.create"``) and a
        dict of the arguments the caller passed. Exceptions it raises abort the
        operation.
    :type observer: Callable[[str, dict], None] or None

    :raises ValueError: If ``base_url``, ``database``, ``user`` or ``api_key`` is empty.

    Example::

        from odoo_xmlrpc import OdooClient
        from odoo_xmlrpc.models.filters import SearchFilter

        client = OdooClient("https://mycompany.odoo.com", "mycompany", "admin@example.com", api_key)

        partner_id = client.records.create("res.partner", {"name": "Kinnara Studio"})
        partner = client.records.read("res.partner", partner_id)
        print(partner["name"], partner["email"])  # email is None when unset

        ids = client.query.search("res.partner", SearchFilter.single("name", "Kinnara Studio"))
        client.records.unlink("res.partner", ids)
    """

    def __init__(
        self,
        base_url: str,
        database: str,
        user: str,
        api_key: str,
        config: Optional[OdooConfig] = None,
        observer: Optional[Observer] = None,
    ) -> None:
        self._base_url = (base_url or "").rstrip("/")
        if not self._base_url:
            raise ValueError("base_url is required.")
        if not database:
            raise ValueError("database is required.")
        if not user:
            raise ValueError("user is required.")
        if not api_key:
            raise ValueError("api_key is required.")
        self._database = database
        self._user = user
        self._api_key = api_key
        self._config = config or OdooConfig.from_env()
        self._observer = observer
        self._rpc: Optional[_RpcClient] = None

        self.fields = FieldOperations(self)
        self.query = QueryOperations(self)
        self.records = RecordOperations(self)
        self.dataframe = DataFrameOperations(self)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def database(self) -> str:
        return self._database

    @property
    def user(self) -> str:
        return self._user

    def _get_rpc(self) -> _RpcClient:
        """
        Get or create the internal RPC client instance.

        :rtype: ~odoo_xmlrpc.data._rpc._RpcClient
        """
        if self._rpc is None:
            self._rpc = _RpcClient(
                self._base_url,
                self._database,
                self._user,
                self._api_key,
                self._config,
            )
        return self._rpc

    def _observe(self, operation: str, arguments: Dict[str, Any]) -> None:
        if self._observer is not None:
            self._observer(operation, arguments)

    @contextmanager
    def _scoped_rpc(self, operation: str, **arguments: Any) -> Iterator[_RpcClient]:
        """Notify the observer, then yield the low-level client."""
        self._observe(operation, arguments)
        yield self._get_rpc()

    def login(self) -> int:
        """
        Authenticate and return the user id.

        Operations log in on their own; call this to check credentials.

        :return: Session user id.
        :rtype: :class:`int`
        :raises ~odoo_xmlrpc.core.errors.AuthorizationError: If the credentials
            are rejected or the server cannot be reached.
        """
        with self._scoped_rpc("login") as rpc:
            return rpc._login()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self._base_url!r}, database={self._database!r}, user={self._user!r})"


__all__ = ["OdooClient", "Observer"]
