# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Search operations namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

from ..core._error_codes import CALL_UNEXPECTED_RESULT
from ..core.errors import CallMethodError
from ..models.filters import BoundDomainBuilder, SearchFilter, to_domain, to_options
from ..models.record import Record

if TYPE_CHECKING:
    from ..client import OdooClient


class QueryOperations:
    """
    Search operations.

    Accessed via ``client.query``.

    Example:
        Filter list::

            ids = client.query.search("res.partner", [SearchFilter.eq("is_company", True)], limit=10)

        Search and read::

            for partner in client.query.search_read("res.partner", order="name"):
                print(partner["name"], partner["email"])  # email is None when unset

        Fluent builder::

            total = client.query.builder("sale.order").eq("state", "sale").count()
    """

    def __init__(self, client: "OdooClient") -> None:
        """
        Initialize QueryOperations.

        :param client: Parent OdooClient instance.
        :type client: OdooClient
        """
        self._client = client

    def search(
        self,
        model: str,
        filters: Optional[Iterable[SearchFilter]] = None,
        order: Optional[str] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[int]:
        """
        Return the ids of records matching ``filters``.

        :param model: Model name, e.g. ``"res.partner"``.
        :type model: str
        :param filters: Predicates, AND-ed together. ``None`` matches every record.
        :type filters: Iterable[SearchFilter] or None
        :param order: Sort specification, e.g. ``"name desc"``.
        :type order: str or None
        :param offset: Number of matching records to skip.
        :type offset: int or None
        :param limit: Maximum number of ids to return.
        :type limit: int or None
        :return: Matching ids; empty list when nothing matches.
        :rtype: list[int]

        :raises ~odoo_xmlrpc.core.errors.CallMethodError: If the call fails.
        """
        filters = list(filters) if filters is not None else None
        with self._client._scoped_rpc(
            "query.search", model=model, filters=filters, order=order, offset=offset, limit=limit
        ) as rpc:
            result = rpc._execute_kw(
                model,
                "search",
                [to_domain(filters)],
                to_options(order, offset, limit),
                operation="query.search",
            )
        if not result:
            return []
        if not isinstance(result, list) or not all(isinstance(i, int) and not isinstance(i, bool) for i in result):
            raise CallMethodError(f"{model}.search did not return a list of ids", subcode=CALL_UNEXPECTED_RESULT)
        return result

    def search_read(
        self,
        model: str,
        filters: Optional[Iterable[SearchFilter]] = None,
        order: Optional[str] = None,
        offset: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Record]:
        """
        Search and read matching records in one call.

        Parameters are the same as :meth:`search`. Every ``False`` field value
        is returned as ``None``.

        :return: Matching records.
        :rtype: list[Record]

        :raises ~odoo_xmlrpc.core.errors.CallMethodError: If the call fails.

        Example::

            rows = client.query.search_read(
                "stock.move.line",
                [SearchFilter("move_id", Operator.EQUAL, 9)],
                order="id",
            )
        """
        filters = list(filters) if filters is not None else None
        with self._client._scoped_rpc(
            "query.search_read", model=model, filters=filters, order=order, offset=offset, limit=limit
        ) as rpc:
            result = rpc._execute_kw(
                model,
                "search_read",
                [to_domain(filters)],
                to_options(order, offset, limit),
                operation="query.search_read",
            )
        return [Record.from_api_response(model, row) for row in result or []]

    def search_count(self, model: str, filters: Optional[Iterable[SearchFilter]] = None) -> int:
        """
        Count the records matching ``filters``.

        :param model: Model name.
        :type model: str
        :param filters: Predicates, AND-ed together.
        :type filters: Iterable[SearchFilter] or None
        :return: Number of matching records, ``0`` when the server returns nothing.
        :rtype: int

        :raises ~odoo_xmlrpc.core.errors.CallMethodError: If the call fails.
        """
        filters = list(filters) if filters is not None else None
        with self._client._scoped_rpc("query.search_count", model=model, filters=filters) as rpc:
            result = rpc._execute_kw(model, "search_count", [to_domain(filters)], operation="query.search_count")
        if result is None:
            return 0
        if isinstance(result, bool) or not isinstance(result, int):
            raise CallMethodError(f"{model}.search_count did not return an integer", subcode=CALL_UNEXPECTED_RESULT)
        return result

    def builder(self, model: str) -> BoundDomainBuilder:
        """
        Create a fluent domain builder bound to this client.

        :param model: Model name.
        :type model: str
        :rtype: BoundDomainBuilder

        Example::

            late = (client.query.builder("account.move")
                    .eq("payment_state", "not_paid")
                    .lt("invoice_date_due", "2025-01-01")
                    .order_by("invoice_date_due")
                    .search_read())
        """
        return BoundDomainBuilder(model, self)


__all__ = ["QueryOperations"]
