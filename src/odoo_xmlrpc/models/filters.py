# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Search filters and domain construction.

Odoo expresses search predicates as a *domain*: a list of
``[field, operator, value]`` triples that are implicitly AND-ed. This module
provides :class:`SearchFilter` for single predicates, :func:`to_domain` and
:func:`to_options` for the wire form, and the fluent :class:`DomainBuilder`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Union

if TYPE_CHECKING:
    from ..operations.query import QueryOperations
    from .record import Record


class Operator(str, Enum):
    """Comparison operators accepted in a domain triple."""

    EQUAL = "="
    NOT_EQUAL = "!="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="
    IN = "in"
    NOT_IN = "not in"
    LIKE = "like"
    ILIKE = "ilike"


@dataclass(frozen=True)
class SearchFilter:
    """
    A single ``field operator value`` predicate.

    :param field: Field name, possibly a dotted path (``"partner_id.country_id.code"``).
    :type field: str
    :param operator: Comparison operator. Plain strings are accepted and passed through as-is.
    :type operator: Operator | str
    :param value: Value compared against. Its type depends on the field.

    Example::

        SearchFilter("name", Operator.EQUAL, "PB00010")
        SearchFilter.eq("state", "draft")
        SearchFilter.in_("id", 1, 2, 3)
    """

    field: str
    operator: Union[Operator, str] = Operator.EQUAL
    value: Any = None

    @classmethod
    def eq(cls, field: str, value: Any) -> "SearchFilter":
        return cls(field, Operator.EQUAL, value)

    @classmethod
    def in_(cls, field: str, *values: Any) -> "SearchFilter":
        """Membership filter; ``values`` are sent as a list."""
        return cls(field, Operator.IN, list(values))

    @classmethod
    def single(cls, field: str, value: Any) -> List["SearchFilter"]:
        """One-element filter list matching ``field = value``."""
        return [cls.eq(field, value)]

    def to_wire(self) -> List[Any]:
        op = self.operator.value if isinstance(self.operator, Operator) else self.operator
        return [self.field, op, self.value]


def to_domain(filters: Optional[Iterable[SearchFilter]]) -> List[List[Any]]:
    """
    Convert filters into the domain triple list expected by the server.

    :param filters: Filters to convert. ``None`` yields an empty domain.
    :return: One ``[field, operator, value]`` list per filter, in input order.
    :rtype: list[list]
    """
    if filters is None:
        return []
    return [f.to_wire() for f in filters]


def to_options(order: Optional[str] = None, offset: Optional[int] = None, limit: Optional[int] = None) -> Dict[str, Any]:
    """
    Build the keyword options mapping for ``search``/``search_read``.

    Only the arguments that are not ``None`` appear in the result; the server
    must never receive a paging key without a value.

    :param order: Sort specification, e.g. ``"name desc, id"``.
    :param offset: Number of records to skip.
    :param limit: Maximum number of records to return.
    :rtype: dict

    Example::

        to_options(order="id", limit=5)  # {'order': 'id', 'limit': 5}
    """
    options: Dict[str, Any] = {}
    if order is not None:
        options["order"] = order
    if offset is not None:
        options["offset"] = offset
    if limit is not None:
        options["limit"] = limit
    return options


@dataclass
class DomainBuilder:
    """
    Fluent interface for building a domain plus paging options.

    :param model: Model the query targets.
    :type model: str

    Example:
        Standalone::

            query = (DomainBuilder("res.partner")
                     .eq("is_company", True)
                     .in_("country_id.code", "ID", "SG")
                     .order_by("name")
                     .limit(10))
            params = query.build()

        Bound to a client (see ``client.query.builder``)::

            partners = (client.query.builder("res.partner")
                        .ilike("name", "kinnara")
                        .limit(5)
                        .search_read())
    """

    model: str
    _filters: List[SearchFilter] = field(default_factory=list)
    _order: List[str] = field(default_factory=list)
    _offset: Optional[int] = None
    _limit: Optional[int] = None

    def where(self, field_name: str, operator: Union[Operator, str], value: Any) -> "DomainBuilder":
        self._filters.append(SearchFilter(field_name, operator, value))
        return self

    def eq(self, field_name: str, value: Any) -> "DomainBuilder":
        return self.where(field_name, Operator.EQUAL, value)

    def ne(self, field_name: str, value: Any) -> "DomainBuilder":
        return self.where(field_name, Operator.NOT_EQUAL, value)

    def gt(self, field_name: str, value: Any) -> "DomainBuilder":
        return self.where(field_name, Operator.GREATER, value)

    def ge(self, field_name: str, value: Any) -> "DomainBuilder":
        return self.where(field_name, Operator.GREATER_EQUAL, value)

    def lt(self, field_name: str, value: Any) -> "DomainBuilder":
        return self.where(field_name, Operator.LESS, value)

    def le(self, field_name: str, value: Any) -> "DomainBuilder":
        return self.where(field_name, Operator.LESS_EQUAL, value)

    def in_(self, field_name: str, *values: Any) -> "DomainBuilder":
        return self.where(field_name, Operator.IN, list(values))

    def ilike(self, field_name: str, value: str) -> "DomainBuilder":
        return self.where(field_name, Operator.ILIKE, value)

    def order_by(self, field_name: str, descending: bool = False) -> "DomainBuilder":
        """
        Add a sort key. Can be called multiple times for multi-field sorting.

        :param field_name: Field to sort by.
        :param descending: Sort in descending order.
        """
        self._order.append(f"{field_name} desc" if descending else field_name)
        return self

    def offset(self, count: int) -> "DomainBuilder":
        if count < 0:
            raise ValueError("offset must be zero or positive")
        self._offset = count
        return self

    def limit(self, count: int) -> "DomainBuilder":
        if count < 1:
            raise ValueError("limit must be at least 1")
        self._limit = count
        return self

    @property
    def filters(self) -> List[SearchFilter]:
        return list(self._filters)

    @property
    def order(self) -> Optional[str]:
        return ", ".join(self._order) if self._order else None

    def build(self) -> Dict[str, Any]:
        """
        Build the wire-ready domain and options.

        :return: Dictionary with ``model``, ``domain`` and ``options`` keys.
        :rtype: dict

        Example::

            DomainBuilder("sale.order").eq("state", "sale").limit(10).build()
            # {'model': 'sale.order', 'domain': [['state', '=', 'sale']], 'options': {'limit': 10}}
        """
        return {
            "model": self.model,
            "domain": to_domain(self._filters),
            "options": to_options(self.order, self._offset, self._limit),
        }


class BoundDomainBuilder(DomainBuilder):
    """
    :class:`DomainBuilder` created by ``client.query.builder(model)``.

    Adds terminal methods that run the query through the owning client.
    """

    def __init__(self, model: str, query_ops: "QueryOperations") -> None:
        super().__init__(model)
        self._query_ops = query_ops

    def search(self) -> List[int]:
        return self._query_ops.search(self.model, self.filters, self.order, self._offset, self._limit)

    def search_read(self) -> List["Record"]:
        return self._query_ops.search_read(self.model, self.filters, self.order, self._offset, self._limit)

    def count(self) -> int:
        return self._query_ops.search_count(self.model, self.filters)


__all__ = [
    "Operator",
    "SearchFilter",
    "DomainBuilder",
    "BoundDomainBuilder",
    "to_domain",
    "to_options",
]
