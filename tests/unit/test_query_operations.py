# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest
from unittest.mock import MagicMock

from odoo_xmlrpc.client import OdooClient
from odoo_xmlrpc.core.errors import CallMethodError
from odoo_xmlrpc.models.filters import BoundDomainBuilder, Operator, SearchFilter
from odoo_xmlrpc.models.record import Record
from odoo_xmlrpc.operations.query import QueryOperations
from tests.unit.test_helpers import API_KEY, BASE_URL, DATABASE, USER


class TestQueryOperations(unittest.TestCase):
    """Unit tests for the client.query namespace (QueryOperations)."""

    def setUp(self):
        self.client = OdooClient(BASE_URL, DATABASE, USER, API_KEY)
        self.client._rpc = MagicMock()
        self.rpc = self.client._rpc

    def test_namespace_exists(self):
        self.assertIsInstance(self.client.query, QueryOperations)

    # ------------------------------------------------------------------ search

    def test_search_wire_args(self):
        self.rpc._execute_kw.return_value = [4, 5]

        ids = self.client.query.search(
            "res.partner",
            [SearchFilter.eq("is_company", True), SearchFilter("id", Operator.GREATER, 3)],
            order="id",
            limit=2,
        )

        self.rpc._execute_kw.assert_called_once_with(
            "res.partner",
            "search",
            [[["is_company", "=", True], ["id", ">", 3]]],
            {"order": "id", "limit": 2},
            operation="query.search",
        )
        self.assertEqual(ids, [4, 5])

    def test_search_no_filters_no_options(self):
        self.rpc._execute_kw.return_value = [1]

        self.client.query.search("res.partner")

        self.rpc._execute_kw.assert_called_once_with("res.partner", "search", [[]], {}, operation="query.search")

    def test_search_nothing_matches(self):
        for empty in ([], None, False):
            with self.subTest(result=empty):
                self.rpc._execute_kw.return_value = empty
                self.assertEqual(self.client.query.search("res.partner"), [])

    def test_search_unexpected_result(self):
        self.rpc._execute_kw.return_value = ["a", "b"]
        with self.assertRaises(CallMethodError):
            self.client.query.search("res.partner")

    def test_search_accepts_generator(self):
        self.rpc._execute_kw.return_value = []
        self.client.query.search("res.partner", (SearchFilter.eq("id", i) for i in (1, 2)))
        domain = self.rpc._execute_kw.call_args[0][2][0]
        self.assertEqual(domain, [["id", "=", 1], ["id", "=", 2]])

    # ------------------------------------------------------------- search_read

    def test_search_read_wire_args_and_records(self):
        self.rpc._execute_kw.return_value = [
            {"id": 1, "move_id": [9, "WH/IN/0001"], "lot_id": False},
            {"id": 2, "move_id": [9, "WH/IN/0001"], "lot_id": [3, "LOT-3"]},
        ]

        rows = self.client.query.search_read("stock.move.line", SearchFilter.single("move_id", 9), offset=0)

        self.rpc._execute_kw.assert_called_once_with(
            "stock.move.line",
            "search_read",
            [[["move_id", "=", 9]]],
            {"offset": 0},
            operation="query.search_read",
        )
        self.assertEqual(len(rows), 2)
        self.assertTrue(all(isinstance(r, Record) for r in rows))
        self.assertIsNone(rows[0]["lot_id"])
        self.assertEqual(rows[1]["lot_id"], [3, "LOT-3"])
        for r in rows:
            self.assertNotIn(False, list(r.values()))

    def test_search_read_empty(self):
        self.rpc._execute_kw.return_value = []
        self.assertEqual(self.client.query.search_read("res.partner"), [])

    # ------------------------------------------------------------ search_count

    def test_search_count_wire_args(self):
        self.rpc._execute_kw.return_value = 12

        total = self.client.query.search_count("sale.order", [SearchFilter.eq("state", "sale")])

        self.rpc._execute_kw.assert_called_once_with(
            "sale.order", "search_count", [[["state", "=", "sale"]]], operation="query.search_count"
        )
        self.assertEqual(total, 12)

    def test_search_count_none_is_zero(self):
        self.rpc._execute_kw.return_value = None
        self.assertEqual(self.client.query.search_count("sale.order"), 0)

    def test_search_count_unexpected_result(self):
        self.rpc._execute_kw.return_value = "12"
        with self.assertRaises(CallMethodError):
            self.client.query.search_count("sale.order")

    # ----------------------------------------------------------------- builder

    def test_builder_is_bound(self):
        self.assertIsInstance(self.client.query.builder("res.partner"), BoundDomainBuilder)

    def test_builder_search_read(self):
        self.rpc._execute_kw.return_value = [{"id": 1, "name": "Kinnara"}]

        rows = self.client.query.builder("res.partner").ilike("name", "kin").order_by("name").limit(5).search_read()

        self.rpc._execute_kw.assert_called_once_with(
            "res.partner",
            "search_read",
            [[["name", "ilike", "kin"]]],
            {"order": "name", "limit": 5},
            operation="query.search_read",
        )
        self.assertEqual(rows[0]["name"], "Kinnara")

    def test_builder_count(self):
        self.rpc._execute_kw.return_value = 3
        self.assertEqual(self.client.query.builder("sale.order").eq("state", "sale").count(), 3)

    def test_builder_search(self):
        self.rpc._execute_kw.return_value = [8]
        self.assertEqual(self.client.query.builder("sale.order").offset(10).search(), [8])
        self.assertEqual(self.rpc._execute_kw.call_args[0][3], {"offset": 10})


if __name__ == "__main__":
    unittest.main()
