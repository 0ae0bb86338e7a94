# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest
from unittest.mock import MagicMock

from odoo_xmlrpc.client import OdooClient
from odoo_xmlrpc.core.errors import CallMethodError
from odoo_xmlrpc.models.message import MessageType
from odoo_xmlrpc.models.record import Record
from odoo_xmlrpc.operations.records import RecordOperations
from tests.unit.test_helpers import API_KEY, BASE_URL, DATABASE, USER


class TestRecordOperations(unittest.TestCase):
    """Unit tests for the client.records namespace (RecordOperations)."""

    def setUp(self):
        self.client = OdooClient(BASE_URL, DATABASE, USER, API_KEY)
        self.client._rpc = MagicMock()
        self.rpc = self.client._rpc

    # ---------------------------------------------------------------- namespace

    def test_namespace_exists(self):
        self.assertIsInstance(self.client.records, RecordOperations)

    # -------------------------------------------------------------------- read

    def test_read_wire_args(self):
        self.rpc._execute_kw.return_value = [{"id": 7, "name": "Kinnara", "email": False}]

        record = self.client.records.read("res.partner", 7)

        self.rpc._execute_kw.assert_called_once_with("res.partner", "read", [[7]], operation="records.read")
        self.assertIsInstance(record, Record)
        self.assertEqual(record.id, 7)
        self.assertIsNone(record["email"])

    def test_read_no_rows_returns_none(self):
        self.rpc._execute_kw.return_value = []
        self.assertIsNone(self.client.records.read("res.partner", 99))

    def test_read_null_result_returns_none(self):
        self.rpc._execute_kw.return_value = None
        self.assertIsNone(self.client.records.read("res.partner", 99))

    def test_read_uses_first_row(self):
        self.rpc._execute_kw.return_value = [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]
        self.assertEqual(self.client.records.read("res.partner", 1)["name"], "A")

    # ------------------------------------------------------------------ create

    def test_create_wire_args(self):
        self.rpc._execute_kw.return_value = 42

        result = self.client.records.create("res.partner", {"name": "Kinnara"})

        self.rpc._execute_kw.assert_called_once_with(
            "res.partner", "create", [{"name": "Kinnara"}], operation="records.create"
        )
        self.assertEqual(result, 42)

    def test_create_non_integer_result(self):
        for bad in (None, False, "42", [42]):
            with self.subTest(result=bad):
                self.rpc._execute_kw.return_value = bad
                with self.assertRaises(CallMethodError) as ctx:
                    self.client.records.create("res.partner", {"name": "x"})
                self.assertEqual(ctx.exception.subcode, "call_unexpected_result")

    def test_create_requires_dict(self):
        with self.assertRaises(TypeError):
            self.client.records.create("res.partner", [{"name": "x"}])
        self.rpc._execute_kw.assert_not_called()

    def test_create_logs_new_id(self):
        self.rpc._execute_kw.return_value = 5
        with self.assertLogs("odoo_xmlrpc.operations.records", level="INFO") as logs:
            self.client.records.create("res.partner", {"name": "x"})
        self.assertIn("res.partner", logs.output[0])
        self.assertIn("[5]", logs.output[0])

    # ------------------------------------------------------------------- write

    def test_write_wire_args(self):
        self.rpc._execute_kw.return_value = True

        result = self.client.records.write("res.partner", 7, {"phone": "555-0100"})

        self.rpc._execute_kw.assert_called_once_with(
            "res.partner", "write", [[7], {"phone": "555-0100"}], operation="records.write"
        )
        self.assertIsNone(result)

    def test_write_requires_dict(self):
        with self.assertRaises(TypeError):
            self.client.records.write("res.partner", 7, None)

    # ------------------------------------------------------------------ unlink

    def test_unlink_single(self):
        self.client.records.unlink("res.partner", 7)
        self.rpc._execute_kw.assert_called_once_with("res.partner", "unlink", [[7]], operation="records.unlink")

    def test_unlink_many_sends_id_domain(self):
        self.client.records.unlink("res.partner", [3, 4, 5])
        self.rpc._execute_kw.assert_called_once_with(
            "res.partner",
            "unlink",
            [[["id", "=", 3], ["id", "=", 4], ["id", "=", 5]]],
            operation="records.unlink",
        )

    def test_unlink_empty_list_is_noop(self):
        observer = MagicMock()
        self.client._observer = observer
        self.client.records.unlink("res.partner", [])
        self.rpc._execute_kw.assert_not_called()
        observer.assert_not_called()

    def test_unlink_rejects_other_types(self):
        for bad in ("7", None, 7.0, True):
            with self.subTest(ids=bad):
                with self.assertRaises(TypeError):
                    self.client.records.unlink("res.partner", bad)
        self.rpc._execute_kw.assert_not_called()

    # ------------------------------------------------------------ message_post

    def test_message_post_wire_args(self):
        self.rpc._execute_kw.return_value = 1001

        result = self.client.records.message_post("purchase.order", [12], "Approved")

        self.rpc._execute_kw.assert_called_once_with(
            "purchase.order",
            "message_post",
            [12],
            {"body": "Approved", "message_type": "comment", "subtype_xmlid": "mail.mt_comment"},
            operation="records.message_post",
        )
        self.assertEqual(result, 1001)

    def test_message_post_single_id_and_notification(self):
        self.rpc._execute_kw.return_value = 1002

        self.client.records.message_post("purchase.order", 12, "Done", MessageType.NOTIFICATION)

        args = self.rpc._execute_kw.call_args[0]
        self.assertEqual(args[2], [12])
        self.assertEqual(args[3]["message_type"], "notification")

    def test_message_post_accepts_type_name(self):
        self.rpc._execute_kw.return_value = 1003

        for name, wire in (("comment", "comment"), ("NOTIFICATION", "notification")):
            with self.subTest(name=name):
                self.client.records.message_post("purchase.order", 12, "Done", name)
                self.assertEqual(self.rpc._execute_kw.call_args[0][3]["message_type"], wire)

    def test_message_post_rejects_unknown_type_name(self):
        with self.assertRaises(ValueError):
            self.client.records.message_post("purchase.order", 12, "Done", "email")
        self.rpc._execute_kw.assert_not_called()

    def test_message_post_rejects_other_type_values(self):
        with self.assertRaises(TypeError):
            self.client.records.message_post("purchase.order", 12, "Done", 1)
        self.rpc._execute_kw.assert_not_called()

    def test_message_post_rejects_non_integer_ids(self):
        for ids in (True, "7", [True], [1, "2"], None):
            with self.subTest(ids=ids):
                with self.assertRaises(TypeError):
                    self.client.records.message_post("purchase.order", ids, "Done")
        self.rpc._execute_kw.assert_not_called()


class TestRecordOperationsErrors(unittest.TestCase):
    """Failures of the low-level client propagate unchanged."""

    def setUp(self):
        self.client = OdooClient(BASE_URL, DATABASE, USER, API_KEY)
        self.client._rpc = MagicMock()

    def test_call_error_propagates(self):
        self.client._rpc._execute_kw.side_effect = CallMethodError("res.partner.write: boom")
        with self.assertRaises(CallMethodError):
            self.client.records.write("res.partner", 1, {"name": "x"})


if __name__ == "__main__":
    unittest.main()
