# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for field metadata models."""

import unittest

from odoo_xmlrpc.models.field import DataType, Field
from odoo_xmlrpc.models.message import MessageType


class TestDataType(unittest.TestCase):
    def test_integer_types(self):
        self.assertEqual(DataType.parse("integer"), DataType.INTEGER)
        self.assertEqual(DataType.parse("many2one"), DataType.INTEGER)

    def test_everything_else_is_string(self):
        for raw in ("char", "text", "float", "monetary", "boolean", "date", "datetime", "selection", "one2many", None):
            with self.subTest(raw=raw):
                self.assertEqual(DataType.parse(raw), DataType.STRING)


class TestField(unittest.TestCase):
    def test_from_api_response(self):
        metadata = {
            "string": "Related Partner",
            "type": "many2one",
            "required": True,
            "sortable": True,
            "help": "Partner linked to the employee",
            "relation": "res.partner",
        }
        f = Field.from_api_response("partner_id", metadata)

        self.assertEqual(f.key, "partner_id")
        self.assertEqual(f.string, "Related Partner")
        self.assertTrue(f.required)
        self.assertEqual(f.type, DataType.INTEGER)
        self.assertTrue(f.sortable)
        self.assertEqual(f.help, "Partner linked to the employee")
        self.assertEqual(f.raw_type, "many2one")
        self.assertEqual(f.metadata["relation"], "res.partner")

    def test_false_help_and_missing_flags(self):
        f = Field.from_api_response("name", {"string": "Name", "type": "char", "help": False})

        self.assertIsNone(f.help)
        self.assertFalse(f.required)
        self.assertFalse(f.sortable)
        self.assertEqual(f.type, DataType.STRING)

    def test_string_flags(self):
        f = Field.from_api_response("x", {"required": "true", "sortable": "false"})
        self.assertTrue(f.required)
        self.assertFalse(f.sortable)

    def test_to_dict(self):
        f = Field.from_api_response("age", {"string": "Age", "type": "integer", "required": False, "sortable": True})
        self.assertEqual(
            f.to_dict(),
            {"key": "age", "string": "Age", "required": False, "type": "integer", "sortable": True, "help": None},
        )


class TestMessageType(unittest.TestCase):
    def test_wire_name_is_lowercase_member_name(self):
        self.assertEqual(MessageType.COMMENT.wire_name, "comment")
        self.assertEqual(MessageType.NOTIFICATION.wire_name, "notification")


if __name__ == "__main__":
    unittest.main()
