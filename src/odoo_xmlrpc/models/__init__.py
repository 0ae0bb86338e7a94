# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models and type definitions for the Odoo client.

- :class:`~odoo_xmlrpc.models.record.Record`: Record representation with dict-like access.
- :class:`~odoo_xmlrpc.models.field.Field`: Field metadata from ``fields_get``.
- :class:`~odoo_xmlrpc.models.filters.SearchFilter`: Domain predicate.
- :class:`~odoo_xmlrpc.models.filters.DomainBuilder`: Fluent domain builder.
- :class:`~odoo_xmlrpc.models.message.MessageType`: Chatter message category.

Import models directly from their modules.
"""

__all__ = []
