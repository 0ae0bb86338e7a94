# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the Odoo client.

- FieldOperations: model introspection
- QueryOperations: search, search_read and search_count
- RecordOperations: read, create, write, unlink and message_post
- DataFrameOperations: pandas wrappers
"""

__all__ = []
