# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Common constants for the Odoo client.
"""

__all__ = []
