# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Internal utilities for the Odoo client.
"""

__all__ = []
