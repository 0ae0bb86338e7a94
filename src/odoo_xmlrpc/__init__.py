# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Client library for the Odoo external XML-RPC API.
"""

from .__version__ import __version__
from .client import OdooClient

__all__ = ["__version__", "OdooClient"]
