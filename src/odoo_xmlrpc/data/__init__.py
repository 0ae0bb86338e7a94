# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level ``execute_kw`` plumbing. Internal.
"""

__all__ = []
