# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Chatter message types."""

from __future__ import annotations

from enum import Enum


class MessageType(Enum):
    """
    Category of a message posted with ``message_post``.

    The wire value is the lower-cased member name.
    """

    COMMENT = "comment"
    NOTIFICATION = "notification"

    @property
    def wire_name(self) -> str:
        return self.name.lower()


__all__ = ["MessageType"]
