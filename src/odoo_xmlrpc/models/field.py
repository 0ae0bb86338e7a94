# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Field metadata models.

Provides a typed view over the per-field mapping returned by ``fields_get``.
The server's full type vocabulary (``char``, ``many2one``, ``selection``,
``datetime``...) stays available in :attr:`Field.metadata`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

# Type alias for semantic clarity
FieldKey = str  # e.g., "name", "partner_id"


class DataType(Enum):
    """Coarse data type of a field."""

    STRING = "string"
    INTEGER = "integer"

    @classmethod
    def parse(cls, value: Optional[str]) -> "DataType":
        """
        Narrow a server field type to :class:`DataType`.

        ``integer`` and ``many2one`` (a foreign key id) map to ``INTEGER``;
        every other type maps to ``STRING``.
        """
        if value in ("integer", "many2one"):
            return cls.INTEGER
        return cls.STRING


def _flag(metadata: Dict[str, Any], key: str) -> bool:
    # Absent flags read as False
    value = metadata.get(key, False)
    if isinstance(value, str):
        return value.lower() == "true"
    return bool(value)


@dataclass
class Field:
    """
    Field metadata.

    :param key: Field (attribute) name.
    :type key: str
    :param string: Human-readable label.
    :type string: str | None
    :param required: Whether the field is required.
    :type required: bool
    :param type: Coarse data type.
    :type type: DataType
    :param sortable: Whether the field can be used in ``order``.
    :type sortable: bool
    :param help: Help text, if any.
    :type help: str | None
    :param metadata: Raw metadata mapping as returned by the server.
    :type metadata: dict[str, Any]

    Example::

        for f in client.fields.get("hr.employee"):
            print(f.key, f.type, f.metadata.get("type"))
    """

    key: FieldKey
    string: Optional[str] = None
    required: bool = False
    type: DataType = DataType.STRING
    sortable: bool = False
    help: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def raw_type(self) -> Optional[str]:
        """Server-side type name, e.g. ``"many2one"``."""
        return self.metadata.get("type")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "string": self.string,
            "required": self.required,
            "type": self.type.value,
            "sortable": self.sortable,
            "help": self.help,
        }

    @classmethod
    def from_api_response(cls, key: str, metadata: Dict[str, Any]) -> "Field":
        """
        Create a Field from one entry of a ``fields_get`` response.

        ``False`` is the server's placeholder for a missing label or help text
        and is mapped to ``None``.

        :param key: Field name.
        :param metadata: Field metadata mapping.
        :rtype: Field
        """
        label = metadata.get("string")
        help_text = metadata.get("help")
        return cls(
            key=key,
            string=label if isinstance(label, str) else None,
            required=_flag(metadata, "required"),
            type=DataType.parse(metadata.get("type")),
            sortable=_flag(metadata, "sortable"),
            help=help_text if isinstance(help_text, str) else None,
            metadata=dict(metadata),
        )


__all__ = ["DataType", "Field", "FieldKey"]
