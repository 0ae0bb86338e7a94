# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Record data model for Odoo models.

Provides a typed representation of records returned by ``read`` and
``search_read`` with dict-like access patterns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Union

# Type aliases for semantic clarity
RecordId = int
ModelName = str  # e.g., "res.partner", "hr.employee"

# Values a record field may hold once decoded from the wire
FieldValue = Union[None, bool, int, float, str, bytes, datetime, List[Any], Dict[str, Any]]


def normalize_false(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Replace every ``False`` value with ``None``.

    The server sends ``False`` in place of null for non-boolean fields. Only
    the exact boolean ``False`` is replaced; ``0``, ``""`` and empty lists are kept.

    :param data: Raw record mapping.
    :return: New mapping with the substitution applied.
    :rtype: dict[str, Any]
    """
    return {k: (None if v is False else v) for k, v in data.items()}


@dataclass
class Record:
    """
    Record representation with dict-like access.

    :param id: Record id, or ``None`` when the response had no ``id`` field.
    :type id: int | None
    :param model: Model name (e.g., "res.partner").
    :type model: str
    :param data: Field values as key-value pairs, ``id`` included.
    :type data: dict[str, Any]

    Example:
        Structured access::

            record = client.records.read("res.partner", 7)
            print(record.id)      # 7
            print(record.model)   # "res.partner"

        Dict-like access::

            print(record["name"])
            for key in record:
                print(key, record[key])
    """

    id: Optional[RecordId]
    model: ModelName
    data: Dict[str, FieldValue] = field(default_factory=dict)

    def __getitem__(self, key: str) -> FieldValue:
        return self.data[key]

    def __setitem__(self, key: str, value: FieldValue) -> None:
        self.data[key] = value

    def __delitem__(self, key: str) -> None:
        del self.data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a field value with optional default.

        :param key: Field name to access.
        :type key: str
        :param default: Default value if field doesn't exist.
        :return: Field value or default.
        """
        return self.data.get(key, default)

    def keys(self):
        return self.data.keys()

    def values(self):
        return self.data.values()

    def items(self):
        return self.data.items()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a plain dictionary of field values.

        :rtype: dict[str, Any]
        """
        return dict(self.data)

    @classmethod
    def from_api_response(cls, model: str, response_data: Dict[str, Any]) -> "Record":
        """
        Create a Record from one row of a ``read``/``search_read`` response.

        ``False`` values are normalized to ``None``.

        :param model: Model name.
        :type model: str
        :param response_data: Raw row mapping.
        :type response_data: dict[str, Any]
        :return: Record instance.
        :rtype: Record
        """
        data = normalize_false(response_data)
        record_id = data.get("id")
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            record_id = None
        return cls(id=record_id, model=model, data=data)


__all__ = ["Record", "RecordId", "ModelName", "FieldValue", "normalize_false"]
