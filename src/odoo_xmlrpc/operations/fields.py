# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Field metadata operations namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from ..core._error_codes import CALL_UNEXPECTED_RESULT
from ..core.errors import CallMethodError
from ..models.field import Field

if TYPE_CHECKING:
    from ..client import OdooClient


class FieldOperations:
    """
    Model introspection.

    Accessed via ``client.fields``.

    Example::

        for f in client.fields.get("hr.employee"):
            print(f"{f.key}: {f.string} ({f.raw_type})")
    """

    def __init__(self, client: "OdooClient") -> None:
        self._client = client

    def get(self, model: str) -> List[Field]:
        """
        List the fields of a model with ``fields_get``.

        :param model: Model name.
        :type model: str
        :return: One :class:`~odoo_xmlrpc.models.field.Field` per field, empty
            when the server returns nothing.
        :rtype: list[Field]

        :raises ~odoo_xmlrpc.core.errors.CallMethodError: If the call fails.
        """
        with self._client._scoped_rpc("fields.get", model=model) as rpc:
            result = rpc._execute_kw(model, "fields_get", {}, operation="fields.get")
        if not result:
            return []
        if not isinstance(result, dict):
            raise CallMethodError(f"{model}.fields_get did not return a mapping", subcode=CALL_UNEXPECTED_RESULT)
        return [Field.from_api_response(key, metadata or {}) for key, metadata in result.items()]


__all__ = ["FieldOperations"]
