# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Record CRUD and messaging operations namespace."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from ..common.constants import MESSAGE_SUBTYPE_COMMENT
from ..core._error_codes import CALL_UNEXPECTED_RESULT
from ..core.errors import CallMethodError
from ..models.filters import SearchFilter, to_domain
from ..models.message import MessageType
from ..models.record import Record

if TYPE_CHECKING:
    from ..client import OdooClient

logger = logging.getLogger(__name__)


def _expect_id(value: Any, model: str, method: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CallMethodError(
            f"{model}.{method} returned {value!r} instead of an integer id",
            subcode=CALL_UNEXPECTED_RESULT,
            details={"model": model, "method": method},
        )
    return value


class RecordOperations:
    """
    Record CRUD operations.

    Accessed via ``client.records``. ``unlink`` accepts a single id or a list
    of ids.

    Example::

        partner_id = client.records.create("res.partner", {"name": "Kinnara"})
        client.records.write("res.partner", partner_id, {"phone": "555-0100"})
        partner = client.records.read("res.partner", partner_id)
        client.records.message_post("res.partner", partner_id, "Welcome aboard")
        client.records.unlink("res.partner", partner_id)
    """

    def __init__(self, client: "OdooClient") -> None:
        """
        Initialize RecordOperations.

        :param client: Parent OdooClient instance.
        :type client: OdooClient
        """
        self._client = client

    def read(self, model: str, record_id: int) -> Optional[Record]:
        """
        Read one record by id.

        :param model: Model name.
        :type model: str
        :param record_id: Record id.
        :type record_id: int
        :return: The record with ``False`` values normalized to ``None``, or
            ``None`` if the server returned no row.
        :rtype: Record or None

        :raises ~odoo_xmlrpc.core.errors.CallMethodError: If the call fails.
        """
        with self._client._scoped_rpc("records.read", model=model, record_id=record_id) as rpc:
            rows = rpc._execute_kw(model, "read", [[record_id]], operation="records.read")
        if not rows:
            return None
        return Record.from_api_response(model, rows[0])

    def create(self, model: str, row: Dict[str, Any]) -> int:
        """
        Create a record.

        Not idempotent: repeating a failed create may produce duplicates.

        :param model: Model name.
        :type model: str
        :param row: Field values of the new record.
        :type row: dict
        :return: Id of the created record.
        :rtype: int

        :raises ~odoo_xmlrpc.core.errors.CallMethodError: If the call fails or
            the server does not return an integer id.
        """
        if not isinstance(row, dict):
            raise TypeError("row must be a dict")
        with self._client._scoped_rpc("records.create", model=model, row=row) as rpc:
            result = rpc._execute_kw(model, "create", [row], operation="records.create")
        record_id = _expect_id(result, model, "create")
        logger.info("create: model [%s] new record has been created with id [%s]", model, record_id)
        return record_id

    def write(self, model: str, record_id: int, row: Dict[str, Any]) -> None:
        """
        Update fields of one record.

        :param model: Model name.
        :type model: str
        :param record_id: Record id.
        :type record_id: int
        :param row: Field values to change.
        :type row: dict

        :raises ~odoo_xmlrpc.core.errors.CallMethodError: If the call fails.
        """
        if not isinstance(row, dict):
            raise TypeError("row must be a dict")
        with self._client._scoped_rpc("records.write", model=model, record_id=record_id, row=row) as rpc:
            rpc._execute_kw(model, "write", [[record_id], row], operation="records.write")
        logger.info("write: model [%s] record id [%s] has been updated", model, record_id)

    def unlink(self, model: str, ids: Union[int, List[int]]) -> None:
        """
        Delete one or more records.

        A single id is sent as ``[[id]]``. A list is sent as a domain with one
        ``["id", "=", id]`` triple per id. An empty list does nothing.

        :param model: Model name.
        :type model: str
        :param ids: Record id or list of ids.
        :type ids: int or list[int]

        :raises TypeError: If ``ids`` is neither an int nor a list of ints.
        :raises ~odoo_xmlrpc.core.errors.CallMethodError: If the call fails.
        """
        if isinstance(ids, int) and not isinstance(ids, bool):
            with self._client._scoped_rpc("records.unlink", model=model, ids=ids) as rpc:
                rpc._execute_kw(model, "unlink", [[ids]], operation="records.unlink")
            logger.info("unlink: model [%s] record [%s] has been deleted", model, ids)
            return
        if not isinstance(ids, (list, tuple)):
            raise TypeError("ids must be int or list[int]")
        ids = list(ids)
        if not ids:
            return
        domain = to_domain([SearchFilter.eq("id", i) for i in ids])
        with self._client._scoped_rpc("records.unlink", model=model, ids=ids) as rpc:
            rpc._execute_kw(model, "unlink", [domain], operation="records.unlink")
        logger.info("unlink: model [%s] records [%s] have been deleted", model, ",".join(str(i) for i in ids))

    def message_post(
        self,
        model: str,
        record_ids: Union[int, List[int]],
        body: str,
        message_type: Union[MessageType, str] = MessageType.COMMENT,
    ) -> int:
        """
        Post a chatter message on records of a model inheriting ``mail.thread``.

        :param model: Model name, e.g. ``"purchase.order"``.
        :type model: str
        :param record_ids: Record id or list of ids the message is posted on.
        :type record_ids: int or list[int]
        :param body: Message body (HTML allowed).
        :type body: str
        :param message_type: Message category, as a member or its name (``"comment"``). Defaults to ``COMMENT``.
        :type message_type: MessageType or str
        :return: Id of the created ``mail.message``.
        :rtype: int

        :raises TypeError: If ``record_ids`` is neither an int nor a list of ints,
            or ``message_type`` is neither a MessageType nor a str.
        :raises ValueError: If ``message_type`` names no known message type.
        :raises ~odoo_xmlrpc.core.errors.CallMethodError: If the call fails.
        """
        if isinstance(record_ids, int) and not isinstance(record_ids, bool):
            ids = [record_ids]
        elif isinstance(record_ids, (list, tuple)) and all(
            isinstance(i, int) and not isinstance(i, bool) for i in record_ids
        ):
            ids = list(record_ids)
        else:
            raise TypeError("record_ids must be int or list[int]")
        if isinstance(message_type, str):
            message_type = MessageType(message_type.lower())
        elif not isinstance(message_type, MessageType):
            raise TypeError("message_type must be MessageType or str")

        with self._client._scoped_rpc(
            "records.message_post", model=model, record_ids=record_ids, body=body, message_type=message_type
        ) as rpc:
            kwargs = {
                "body": body,
                "message_type": message_type.wire_name,
                "subtype_xmlid": MESSAGE_SUBTYPE_COMMENT,
            }
            result = rpc._execute_kw(model, "message_post", ids, kwargs, operation="records.message_post")
        return _expect_id(result, model, "message_post")


__all__ = ["RecordOperations"]
