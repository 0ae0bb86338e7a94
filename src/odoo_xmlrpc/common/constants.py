# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for the Odoo external XML-RPC API.

Endpoint paths and procedure names are fixed by the server and must be used
verbatim.
"""

# Endpoint paths, appended to the server base URL
PATH_COMMON = "/xmlrpc/2/common"
PATH_OBJECT = "/xmlrpc/2/object"

# Remote procedure names
PROCEDURE_LOGIN = "login"
PROCEDURE_EXECUTE_KW = "execute_kw"

MESSAGE_SUBTYPE_COMMENT = "mail.mt_comment"
"""XML id of the message subtype attached to messages posted with ``message_post``."""

# OpenTelemetry attribute names
OTEL_ATTR_DB_SYSTEM = "db.system"
OTEL_ATTR_DB_OPERATION = "db.operation"
OTEL_ATTR_RPC_METHOD = "rpc.method"
OTEL_ATTR_SERVER_URL = "url.full"
OTEL_ATTR_HTTP_STATUS_CODE = "http.response.status_code"
OTEL_ATTR_ODOO_MODEL = "odoo.model"
OTEL_ATTR_ODOO_FAULT_CODE = "odoo.fault_code"
