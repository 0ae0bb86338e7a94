# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# Transport subcodes
TRANSPORT_MALFORMED_URL = "transport_malformed_url"
TRANSPORT_CONNECTION = "transport_connection"
TRANSPORT_PROTOCOL = "transport_protocol"
TRANSPORT_MARSHAL = "transport_marshal"
TRANSPORT_FAULT = "transport_fault"

# HTTP statuses worth flagging as transient on TransportError
TRANSIENT_HTTP_STATUSES = {429, 502, 503, 504}

# Authorization subcodes
AUTH_INVALID_LOGIN = "auth_invalid_login"
AUTH_TRANSPORT_FAILURE = "auth_transport_failure"

# Call subcodes
CALL_AUTHORIZATION_FAILED = "call_authorization_failed"
CALL_TRANSPORT_FAILURE = "call_transport_failure"
CALL_UNEXPECTED_RESULT = "call_unexpected_result"


def http_subcode(status: int) -> str:
    return f"http_{status}"
