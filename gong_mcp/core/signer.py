# =============================================================================
# gong_mcp/core/signer.py  —  Request Signing
# =============================================================================
#
# Gong expects every request to prove possession of the access secret with
# an HMAC bound to the exact request being made:
#
#     string_to_sign = METHOD \n PATH \n TIMESTAMP \n PAYLOAD_JSON
#     signature      = base64( HMAC-SHA256(secret, string_to_sign) )
#
# PAYLOAD_JSON is the request body for writes and the query parameters for
# reads, serialized compactly.  A request with no payload at all signs the
# empty string; an EMPTY mapping is still a payload and signs as "{}".
#
# The body that goes over the wire is produced by the same serialize_payload()
# call, so the signed bytes and the sent bytes can never drift apart.
#
# The timestamp is part of the signed string, so it must be fresh for every
# request: a captured request cannot be replayed once upstream stops
# accepting its timestamp.
# =============================================================================

import base64
import hashlib
import hmac
import json
from datetime import datetime, timezone
from typing import Any, Optional


def serialize_payload(payload: Any) -> str:
    """Canonical JSON for a payload: no whitespace, insertion order, raw UTF-8."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-03-01T09:30:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def string_to_sign(method: str, path: str, timestamp: str, payload: Any = None) -> str:
    body = "" if payload is None else serialize_payload(payload)
    return f"{method}\n{path}\n{timestamp}\n{body}"


def sign(secret: str, method: str, path: str, timestamp: str, payload: Any = None) -> str:
    """Compute the X-Gong-Signature value for one request.

    Args:
        secret: The Gong access secret (HMAC key).
        method: Upper-case HTTP method, e.g. "GET".
        path: Request path relative to the API root, starting with "/".
        timestamp: The same ISO-8601 string sent in X-Gong-Timestamp.
        payload: Request body (writes) or query parameters (reads), or None.

    Returns:
        The standard-base64 encoding of the raw HMAC-SHA256 digest.
    """
    message = string_to_sign(method, path, timestamp, payload)
    mac = hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        digestmod=hashlib.sha256,
    )
    return base64.b64encode(mac.digest()).decode("ascii")
