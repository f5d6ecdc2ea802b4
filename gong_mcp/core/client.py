# =============================================================================
# gong_mcp/core/client.py  —  Gong REST API Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Translates the two high-level operations into authenticated HTTP calls
#   against the Gong v2 API and returns the parsed JSON bodies untouched:
#
#     list_calls()           → GET  /v2/calls
#     retrieve_transcripts() → POST /v2/calls/transcript
#
# AUTHENTICATION:
#   Gong requires FOUR auth headers on every request, on top of the JSON
#   content type.  Dropping any one of them gets the request rejected:
#
#     Authorization      Basic base64("key:secret")
#     X-Gong-AccessKey   the raw access key
#     X-Gong-Timestamp   fresh ISO-8601 timestamp (see signer.utc_timestamp)
#     X-Gong-Signature   HMAC over method/path/timestamp/payload (see signer.sign)
#
# FAILURES:
#   Connection errors, non-2xx statuses and bodies that aren't JSON are all
#   raised as GongAPIError.  There is no retry here;
#   the caller decides what to tell the agent.
# =============================================================================

import base64
import logging
from datetime import datetime
from typing import Any, Callable, Optional, Sequence

import httpx

from gong_mcp.core.config import GongCredentials
from gong_mcp.core.models import ListCallsResponse, RetrieveTranscriptsResponse
from gong_mcp.core.signer import serialize_payload, sign, utc_timestamp

GONG_API_URL = "https://api.gong.io/v2"

logger = logging.getLogger(__name__)


class GongAPIError(Exception):
    """A request to the Gong API failed."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


def _error_detail(payload: Any) -> str:
    """Pull a readable message out of a Gong error body.

    Gong reports errors as ``{"requestId": ..., "errors": ["..."]}``; other
    gateways in front of it sometimes use ``message`` instead.
    """
    if isinstance(payload, dict):
        errors = payload.get("errors")
        if isinstance(errors, list) and errors:
            return "; ".join(str(e) for e in errors)
        if payload.get("message"):
            return str(payload["message"])
    elif isinstance(payload, str):
        return payload.strip()[:500]
    return ""


class GongClient:
    """Owns the credentials and issues signed requests to Gong."""

    def __init__(
        self,
        credentials: GongCredentials,
        *,
        base_url: str = GONG_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._credentials = credentials
        self._base_url = base_url.rstrip("/")
        # transport and clock are seams for tests (httpx.MockTransport, a
        # frozen clock); production uses httpx's default transport.
        self._transport = transport
        self._clock = clock

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------
    def auth_headers(self, method: str, path: str, payload: Any = None) -> dict[str, str]:
        """Build the full header set for one request, with a fresh timestamp."""
        timestamp = utc_timestamp(self._clock() if self._clock else None)
        key = self._credentials.access_key
        secret = self._credentials.access_secret
        basic = base64.b64encode(f"{key}:{secret}".encode("utf-8")).decode("ascii")
        return {
            "Content-Type": "application/json",
            "Authorization": f"Basic {basic}",
            "X-Gong-AccessKey": key,
            "X-Gong-Timestamp": timestamp,
            "X-Gong-Signature": sign(secret, method, path, timestamp, payload),
        }

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------
    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, str]] = None,
        body: Optional[dict[str, Any]] = None,
    ) -> Any:
        # Writes sign the body, reads sign the query parameters.
        payload = body if body is not None else params
        headers = self.auth_headers(method, path, payload)
        content = serialize_payload(body).encode("utf-8") if body is not None else None

        try:
            async with httpx.AsyncClient(transport=self._transport) as http:
                response = await http.request(
                    method,
                    f"{self._base_url}{path}",
                    params=params or None,
                    content=content,
                    headers=headers,
                )
        except httpx.RequestError as exc:
            raise GongAPIError(f"Could not reach the Gong API: {exc}") from exc

        return self._parse_response(method, path, response)

    @staticmethod
    def _parse_response(method: str, path: str, response: httpx.Response) -> Any:
        status = response.status_code
        logger.debug(f"{method} {path} -> {status}")

        if not 200 <= status < 300:
            try:
                payload: Any = response.json()
            except ValueError:
                payload = response.text
            detail = _error_detail(payload)
            message = f"Gong API request {method} {path} failed with status {status}"
            if detail:
                message = f"{message}: {detail}"
            raise GongAPIError(message, status_code=status, payload=payload)

        try:
            return response.json()
        except ValueError as exc:
            raise GongAPIError(
                f"Gong API returned a malformed JSON body for {method} {path}",
                status_code=status,
                payload=response.text,
            ) from exc

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    async def list_calls(
        self,
        from_date_time: Optional[str] = None,
        to_date_time: Optional[str] = None,
    ) -> ListCallsResponse:
        """List calls, optionally bounded by ISO-8601 start/end date-times.

        Only the bounds that were supplied are sent; an inverted range is
        forwarded as-is and left for Gong to reject.
        """
        params: dict[str, str] = {}
        if from_date_time:
            params["fromDateTime"] = from_date_time
        if to_date_time:
            params["toDateTime"] = to_date_time
        return await self._request("GET", "/calls", params=params)

    async def retrieve_transcripts(self, call_ids: Sequence[str]) -> RetrieveTranscriptsResponse:
        """Fetch transcripts for the given call IDs.

        The three include* flags are always on.  An empty ID list is forwarded;
        Gong decides whether that is an error.
        """
        body = {
            "filter": {
                "callIds": list(call_ids),
                "includeEntities": True,
                "includeInteractionsSummary": True,
                "includeTrackers": True,
            }
        }
        return await self._request("POST", "/calls/transcript", body=body)
