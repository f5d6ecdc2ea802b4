# =============================================================================
# gong_mcp/tools/dispatcher.py  —  Operation Dispatch & Result Envelopes
# =============================================================================
#
# WHAT THIS FILE DOES:
#   The single entry point for an incoming tool call.  Given an operation
#   name and its raw arguments it:
#
#     1. rejects unknown operation names (no validation, no network call)
#     2. validates the arguments into a typed variant (tools/operations.py)
#     3. calls the matching GongClient method
#     4. wraps the result, or ANY failure, in a ToolEnvelope
#
# THE ONE POLICY DECISION:
#   Failures are never raised past dispatch().  A bad argument, a 401 from
#   Gong, a dropped connection: every one of them comes back as an ordinary
#   envelope with is_error=True and a readable message, so the agent always
#   receives a well-formed reply it can reason about.
#
# LOGGING:
#   Everything goes to the injected logger, which main() points at STDERR.
#   STDOUT carries the MCP JSON stream; a stray print there would corrupt it.
#   Color codes make requests (cyan), progress (yellow) and responses (green)
#   easy to tell apart in a terminal.
# =============================================================================

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from gong_mcp.core.client import GongClient
from gong_mcp.core.models import Invalid, ListCallsArgs, OperationArgs, RetrieveTranscriptsArgs
from gong_mcp.tools.operations import get_operation, validate_arguments

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"


def _count(result: Any, key: str) -> int:
    items = result.get(key) if isinstance(result, dict) else None
    return len(items) if isinstance(items, list) else 0


@dataclass
class ToolEnvelope:
    """Uniform success/failure wrapper returned for every invocation."""

    content: list[dict[str, str]] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolEnvelope":
        return cls(content=[{"type": "text", "text": text}], is_error=False)

    @classmethod
    def failure(cls, text: str) -> "ToolEnvelope":
        return cls(content=[{"type": "text", "text": text}], is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(item["text"] for item in self.content)

    def to_dict(self) -> dict[str, Any]:
        """The MCP wire form: ``{"content": [...], "isError": bool}``."""
        return {"content": list(self.content), "isError": self.is_error}


class Dispatcher:
    """Routes operation requests to the GongClient and envelopes the result."""

    def __init__(self, client: GongClient, logger: Optional[logging.Logger] = None) -> None:
        self._client = client
        self._logger = logger or logging.getLogger(__name__)

    # -------------------------------------------------------------------------
    # Logging helpers
    # -------------------------------------------------------------------------
    def _log_request(self, name: str, arguments: Any) -> None:
        if isinstance(arguments, dict):
            param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
        else:
            param_str = repr(arguments)
        self._logger.info(f"{_CYAN}{name} called with: {param_str}{_RESET}")

    def _log_status(self, message: str) -> None:
        self._logger.info(f"{_YELLOW}  → {message}{_RESET}")

    def _log_response(self, name: str, envelope: ToolEnvelope) -> ToolEnvelope:
        # Transcripts can be megabytes long, so only the size is logged.
        outcome = "error" if envelope.is_error else "ok"
        self._logger.info(f"{_GREEN}  ← {name} response ({outcome}, {len(envelope.text)} chars){_RESET}")
        return envelope

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------
    async def dispatch(self, name: str, arguments: Any) -> ToolEnvelope:
        """Handle one tool call end to end.  Never raises.

        Args:
            name: The operation name sent by the agent.
            arguments: The raw argument mapping, or None if none was sent.

        Returns:
            A success envelope holding the upstream JSON pretty-printed, or a
            failure envelope holding the error message.
        """
        self._log_request(name, arguments)

        if get_operation(name) is None:
            self._log_status(f"Unknown tool '{name}'")
            return self._log_response(name, ToolEnvelope.failure(f"Unknown tool: {name}"))

        try:
            result = await self._invoke(name, arguments)
        except Exception as exc:
            self._log_status(f"Failed: {exc}")
            return self._log_response(name, ToolEnvelope.failure(f"Error: {exc}"))

        return self._log_response(name, ToolEnvelope.success(json.dumps(result, indent=2, ensure_ascii=False)))

    async def _invoke(self, name: str, arguments: Any) -> Any:
        validation = validate_arguments(name, arguments)
        if isinstance(validation, Invalid):
            raise ValueError(validation.reason)
        return await self._call(validation.args)

    async def _call(self, args: OperationArgs) -> Any:
        if isinstance(args, ListCallsArgs):
            result = await self._client.list_calls(args.from_date_time, args.to_date_time)
            self._log_status(f"Got {_count(result, 'calls')} calls")
            return result
        if isinstance(args, RetrieveTranscriptsArgs):
            result = await self._client.retrieve_transcripts(list(args.call_ids))
            self._log_status(f"Got {_count(result, 'transcripts')} transcripts")
            return result
        raise TypeError(f"Unsupported arguments: {args!r}")
