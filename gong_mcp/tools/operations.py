# =============================================================================
# gong_mcp/tools/operations.py  —  Operation Registry & Argument Shapes
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares the two operations the server exposes (name, description and a
#   JSON-schema for its arguments) and turns a raw argument mapping into one of
#   the typed variants from core/models.py.
#
# THE DESCRIPTIONS MATTER:
#   The agent reads them to decide WHEN to call each tool and WHAT to pass.
#   Keep them specific about inputs (ISO date-times, Gong call IDs) and
#   outputs.
#
# VALIDATION RETURNS, IT DOES NOT RAISE:
#   validate_arguments() answers Valid(args) or Invalid(reason).  The
#   dispatcher branches on the tag; nothing downstream ever touches the raw
#   mapping.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from gong_mcp.core.models import (
    Invalid,
    ListCallsArgs,
    RetrieveTranscriptsArgs,
    Valid,
    ValidationResult,
)

LIST_CALLS = "list_calls"
RETRIEVE_TRANSCRIPTS = "retrieve_transcripts"


@dataclass(frozen=True)
class Operation:
    """Static, read-only metadata for one operation."""

    name: str
    description: str
    input_schema: dict


LIST_CALLS_OPERATION = Operation(
    name=LIST_CALLS,
    description=(
        "List Gong calls with optional date range filtering. Returns call details "
        "including ID, title, start/end times, participants, and duration."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "fromDateTime": {
                "type": "string",
                "description": "Start date/time in ISO format (e.g. 2024-03-01T00:00:00Z)",
            },
            "toDateTime": {
                "type": "string",
                "description": "End date/time in ISO format (e.g. 2024-03-31T23:59:59Z)",
            },
        },
    },
)

RETRIEVE_TRANSCRIPTS_OPERATION = Operation(
    name=RETRIEVE_TRANSCRIPTS,
    description=(
        "Retrieve transcripts for specified call IDs. Returns detailed transcripts "
        "including speaker IDs, topics, and timestamped sentences."
    ),
    input_schema={
        "type": "object",
        "properties": {
            "callIds": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Array of Gong call IDs to retrieve transcripts for",
            },
        },
        "required": ["callIds"],
    },
)

OPERATIONS: dict[str, Operation] = {
    op.name: op for op in (LIST_CALLS_OPERATION, RETRIEVE_TRANSCRIPTS_OPERATION)
}


def get_operation(name: str) -> Optional[Operation]:
    return OPERATIONS.get(name)


# -----------------------------------------------------------------------------
# Shape checks
# -----------------------------------------------------------------------------
def _parse_list_calls(arguments: Mapping[str, Any]) -> Optional[ListCallsArgs]:
    from_dt = arguments.get("fromDateTime")
    to_dt = arguments.get("toDateTime")
    # Present-but-null counts as present: only real strings are accepted.
    if "fromDateTime" in arguments and not isinstance(from_dt, str):
        return None
    if "toDateTime" in arguments and not isinstance(to_dt, str):
        return None
    return ListCallsArgs(from_date_time=from_dt, to_date_time=to_dt)


def _parse_retrieve_transcripts(arguments: Mapping[str, Any]) -> Optional[RetrieveTranscriptsArgs]:
    call_ids = arguments.get("callIds")
    if not isinstance(call_ids, list):
        return None
    if not all(isinstance(call_id, str) for call_id in call_ids):
        return None
    return RetrieveTranscriptsArgs(call_ids=tuple(call_ids))


_PARSERS = {
    LIST_CALLS: _parse_list_calls,
    RETRIEVE_TRANSCRIPTS: _parse_retrieve_transcripts,
}


def validate_arguments(name: str, arguments: Any) -> ValidationResult:
    """Check raw tool arguments against the shape registered for ``name``.

    Args:
        name: A registered operation name.
        arguments: The raw arguments exactly as received from the transport.

    Returns:
        Valid(args) with the typed variant, or Invalid(reason).
    """
    parser = _PARSERS.get(name)
    if parser is None:
        return Invalid(f"Unknown tool: {name}")
    if arguments is None:
        return Invalid("No arguments provided")
    if not isinstance(arguments, Mapping):
        return Invalid(f"Invalid arguments for {name}")

    parsed = parser(arguments)
    if parsed is None:
        return Invalid(f"Invalid arguments for {name}")
    return Valid(parsed)
