# =============================================================================
# gong_mcp/core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Two families of shapes live here:
#
#   1. UPSTREAM SHAPES (TypedDicts): what Gong sends back.  We never build
#      or validate these ourselves; the dicts returned by the API are handed
#      to the agent verbatim.  The TypedDicts only document the fields the
#      agent can expect, so extra upstream fields survive untouched.
#
#   2. ARGUMENT VARIANTS (dataclasses): the validated, typed form of a
#      tool call's arguments.  Business logic only ever sees these, never
#      the raw argument mapping that came over the wire.
# =============================================================================

from dataclasses import dataclass
from typing import Optional, TypedDict, Union


# -----------------------------------------------------------------------------
# Upstream response shapes
# -----------------------------------------------------------------------------
class GongCall(TypedDict, total=False):
    """One call record as listed by ``GET /v2/calls``."""

    id: str
    title: str
    scheduled: str                     # ISO-8601, may be absent
    started: str                       # ISO-8601, may be absent
    duration: int                      # seconds
    direction: str                     # "Inbound", "Outbound", "Conference", ...
    system: str                        # Conferencing system, e.g. "Zoom"
    scope: str                         # "Internal" / "External"
    media: str                         # "Video" / "Audio"
    language: str
    url: str                           # Link to the call in the Gong UI


class TranscriptSentence(TypedDict):
    start: int                         # Offset from call start (milliseconds)
    text: str


class GongTranscript(TypedDict, total=False):
    """One speaker's share of a call transcript."""

    speakerId: str
    topic: str
    sentences: list[TranscriptSentence]


class ListCallsResponse(TypedDict, total=False):
    calls: list[GongCall]


class RetrieveTranscriptsResponse(TypedDict, total=False):
    transcripts: list[GongTranscript]


# -----------------------------------------------------------------------------
# Argument variants, one per operation
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ListCallsArgs:
    """Validated arguments for ``list_calls``.  Both bounds are optional."""

    from_date_time: Optional[str] = None
    to_date_time: Optional[str] = None


@dataclass(frozen=True)
class RetrieveTranscriptsArgs:
    """Validated arguments for ``retrieve_transcripts``."""

    call_ids: tuple[str, ...]


OperationArgs = Union[ListCallsArgs, RetrieveTranscriptsArgs]


# -----------------------------------------------------------------------------
# Validation result
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Valid:
    args: OperationArgs


@dataclass(frozen=True)
class Invalid:
    reason: str


ValidationResult = Union[Valid, Invalid]
