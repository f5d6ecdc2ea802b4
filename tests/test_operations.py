"""Tests for the operation registry and argument shape checks."""
import pytest

from gong_mcp.core.models import Invalid, ListCallsArgs, RetrieveTranscriptsArgs, Valid
from gong_mcp.tools.operations import OPERATIONS, get_operation, validate_arguments


def test_registry_declares_exactly_two_operations():
    assert sorted(OPERATIONS) == ["list_calls", "retrieve_transcripts"]


def test_list_calls_schema_has_only_optional_string_bounds():
    schema = get_operation("list_calls").input_schema
    assert schema["type"] == "object"
    assert {k: v["type"] for k, v in schema["properties"].items()} == {
        "fromDateTime": "string",
        "toDateTime": "string",
    }
    assert "required" not in schema


def test_retrieve_transcripts_schema_requires_string_array():
    schema = get_operation("retrieve_transcripts").input_schema
    assert schema["required"] == ["callIds"]
    assert schema["properties"]["callIds"]["type"] == "array"
    assert schema["properties"]["callIds"]["items"] == {"type": "string"}


def test_unknown_operation_lookup_returns_none():
    assert get_operation("list_users") is None


@pytest.mark.parametrize(
    "arguments, expected",
    [
        ({}, ListCallsArgs()),
        ({"fromDateTime": "2024-03-01T00:00:00Z"}, ListCallsArgs(from_date_time="2024-03-01T00:00:00Z")),
        (
            {"fromDateTime": "2024-03-01T00:00:00Z", "toDateTime": "2024-03-31T23:59:59Z"},
            ListCallsArgs("2024-03-01T00:00:00Z", "2024-03-31T23:59:59Z"),
        ),
        # An inverted range is not checked locally.
        (
            {"fromDateTime": "2024-04-01T00:00:00Z", "toDateTime": "2024-03-01T00:00:00Z"},
            ListCallsArgs("2024-04-01T00:00:00Z", "2024-03-01T00:00:00Z"),
        ),
    ],
)
def test_valid_list_calls_arguments(arguments, expected):
    assert validate_arguments("list_calls", arguments) == Valid(expected)


@pytest.mark.parametrize(
    "arguments, expected",
    [
        ({"callIds": ["abc"]}, RetrieveTranscriptsArgs(call_ids=("abc",))),
        ({"callIds": []}, RetrieveTranscriptsArgs(call_ids=())),
    ],
)
def test_valid_retrieve_transcripts_arguments(arguments, expected):
    assert validate_arguments("retrieve_transcripts", arguments) == Valid(expected)


@pytest.mark.parametrize(
    "name, arguments, reason",
    [
        ("list_calls", None, "No arguments provided"),
        ("list_calls", {"fromDateTime": 1}, "Invalid arguments for list_calls"),
        ("list_calls", {"toDateTime": ["2024-03-01"]}, "Invalid arguments for list_calls"),
        ("retrieve_transcripts", {"callIds": None}, "Invalid arguments for retrieve_transcripts"),
        ("retrieve_transcripts", {"callIds": ("abc",)}, "Invalid arguments for retrieve_transcripts"),
        ("retrieve_transcripts", {"callIds": [None]}, "Invalid arguments for retrieve_transcripts"),
        ("something_else", {}, "Unknown tool: something_else"),
    ],
)
def test_invalid_arguments(name, arguments, reason):
    assert validate_arguments(name, arguments) == Invalid(reason)


def test_retrieve_transcripts_args_require_call_ids():
    with pytest.raises(TypeError):
        RetrieveTranscriptsArgs()
