"""Format registry — ?format= resolution and JSON encoding."""

import json

import pytest

from restwire.api.formats import FormatRegistry, JsonFormat, format_registry
from restwire.shared.core.exceptions import FormatNotImplementedError


@pytest.mark.parametrize("value", [None, ""])
def test_missing_format_resolves_to_default(value):
    assert format_registry.resolve(value).name == "json"


def test_json_resolves():
    fmt = format_registry.resolve("json")

    assert isinstance(fmt, JsonFormat)
    assert fmt.media_type == "application/json"


@pytest.mark.parametrize("value", ["blah", "JSON", "json "])
def test_unknown_format_raises_not_implemented(value):
    with pytest.raises(FormatNotImplementedError) as exc_info:
        format_registry.resolve(value)

    assert exc_info.value.status_code == 501
    assert exc_info.value.message == f"Format not implemented: {value}"


def test_registry_lists_registered_names():
    registry = FormatRegistry([JsonFormat()])

    assert registry.names() == ["json"]
    assert registry.default.name == "json"


def test_json_encode_is_compact_and_sorted():
    body = JsonFormat().encode({"success": True, "result": {"b": 1, "a": "é"}})

    assert body == '{"result":{"a":"é","b":1},"success":true}'.encode("utf-8")


def test_json_decode_rejects_malformed_input():
    with pytest.raises(json.JSONDecodeError):
        JsonFormat().decode(b"{")
