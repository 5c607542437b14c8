"""Response envelope — exactly one of result/error on the wire."""

from restwire.shared.core.exceptions import (
    FormatNotImplementedError,
    MalformedBodyError,
    ResourceHandlerError,
)
from restwire.shared.schemas.envelope import ResponseEnvelope


def test_success_envelope_carries_result_only():
    assert ResponseEnvelope.ok({"foo": "bar"}).to_dict() == {
        "result": {"foo": "bar"},
        "success": True,
    }


def test_success_without_result_omits_result():
    assert ResponseEnvelope.ok(None).to_dict() == {"success": True}


def test_failure_envelope_carries_error_only():
    payload = ResponseEnvelope.fail("no resource").to_dict()

    assert payload == {"error": "no resource", "success": False}
    assert list(payload) == ["error", "success"]


def test_falsy_results_are_kept():
    assert ResponseEnvelope.ok([]).to_dict() == {"result": [], "success": True}
    assert ResponseEnvelope.ok(0).to_dict() == {"result": 0, "success": True}


def test_exceptions_render_failure_envelopes():
    assert FormatNotImplementedError("xml").to_envelope() == {
        "error": "Format not implemented: xml",
        "success": False,
    }
    assert MalformedBodyError("bad").status_code == 500


def test_handler_error_keeps_original_text():
    cause = RuntimeError("couldn't create")
    exc = ResourceHandlerError("create", cause)

    assert exc.message == "couldn't create"
    assert exc.status_code == 500
    assert exc.cause is cause
    assert exc.action == "create"
