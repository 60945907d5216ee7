from __future__ import annotations

import types

from chatwire.base.cancellation import CancelledError
from chatwire.base.errors import (
    ClientError,
    DecodeError,
    ErrorCode,
    InvalidMessageError,
    StreamNotSupportedError,
    TransportError,
    UnsupportedModelError,
    classify_exception,
    status_to_code,
)


def test_classify_client_error_passthrough():
    e = ClientError("nope", code=ErrorCode.AUTH, model="x")
    assert classify_exception(e) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests


def test_classify_http_status_mapping():
    # Direct attr
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101 - assert is appropriate in unit tests
    # response.status_code
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests
    # .status
    e3 = types.SimpleNamespace(status=429)
    assert classify_exception(e3) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests


def test_status_to_code_fallbacks():
    assert status_to_code(418) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests
    assert status_to_code(507) is ErrorCode.SERVER_ERROR  # nosec B101 - assert is appropriate in unit tests


def test_classify_builtin_timeouts_and_cancellation():
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(CancelledError("x")) is ErrorCode.CANCELLED  # nosec B101 - assert is appropriate in unit tests


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("Invalid API key")) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests


def test_subclass_default_codes():
    assert DecodeError("x").code is ErrorCode.DECODE  # nosec B101 - assert is appropriate in unit tests
    assert InvalidMessageError("x").code is ErrorCode.INVALID_MESSAGE  # nosec B101 - assert is appropriate in unit tests
    assert StreamNotSupportedError().code is ErrorCode.STREAM_UNSUPPORTED  # nosec B101 - assert is appropriate in unit tests
    assert UnsupportedModelError().code is ErrorCode.UNSUPPORTED_MODEL  # nosec B101 - assert is appropriate in unit tests
    assert "streaming is not supported" in StreamNotSupportedError().message  # nosec B101 - assert is appropriate in unit tests


def test_all_errors_share_one_family():
    for err in (DecodeError("x"), InvalidMessageError("x"), TransportError("x"), UnsupportedModelError()):
        assert isinstance(err, ClientError)  # nosec B101 - assert is appropriate in unit tests
        assert isinstance(err, Exception)  # nosec B101 - assert is appropriate in unit tests


def test_transport_error_str_includes_endpoint_and_status():
    err = TransportError("denied", code=ErrorCode.AUTH, status_code=401, endpoint="/chat/completions")
    assert str(err) == "/chat/completions [401] auth: denied"  # nosec B101 - assert is appropriate in unit tests
