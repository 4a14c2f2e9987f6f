"""Tests for result codes and envelopes."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from etcd_workbench.api.result import ResultCode, ResultEnvelope, envelope_response


class TestResultCode:
    """Tests for the three construction forms."""

    def test_codes(self) -> None:
        assert ResultCode.OK.code == 0
        assert ResultCode.INVALID_KEY.code == 10001
        assert ResultCode.CONNECT_ERROR.code == 10002

    def test_result_without_payload(self) -> None:
        envelope = ResultCode.OK.result()

        assert envelope == ResultEnvelope(code=0, msg="ok", data=None)

    def test_result_with_payload(self) -> None:
        envelope = ResultCode.CONNECT_ERROR.result({"key": "/a"})

        assert envelope.code == 10002
        assert envelope.msg == "Connect error"
        assert envelope.data == {"key": "/a"}

    def test_result_with_message_and_payload(self) -> None:
        envelope = ResultCode.INVALID_KEY.result(False, message="Invalid key spec: bad length")

        assert envelope.msg == "Invalid key spec: bad length"
        assert envelope.data is False

    def test_empty_message_override_is_kept(self) -> None:
        assert ResultCode.CONNECT_ERROR.result(False, message="").msg == ""


class TestResultEnvelope:
    """Tests for envelope immutability and rendering."""

    def test_is_frozen(self) -> None:
        envelope = ResultCode.OK.result()

        with pytest.raises(ValidationError):
            envelope.code = 1  # type: ignore[misc]

    def test_response_is_200_with_wire_fields(self) -> None:
        response = envelope_response(ResultCode.CONNECT_ERROR.result(False, message="conn refused"))

        assert response.status_code == 200
        assert json.loads(response.body) == {"code": 10002, "msg": "conn refused", "data": False}
        assert response.headers["access-control-allow-origin"] == "*"
